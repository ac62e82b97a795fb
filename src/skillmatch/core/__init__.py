# 配置与日志

from .config import (
    ensure_runtime_dirs,
    get_cors_origin,
    get_data_dir,
    get_dataset_path,
    get_host,
    get_port,
    get_public_dir,
    get_signups_path,
    get_uploads_dir,
    storage_backend,
)
from .logging import configure_logging

__all__ = [
    "ensure_runtime_dirs",
    "get_cors_origin",
    "get_data_dir",
    "get_dataset_path",
    "get_host",
    "get_port",
    "get_public_dir",
    "get_signups_path",
    "get_uploads_dir",
    "storage_backend",
    "configure_logging",
]
