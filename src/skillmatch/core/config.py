"""
配置：从环境变量读取，供 HTTP 入口、存储与日志使用。

读取时机：CORS 来源与 public 目录在 skillmatch.api.app 导入时读一次（中间件与静态挂载随之固定）；
数据目录、上传目录、表格文件名与存储后端每次调用重新读取。
"""
import os
from pathlib import Path

# 可选加载 .env（若存在）：先项目根（与 pyproject.toml 同层），再当前工作目录
_env_paths = [
    Path(__file__).resolve().parents[3] / ".env",  # 从 src/skillmatch/core 往上的项目根
    Path.cwd() / ".env",
]
for _p in _env_paths:
    if _p.exists():
        from dotenv import load_dotenv
        load_dotenv(_p)
        break

# src/skillmatch/core/config.py -> parents[3] = 项目根
PROJECT_ROOT = Path(__file__).resolve().parents[3]

DEFAULT_CORS_ORIGIN = "https://cmdf.onrender.com"
DEFAULT_DATASET_FILE = "jobrolespskillsframeworks.xlsx"
DEFAULT_SIGNUPS_FILE = "signups.xlsx"


def get_port() -> int:
    """监听端口：PORT（托管平台注入），默认 3000。"""
    return int(os.getenv("PORT") or 3000)


def get_host() -> str:
    return os.getenv("SKILLMATCH_HOST") or "0.0.0.0"


def get_cors_origin() -> str:
    """唯一允许的跨域来源。"""
    return (os.getenv("SKILLMATCH_CORS_ORIGIN") or DEFAULT_CORS_ORIGIN).strip()


def _dir_from_env(name: str, default: str) -> Path:
    env_path = os.getenv(name)
    if env_path:
        return Path(env_path)
    return PROJECT_ROOT / default


def get_data_dir() -> Path:
    """持久化表格目录（参考数据集与报名表）。"""
    return _dir_from_env("SKILLMATCH_DATA_DIR", "data")


def get_uploads_dir() -> Path:
    """上传简历的临时目录。"""
    return _dir_from_env("SKILLMATCH_UPLOADS_DIR", "uploads")


def get_public_dir() -> Path:
    """静态页面目录（index1.html、signup.html 等）。"""
    return _dir_from_env("SKILLMATCH_PUBLIC_DIR", "public")


def get_dataset_path() -> Path:
    """职位 → 技能/框架参考表路径。"""
    name = os.getenv("SKILLMATCH_DATASET_FILE") or DEFAULT_DATASET_FILE
    return get_data_dir() / name


def get_signups_path() -> Path:
    """报名记录表路径。"""
    name = os.getenv("SKILLMATCH_SIGNUPS_FILE") or DEFAULT_SIGNUPS_FILE
    return get_data_dir() / name


def storage_backend() -> str:
    """表格存储后端：excel（默认）或 memory（仅进程内，用于演示与测试）。"""
    return (os.getenv("SKILLMATCH_STORAGE") or "excel").strip().lower()


def get_log_level() -> str:
    return (os.getenv("SKILLMATCH_LOG_LEVEL") or "INFO").strip().upper()


def ensure_runtime_dirs() -> None:
    """启动时确保数据目录与上传目录存在。"""
    get_data_dir().mkdir(parents=True, exist_ok=True)
    get_uploads_dir().mkdir(parents=True, exist_ok=True)
