"""
loguru 日志配置：去掉默认 sink，按配置级别输出到 stderr。
"""
import sys

from loguru import logger

from .config import get_log_level

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | {name}:{line} | <level>{message}</level>"


def configure_logging(level: str | None = None) -> None:
    """重置 loguru sink；level 不传则读 SKILLMATCH_LOG_LEVEL。"""
    logger.remove()
    logger.add(
        sys.stderr,
        format=LOG_FORMAT,
        level=level or get_log_level(),
        colorize=True,
    )
