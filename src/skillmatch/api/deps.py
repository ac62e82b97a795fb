"""
FastAPI 依赖项：表格存储与文本提取器。测试中用 app.dependency_overrides 替换为内存实现。
"""
from typing import Callable

from skillmatch.ingest.markitdown_convert import file_to_text
from skillmatch.storage.base import TableStore
from skillmatch.storage.registry import get_dataset_store, get_signup_store

TextExtractor = Callable[[str], str]


def dataset_store() -> TableStore:
    return get_dataset_store()


def signup_store() -> TableStore:
    return get_signup_store()


def text_extractor() -> TextExtractor:
    """上传文件路径 → 简历全文。"""
    return file_to_text
