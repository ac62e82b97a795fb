"""
表格存储：参考数据集与报名表共用的读写接口。
- excel：.xlsx 文件（pandas + openpyxl），默认。
- memory：进程内列表，用于测试。
"""
from .base import Row, TableStore
from .excel import ExcelTableStore
from .memory import MemoryTableStore
from .registry import get_dataset_store, get_signup_store

__all__ = [
    "Row",
    "TableStore",
    "ExcelTableStore",
    "MemoryTableStore",
    "get_dataset_store",
    "get_signup_store",
]
