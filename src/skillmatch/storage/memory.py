"""内存表格存储：进程内列表，不落盘，用于测试与无文件演示。"""
from copy import deepcopy

from .base import Row, TableStore


class MemoryTableStore(TableStore):
    """按行保存在内存中；读写都做拷贝，调用方修改返回值不影响存储。"""

    def __init__(self, rows: list[Row] | None = None):
        self._rows: list[Row] = deepcopy(rows) if rows else []

    def read_rows(self) -> list[Row]:
        return deepcopy(self._rows)

    def write_rows(self, rows: list[Row]) -> None:
        self._rows = deepcopy(rows)
