"""表格存储抽象：按行读写整张表。"""
from abc import ABC, abstractmethod
from typing import Any

Row = dict[str, Any]


class TableStore(ABC):
    """表格存储接口：参考数据集与报名表都通过它读写。"""

    @abstractmethod
    def read_rows(self) -> list[Row]:
        """读取全部行；存储不存在时先创建空表。"""
        ...

    @abstractmethod
    def write_rows(self, rows: list[Row]) -> None:
        """用 rows 整体覆盖存储内容。"""
        ...
