"""
Excel 表格存储：pandas + openpyxl 读写 .xlsx，只使用第一个工作表。

写入为整表重写，无文件锁；并发写入时后写者覆盖先写者。
"""
from __future__ import annotations

from pathlib import Path

import pandas as pd
from loguru import logger

from .base import Row, TableStore


class ExcelTableStore(TableStore):
    """
    以单个 .xlsx 文件为后端的表格。
    sheet_name 仅在新建文件时使用；已有文件沿用其第一个工作表的名称。
    """

    def __init__(self, path: str | Path, sheet_name: str = "Sheet1"):
        self.path = Path(path)
        self.sheet_name = sheet_name

    def _ensure_exists(self) -> None:
        if self.path.exists():
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        logger.info(f"Creating empty table at {self.path}")
        pd.DataFrame().to_excel(self.path, sheet_name=self.sheet_name, index=False)

    def _existing_sheet_name(self) -> str:
        if not self.path.exists():
            return self.sheet_name
        with pd.ExcelFile(self.path) as book:
            return book.sheet_names[0] if book.sheet_names else self.sheet_name

    def read_rows(self) -> list[Row]:
        self._ensure_exists()
        df = pd.read_excel(self.path, sheet_name=0, dtype=str).fillna("")
        return df.to_dict(orient="records")

    def write_rows(self, rows: list[Row]) -> None:
        sheet = self._existing_sheet_name()
        self.path.parent.mkdir(parents=True, exist_ok=True)
        pd.DataFrame(rows).to_excel(self.path, sheet_name=sheet, index=False)

    def __repr__(self) -> str:
        return f"ExcelTableStore(path={str(self.path)!r}, sheet_name={self.sheet_name!r})"
