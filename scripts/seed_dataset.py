#!/usr/bin/env python3
"""
生成参考数据集表格（JOB ROLES / PROGRAMMING SKILLS / FRAMEWORKS），供 /upload 匹配使用。

数据源（按优先级）：
1. --source：CSV 文件，需含上述三列
2. 默认：内置示例职位

用法:
  uv run python scripts/seed_dataset.py [--source roles.csv] [--output data/jobrolespskillsframeworks.xlsx] [--force]
"""
import argparse
import sys
from pathlib import Path

import pandas as pd
from loguru import logger

from skillmatch.core.config import get_dataset_path
from skillmatch.core.logging import configure_logging
from skillmatch.matching.schemas import COLUMN_FRAMEWORKS, COLUMN_JOB_ROLE, COLUMN_SKILLS, RoleRequirement
from skillmatch.storage.excel import ExcelTableStore
from skillmatch.storage.samples import SAMPLE_ROLES


def load_source_rows(path: Path) -> list[dict]:
    """读取 CSV 并校验每行能解析为 RoleRequirement；缺列直接报错。"""
    df = pd.read_csv(path, dtype=str).fillna("")
    missing = {COLUMN_JOB_ROLE, COLUMN_SKILLS, COLUMN_FRAMEWORKS} - set(df.columns)
    if missing:
        raise ValueError(f"CSV 缺少列: {', '.join(sorted(missing))}")
    rows = df[[COLUMN_JOB_ROLE, COLUMN_SKILLS, COLUMN_FRAMEWORKS]].to_dict(orient="records")
    for row in rows:
        RoleRequirement.from_row(row)
    return rows


def main():
    parser = argparse.ArgumentParser(description="生成 skillmatch 参考数据集 .xlsx")
    parser.add_argument("--source", type=str, default="", help="CSV 路径；不传则写入内置示例职位")
    parser.add_argument("--output", type=str, default="", help="输出 .xlsx 路径（默认按配置的数据目录）")
    parser.add_argument("--force", action="store_true", help="目标已存在时覆盖")
    args = parser.parse_args()
    configure_logging()

    output = Path(args.output) if args.output else get_dataset_path()
    if output.exists() and not args.force:
        logger.error(f"{output} 已存在，使用 --force 覆盖")
        sys.exit(1)

    rows = load_source_rows(Path(args.source)) if args.source else SAMPLE_ROLES
    ExcelTableStore(output, sheet_name="Sheet1").write_rows(rows)
    logger.info(f"已写入 {len(rows)} 个职位到 {output}")


if __name__ == "__main__":
    main()
