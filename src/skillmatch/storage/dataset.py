"""
参考数据集访问：读取职位 → 技能/框架表，并解析为 RoleRequirement。

读取失败只记日志并返回空表，不向上抛出；上层据此得到「职位不存在」的结果。
"""
from __future__ import annotations

from loguru import logger
from pydantic import ValidationError

from skillmatch.matching.schemas import RoleRequirement
from skillmatch.storage.base import Row, TableStore


def load_table(store: TableStore) -> list[Row]:
    """读取整张表；存储不存在时由 store 创建空表。任何读取错误返回 []。"""
    try:
        return store.read_rows()
    except Exception as e:
        logger.error(f"Error reading table from {store!r}: {e}")
        return []


def load_requirements(store: TableStore) -> list[RoleRequirement]:
    """读取并解析参考数据集；缺少 JOB ROLES 的行跳过。"""
    requirements: list[RoleRequirement] = []
    for i, row in enumerate(load_table(store)):
        try:
            requirements.append(RoleRequirement.from_row(row))
        except (ValidationError, ValueError) as e:
            logger.warning(f"Skipping dataset row {i}: {e}")
    return requirements
