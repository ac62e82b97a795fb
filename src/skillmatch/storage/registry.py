"""根据配置返回参考数据集与报名表使用的存储。"""
from skillmatch.core.config import get_dataset_path, get_signups_path, storage_backend
from skillmatch.storage.base import Row, TableStore
from skillmatch.storage.excel import ExcelTableStore
from skillmatch.storage.memory import MemoryTableStore
from skillmatch.storage.samples import SAMPLE_ROLES

# memory 后端需要跨请求保留数据，按表名缓存实例
_MEMORY_STORES: dict[str, MemoryTableStore] = {}


def _memory_store(name: str, initial: list[Row] | None = None) -> MemoryTableStore:
    if name not in _MEMORY_STORES:
        _MEMORY_STORES[name] = MemoryTableStore(initial)
    return _MEMORY_STORES[name]


def get_dataset_store() -> TableStore:
    """
    参考数据集（JOB ROLES / PROGRAMMING SKILLS / FRAMEWORKS）的存储。
    SKILLMATCH_STORAGE=memory 时返回以内置示例职位初始化的进程内表，否则为数据目录下的 .xlsx。
    """
    if storage_backend() == "memory":
        return _memory_store("dataset", SAMPLE_ROLES)
    return ExcelTableStore(get_dataset_path(), sheet_name="Sheet1")


def get_signup_store() -> TableStore:
    """报名记录表的存储；新建时工作表名为 Signups。memory 后端初始为空表。"""
    if storage_backend() == "memory":
        return _memory_store("signups")
    return ExcelTableStore(get_signups_path(), sheet_name="Signups")
