"""
报名记录追加：读出整表 → 追加一行 → 整表写回。

不是事务操作，也没有跨进程锁；并发报名可能互相覆盖。
"""
from loguru import logger

from skillmatch.signups.schemas import SignupRecord
from skillmatch.storage.base import TableStore


def append_signup(store: TableStore, record: SignupRecord) -> int:
    """
    追加一条报名记录并写回存储，返回写入后的总行数。
    读写失败直接抛出，由 HTTP 层转为 500。
    """
    rows = store.read_rows()
    rows.append(record.to_row())
    store.write_rows(rows)
    logger.info(f"Recorded signup ({len(rows)} rows in table)")
    return len(rows)
