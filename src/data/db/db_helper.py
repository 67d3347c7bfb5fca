from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import Optional

from src.core.config import enable_sql_debug, get_db_path

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1

META_DDL = """
CREATE TABLE IF NOT EXISTS meta (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL
);
"""


class DbHelper:
    """
    SQLite 连接/Schema 初始化 Helper。

    职责：
    - 初始化数据库文件与 meta 表（如不存在则创建）；
    - 提供带 RowFactory 的连接；
    - 维护一个进程内共享连接（简单场景），连接由本对象负责关闭。

    说明：days 表由 DayStore.ensure_schema() 自行创建，本 Helper 不感知业务表。
    """

    def __init__(self, db_path: Optional[str] = None) -> None:
        self.db_path = Path(db_path or get_db_path())
        self._conn: Optional[sqlite3.Connection] = None

    def get_connection(self) -> sqlite3.Connection:
        """
        获取（或创建）SQLite 连接。

        Returns:
            已初始化的 sqlite3.Connection，`row_factory` 已设置为 sqlite3.Row。
        """
        if self._conn is None:
            if str(self.db_path) != ":memory:" and self.db_path.parent:
                self.db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(str(self.db_path))
            conn.row_factory = sqlite3.Row
            if enable_sql_debug():
                conn.set_trace_callback(logger.debug)
            self._conn = conn
        return self._conn

    def init_schema_if_needed(self) -> None:
        """
        初始化 meta 表与 meta.schema_version（若未设置）。

        副作用：可能创建目录/文件，执行 DDL。
        """
        conn = self.get_connection()
        with conn:
            conn.executescript(META_DDL)
            row = conn.execute(
                "SELECT value FROM meta WHERE key = ?",
                ("schema_version",),
            ).fetchone()
            if row is None:
                conn.execute(
                    "INSERT INTO meta(key, value) VALUES (?, ?)",
                    ("schema_version", str(SCHEMA_VERSION)),
                )
            else:
                current_version = int(row["value"])
                if current_version < SCHEMA_VERSION:
                    raise RuntimeError(
                        f"[DbHelper] Schema 版本过旧（当前 v{current_version}，需要 v{SCHEMA_VERSION}）。"
                        f"请删除 {self.db_path} 后重新运行。"
                    )

    def close(self) -> None:
        """关闭连接并释放引用。"""
        if self._conn is not None:
            self._conn.close()
            self._conn = None
