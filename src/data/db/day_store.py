from __future__ import annotations

import logging
import sqlite3
from datetime import date, datetime
from typing import Any, Sequence

from src.core.errors import DecodeError, StoreError
from src.core.models.day import Day

logger = logging.getLogger(__name__)

CREATE_TABLE = """
CREATE TABLE IF NOT EXISTS days (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    date DATE NOT NULL
)
"""

CREATE_DATE_INDEX = "CREATE UNIQUE INDEX IF NOT EXISTS ux_days_date ON days(date)"

SELECT_BY_DATE = "SELECT id, date FROM days WHERE date = ?"
SELECT_BY_ID = "SELECT id, date FROM days WHERE id = ?"
SELECT_RECENT = "SELECT id, date FROM days ORDER BY date DESC LIMIT ?"
INSERT_DATE = "INSERT INTO days (date) VALUES (?)"


class DayStore:
    """
    days 表的存储适配器（SQLite）。

    职责：把仓储意图翻译为参数化 SQL，把结果行解码为 Day；不含业务逻辑。

    约定：
    - 表结构：days(id INTEGER PRIMARY KEY AUTOINCREMENT, date DATE NOT NULL)；
    - date 列以 ISO 文本（YYYY-MM-DD）持久化，字符串序即日期序；
    - ux_days_date 唯一索引保证每个日期至多一行；
    - 所有 sqlite3.Error 均包装为 StoreError（附带语句与操作名）。

    连接为共享引用，本类不负责关闭。
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn

    def ensure_schema(self) -> None:
        """创建 days 表与日期唯一索引（幂等）。"""
        for statement in (CREATE_TABLE, CREATE_DATE_INDEX):
            try:
                with self.conn:
                    self.conn.execute(statement)
            except sqlite3.Error as err:
                raise StoreError(
                    f"初始化 days 表失败：{err}",
                    statement=statement,
                    operation="ensure_schema",
                ) from err

    def find_by_date(self, day: date) -> Day | None:
        return self.fetch_one(SELECT_BY_DATE, (day.isoformat(),), operation="find_by_date")

    def find_by_id(self, day_id: int) -> Day | None:
        return self.fetch_one(SELECT_BY_ID, (day_id,), operation="find_by_id")

    def list_recent(self, count: int) -> list[Day]:
        return self.fetch_all(SELECT_RECENT, (count,), operation="list_recent")

    def insert_date(self, day: date) -> int | None:
        """
        插入一行日期记录。

        Returns:
            新行 id；若唯一索引表明该日期已存在，返回 None。

        Raises:
            StoreError: 其他执行失败。
        """
        try:
            with self.conn:
                cursor = self.conn.execute(INSERT_DATE, (day.isoformat(),))
        except sqlite3.IntegrityError as err:
            if "UNIQUE" not in str(err).upper():
                raise StoreError(
                    f"插入 Day 失败：{err}", statement=INSERT_DATE, operation="insert_date"
                ) from err
            logger.debug("[DayStore] 日期已存在，跳过插入：%s", day.isoformat())
            return None
        except sqlite3.Error as err:
            raise StoreError(
                f"插入 Day 失败：{err}", statement=INSERT_DATE, operation="insert_date"
            ) from err
        return cursor.lastrowid

    def fetch_one(self, statement: str, params: Sequence[Any], *, operation: str) -> Day | None:
        """执行单行查询，未命中返回 None。"""
        try:
            cursor = self._cursor()
            row = cursor.execute(statement, params).fetchone()
        except sqlite3.Error as err:
            raise StoreError(
                f"查询 Day 失败：{err}", statement=statement, operation=operation
            ) from err
        if row is None:
            return None
        return row_to_day(row)

    def fetch_all(self, statement: str, params: Sequence[Any], *, operation: str) -> list[Day]:
        """执行多行查询。"""
        try:
            cursor = self._cursor()
            rows = cursor.execute(statement, params).fetchall()
        except sqlite3.Error as err:
            raise StoreError(
                f"执行查询失败：{err}", statement=statement, operation=operation
            ) from err
        return [row_to_day(r) for r in rows]

    def _cursor(self) -> sqlite3.Cursor:
        # 不修改共享连接的 row_factory，仅在游标上按列名取值
        cursor = self.conn.cursor()
        cursor.row_factory = sqlite3.Row
        return cursor


def row_to_day(row: Any) -> Day:
    """
    将结果行（sqlite3.Row 或映射）解码为 Day。

    Raises:
        DecodeError: 缺少 id/date 字段，或字段类型/格式不正确。
    """
    try:
        raw_id = row["id"]
        raw_date = row["date"]
    except (KeyError, IndexError, TypeError) as err:
        raise DecodeError(f"结果行缺少 id/date 字段：{err}") from err

    if isinstance(raw_id, bool) or not isinstance(raw_id, int):
        raise DecodeError(f"id 字段类型错误：{raw_id!r}")

    if isinstance(raw_date, datetime):
        raise DecodeError(f"date 字段包含时间部分：{raw_date!r}")
    if isinstance(raw_date, date):
        return Day(id=raw_id, date=raw_date)
    if not isinstance(raw_date, str):
        raise DecodeError(f"date 字段类型错误：{raw_date!r}")
    try:
        parsed = date.fromisoformat(raw_date)
    except ValueError as err:
        raise DecodeError(f"date 字段格式错误：{raw_date!r}") from err
    return Day(id=raw_id, date=parsed)
