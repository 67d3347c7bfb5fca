from __future__ import annotations

import logging
import sqlite3
from datetime import date, datetime
from typing import Callable

from src.core.errors import NotFoundError, StoreError
from src.core.models.day import Day, DayById, DayByValue, DayReference
from src.core.week import previous_day, week_dates, week_dates_till
from src.data.db.day_store import SELECT_BY_DATE, DayStore

logger = logging.getLogger(__name__)


class DayRepository:
    """
    Day 仓储（SQLite）。

    职责：
    - 按日期 get-or-create（查询 → 插入 → 再查询，以再查询结果为准）；
    - 按 id 查询、解析 DayReference；
    - 生成以周一对齐的自然周批量结果。

    约定：
    - 连接为共享引用，可被多个仓储同时持有，关闭由构造方负责；
    - 不缓存任何结果，每次调用都以库中当前状态为准；
    - 批量操作任一日期失败即整体失败，不返回部分结果；
    - `clock` 提供“本地当前日期”，默认 date.today，每次调用时读取。
    """

    def __init__(
        self,
        conn: sqlite3.Connection,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self.conn = conn
        self.clock = clock
        self.store = DayStore(conn)
        self.store.ensure_schema()

    def today(self) -> Day:
        """返回本地今天对应的 Day（不存在则创建）。"""
        return self.from_date(self.clock())

    def yesterday(self) -> Day:
        """
        返回本地昨天对应的 Day（不存在则创建）。

        Raises:
            DateArithmeticError: 日期下溢（实际不可达）。
        """
        return self.from_date(previous_day(self.clock()))

    def from_date(self, day: date) -> Day:
        """
        按日期获取 Day，不存在时插入后再查询。

        说明：传入 datetime 时仅取其日历日期部分。

        Raises:
            StoreError: 查询/插入失败，或插入后仍查不到记录。
        """
        if isinstance(day, datetime):
            day = day.date()
        found = self.store.find_by_date(day)
        if found is not None:
            return found

        new_id = self.store.insert_date(day)
        if new_id is None:
            logger.debug("[DayRepo] 并发插入已存在：%s", day.isoformat())
        else:
            logger.info("[DayRepo] 新建 Day：id=%s date=%s", new_id, day.isoformat())

        persisted = self.store.find_by_date(day)
        if persisted is None:
            raise StoreError(
                f"插入后未找到 Day：date={day.isoformat()}",
                statement=SELECT_BY_DATE,
                operation="from_date",
            )
        return persisted

    def day(self, day_id: int) -> Day:
        """
        按 id 查询 Day。

        Raises:
            NotFoundError: 无此 id。
        """
        found = self.store.find_by_id(day_id)
        if found is None:
            raise NotFoundError(day_id)
        return found

    def resolve(self, reference: DayReference) -> Day:
        """按 id 引用查库；按值引用原样返回，不访问存储。"""
        if isinstance(reference, DayByValue):
            return reference.day
        if isinstance(reference, DayById):
            return self.day(reference.id)
        raise TypeError(f"未知的 DayReference 类型：{type(reference).__name__}")

    def list_passed_days(self, count: int) -> list[Day]:
        """按日期倒序返回最多 count 条已存在的 Day（不创建记录）。"""
        if count < 0:
            raise ValueError(f"count 不能为负数：{count}")
        if count == 0:
            return []
        return self.store.list_recent(count)

    def complete_week(self, day: date) -> list[Day]:
        """
        返回 day 所在自然周（周一..周日）的 7 个 Day。

        副作用：窗口内缺失的日期（包括 day 之后、甚至未来的日期）都会被创建。
        """
        return [self.from_date(d) for d in week_dates(day)]

    def week_till_today(self) -> list[Day]:
        """返回本周周一至今天的 Day。"""
        return self.week_till_date(self.clock())

    def week_till_date(self, day: date) -> list[Day]:
        """返回 day 所在周周一至 day（含）的 Day，长度 1..7，按时间升序。"""
        return [self.from_date(d) for d in week_dates_till(day)]
