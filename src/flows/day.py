"""Day 查询相关业务流程。"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from src.core.dependency import dependency
from src.core.models.day import Day, by_id
from src.data.db.day_repo import DayRepository


@dataclass(slots=True, frozen=True)
class WeekView:
    """周视图：参考日期与按时间升序的 Day 列表。"""

    ref: date
    days: list[Day]
    complete: bool


@dependency
def resolve_day(
    *,
    on: date | None = None,
    day_id: int | None = None,
    day_repo: DayRepository | None = None,
) -> Day:
    """
    解析单个 Day。

    优先级：day_id（按 id 查询，不创建）> on（按日期 get-or-create）> 今天。

    Raises:
        NotFoundError: day_id 不存在。
    """
    if day_id is not None:
        return day_repo.resolve(by_id(day_id))
    if on is not None:
        return day_repo.from_date(on)
    return day_repo.today()


@dependency
def load_week(
    *,
    ref: date | None = None,
    complete: bool = False,
    day_repo: DayRepository | None = None,
) -> WeekView:
    """
    加载 ref 所在周（默认今天）。

    Args:
        ref: 参考日期，None 表示今天。
        complete: True 返回周一..周日完整 7 天；False 仅返回至 ref（含）。

    副作用：窗口内缺失的日期会被创建。
    """
    if ref is None:
        ref = day_repo.clock()
    if complete:
        days = day_repo.complete_week(ref)
    else:
        days = day_repo.week_till_date(ref)
    return WeekView(ref=ref, days=days, complete=complete)


@dependency
def recent_days(*, count: int, day_repo: DayRepository | None = None) -> list[Day]:
    """按日期倒序列出最近 count 个已存在的 Day。"""
    return day_repo.list_passed_days(count)


@dependency
def resolve_yesterday(*, day_repo: DayRepository | None = None) -> Day:
    """
    返回本地昨天对应的 Day（不存在则创建）。

    Raises:
        DateArithmeticError: 日期下溢。
    """
    return day_repo.yesterday()
