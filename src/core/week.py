from __future__ import annotations

from datetime import date, timedelta

from src.core.errors import DateArithmeticError

DAYS_PER_WEEK = 7


def week_start(day: date) -> date:
    """返回 day 所在周的周一（含当日）。"""
    return day - timedelta(days=day.weekday())


def week_dates(day: date) -> list[date]:
    """
    返回 day 所在自然周（周一..周日）的 7 个日期，按时间升序。

    说明：包含 day 之后的日期（可能为未来日期）。

    Raises:
        DateArithmeticError: 周日超出 date.max（仅 9999 年末一周）。
    """
    start = week_start(day)
    try:
        return [start + timedelta(days=i) for i in range(DAYS_PER_WEEK)]
    except OverflowError as err:
        raise DateArithmeticError(f"周窗口越界：{day.isoformat()}") from err


def week_dates_till(day: date) -> list[date]:
    """返回本周周一至 day（含）的日期，长度为 day.weekday() + 1。"""
    start = week_start(day)
    return [start + timedelta(days=i) for i in range(day.weekday() + 1)]


def previous_day(day: date) -> date:
    """
    返回前一个日历日。

    Raises:
        DateArithmeticError: day 已是 date.min，无法再减一天。
    """
    try:
        return day - timedelta(days=1)
    except OverflowError as err:
        raise DateArithmeticError(f"无法计算前一日：{day.isoformat()}") from err
