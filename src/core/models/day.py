"""Day 领域模型与引用类型。"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Union


@dataclass(slots=True, frozen=True)
class Day:
    """
    日期锚点记录。

    - id: 存储分配的自增主键，写入后不可变
    - date: 日历日期（无时间部分），全表唯一

    生命周期：首次按日期解析时惰性创建；之后不更新、不删除。
    """

    id: int
    date: date

    def ref(self) -> DayByValue:
        """返回携带自身的已解析引用。"""
        return DayByValue(self)


@dataclass(slots=True, frozen=True)
class DayById:
    """仅携带 id 的引用，需要查库才能得到 Day。"""

    id: int


@dataclass(slots=True, frozen=True)
class DayByValue:
    """已解析的引用，直接携带 Day。"""

    day: Day


DayReference = Union[DayById, DayByValue]
"""Day 引用：按 id（需查库）或按值（已解析）。"""


def by_id(day_id: int) -> DayById:
    return DayById(day_id)


def by_value(day: Day) -> DayByValue:
    return DayByValue(day)
