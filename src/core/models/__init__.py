"""
领域模型聚合导出。

说明：仅做名称聚合，不引入额外逻辑，便于上层模块统一引用。
"""

from .day import Day, DayById, DayByValue, DayReference, by_id, by_value

__all__ = [
    "Day",
    "DayById",
    "DayByValue",
    "DayReference",
    "by_id",
    "by_value",
]
