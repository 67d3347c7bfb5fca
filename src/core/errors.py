"""
Day 存储层错误类型。

约定：
- 所有错误均继承 DayError（RuntimeError 子类），调用方可统一捕获；
- StoreError 始终携带出错的 SQL 语句与操作名，便于诊断；
- 本层不重试、不吞错，批量操作遇错整体失败。
"""

from __future__ import annotations


class DayError(RuntimeError):
    """Day 存储层错误基类。"""


class StoreError(DayError):
    """底层 SQL 语句执行失败（连接、语法、约束等）。"""

    def __init__(self, message: str, *, statement: str, operation: str) -> None:
        super().__init__(f"{message}（operation={operation}）\n{statement}")
        self.statement = statement
        self.operation = operation


class DecodeError(DayError):
    """结果行缺少 id/date 字段或字段格式不正确。"""


class NotFoundError(DayError):
    """按 id 查询的 Day 不存在。"""

    def __init__(self, day_id: int) -> None:
        super().__init__(f"Day 不存在：id={day_id}")
        self.day_id = day_id


class DateArithmeticError(DayError):
    """日历日期运算越界（如 date.min 再减一天）。"""
