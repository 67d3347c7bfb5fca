"""
依赖注入装饰器（Dependency Injection）。

职责：
- 通过装饰器自动填充 Flow 函数的可选参数；
- 支持测试时手动传入对象覆盖默认依赖。

使用示例：
    # 1. 注册依赖工厂（在 src/core/container.py 中）
    @register("day_repo")
    def get_day_repo() -> DayRepository:
        return DayRepository(get_db_connection())

    # 2. 在 Flow 函数上使用装饰器
    @dependency
    def load_week(*, ref: date | None = None, day_repo: DayRepository | None = None):
        return day_repo.week_till_date(ref or date.today())

    # 3. 测试时覆盖依赖（非 None 参数不会被覆盖）
    load_week(day_repo=DayRepository(memory_conn))

注意事项：
- 注册名必须与函数参数名完全一致（大小写敏感）
- 仅当参数值为 None 时才会自动注入
- 依赖注册在 src/flows/__init__.py 自动触发
"""

from __future__ import annotations

import inspect
from functools import wraps
from typing import Any, Callable, TypeVar

# 依赖注册表：参数名 -> 工厂函数
_REGISTRY: dict[str, Callable[[], Any]] = {}

T = TypeVar("T")


def register(name: str) -> Callable[[Callable[[], T]], Callable[[], T]]:
    """
    装饰器：将工厂函数注册到依赖注入容器。

    Args:
        name: 注册名称，必须与目标函数的参数名完全一致。
    """

    def decorator(factory_func: Callable[[], T]) -> Callable[[], T]:
        _REGISTRY[name] = factory_func
        return factory_func

    return decorator


def dependency(func: Callable[..., T]) -> Callable[..., T]:
    """
    依赖注入装饰器：自动注入函数的可选参数。

    对每个参数：若调用时未传值（或传入 None）且参数名已注册，
    则调用对应工厂函数创建实例并注入；非 None 值保持原样。
    """
    sig = inspect.signature(func)

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> T:
        bound_args = sig.bind_partial(*args, **kwargs)
        bound_args.apply_defaults()

        for param_name in sig.parameters:
            if param_name in _REGISTRY and bound_args.arguments.get(param_name) is None:
                bound_args.arguments[param_name] = _REGISTRY[param_name]()

        return func(*bound_args.args, **bound_args.kwargs)

    return wrapper


def get_registered_deps() -> dict[str, Callable[[], Any]]:
    """获取当前注册的所有依赖（副本，用于调试）。"""
    return _REGISTRY.copy()
