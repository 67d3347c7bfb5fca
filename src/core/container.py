"""
依赖容器模块（Dependency Container）。

职责：
- 集中管理依赖对象的创建逻辑，通过 @register 注册到依赖注入容器；
- 持有进程内共享的 SQLite 连接（多个仓储共享同一连接）。

注意事项：
    - @register 的名字必须与 Flow 函数参数名一致
    - 共享连接在模块级缓存，由 reset_db_connection() 显式关闭
    - 本模块在 src/flows/__init__.py 中自动导入
"""

from __future__ import annotations

import sqlite3

from src.core.dependency import register
from src.data.db.day_repo import DayRepository
from src.data.db.db_helper import DbHelper

# ========== 全局单例（连接复用） ==========

_db_helper: DbHelper | None = None


@register("db_helper")
def get_db_helper() -> DbHelper:
    """
    获取共享 DbHelper（按 DB_PATH 管理 SQLite 连接）。

    注册名：db_helper
    """
    global _db_helper
    if _db_helper is None:
        _db_helper = DbHelper()
        _db_helper.init_schema_if_needed()
    return _db_helper


def get_db_connection() -> sqlite3.Connection:
    """获取共享数据库连接（首次调用时初始化 meta 表）。"""
    return get_db_helper().get_connection()


def reset_db_connection() -> None:
    """关闭并丢弃共享连接（CLI 退出或测试切换 DB_PATH 时调用）。"""
    global _db_helper
    if _db_helper is not None:
        _db_helper.close()
        _db_helper = None


# ========== 依赖工厂函数（注册到容器） ==========


@register("day_repo")
def get_day_repo() -> DayRepository:
    """
    获取 Day 仓储（共享连接；构造时确保 days 表存在）。

    注册名：day_repo
    """
    return DayRepository(get_db_connection())
