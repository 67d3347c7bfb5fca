from __future__ import annotations

import os


def get_db_path() -> str:
    """
    返回 SQLite DB 路径。

    Returns:
        数据库文件路径；默认 `data/daylog.db`（可由 `DB_PATH` 覆盖）。
    """
    return os.getenv("DB_PATH", "data/daylog.db")


def enable_sql_debug() -> bool:
    """
    是否启用 SQL 打印（开发期可打开）。

    Returns:
        True/False（由 `ENABLE_SQL_DEBUG=1` 控制）。
    """
    return os.getenv("ENABLE_SQL_DEBUG", "0") == "1"


def get_log_level() -> str:
    """
    返回 CLI 日志级别名称。

    Returns:
        `DEBUG`/`INFO`/`WARNING` 等，默认 `WARNING`（由 `LOG_LEVEL` 配置）。
    """
    return os.getenv("LOG_LEVEL", "WARNING").upper()


def week_view_complete_by_default() -> bool:
    """CLI `week` 子命令是否默认输出完整一周（`WEEK_VIEW_COMPLETE=1`）。"""
    return os.getenv("WEEK_VIEW_COMPLETE", "0") == "1"
