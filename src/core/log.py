"""CLI 用户可见输出与日志初始化。"""

from __future__ import annotations

import logging

from src.core.config import get_log_level


def setup_logging(debug: bool = False) -> None:
    """
    初始化根日志配置（仅在 CLI 入口调用一次）。

    Args:
        debug: True 时强制 DEBUG 级别，否则读取 `LOG_LEVEL`。
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(message)s")
    else:
        level = getattr(logging, get_log_level(), logging.WARNING)
        logging.basicConfig(level=level, format="%(name)s - %(message)s")


def log(message: str) -> None:
    """输出一行用户可见信息（不受日志级别影响）。"""
    print(message, flush=True)
