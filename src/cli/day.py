"""
Day 日期锚点 CLI。

用法：
    python -m src.cli.day today
    python -m src.cli.day get --date 2024-03-14
    python -m src.cli.day week --date 2024-03-14 --complete
    python -m src.cli.day recent --count 10
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date

from rich.console import Console
from rich.table import Table

from src.core.config import week_view_complete_by_default
from src.core.container import reset_db_connection
from src.core.errors import NotFoundError
from src.core.log import log, setup_logging
from src.core.models.day import Day
from src.flows.day import load_week, recent_days, resolve_day, resolve_yesterday

logger = logging.getLogger(__name__)

console = Console()

WEEKDAY_NAMES = ("周一", "周二", "周三", "周四", "周五", "周六", "周日")


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="python -m src.cli.day",
        description="Day 日期锚点：今天/昨天/指定日期/周视图/最近记录",
    )
    parser.add_argument("--debug", action="store_true", help="输出 DEBUG 日志")
    subparsers = parser.add_subparsers(dest="command", required=True, help="子命令")

    subparsers.add_parser("today", help="获取（或创建）今天的 Day")
    subparsers.add_parser("yesterday", help="获取（或创建）昨天的 Day")

    # ========== get 子命令 ==========
    get_parser = subparsers.add_parser("get", help="按日期或 id 获取 Day")
    group = get_parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--date", help="日期 YYYY-MM-DD（不存在则创建）")
    group.add_argument("--id", dest="day_id", type=int, help="Day id（不存在则报错）")

    # ========== week 子命令 ==========
    week_parser = subparsers.add_parser("week", help="输出参考日期所在周")
    week_parser.add_argument("--date", help="参考日期 YYYY-MM-DD（默认今天）")
    week_parser.add_argument(
        "--complete",
        action=argparse.BooleanOptionalAction,
        default=week_view_complete_by_default(),
        help="输出周一至周日完整 7 天（--no-complete 仅至参考日期；默认读取 WEEK_VIEW_COMPLETE）",
    )

    # ========== recent 子命令 ==========
    recent_parser = subparsers.add_parser("recent", help="按日期倒序列出已有 Day")
    recent_parser.add_argument("--count", type=int, default=7, help="条数（默认 7）")

    return parser.parse_args(argv)


def parse_date(date_str: str | None) -> date | None:
    """
    解析日期参数（未提供时返回 None；提供了空字符串视为非法）。

    Raises:
        ValueError: 非法日期格式。
    """
    if date_str is None:
        return None
    try:
        return date.fromisoformat(date_str)
    except ValueError as e:
        raise ValueError(f"日期格式无效：{date_str}（期望格式：YYYY-MM-DD，例如 2024-03-14）") from e


def _render_days(title: str, days: list[Day]) -> None:
    table = Table(title=title)
    table.add_column("id", justify="right")
    table.add_column("date")
    table.add_column("weekday")
    for d in days:
        table.add_row(str(d.id), d.date.isoformat(), WEEKDAY_NAMES[d.date.weekday()])
    console.print(table)


def _run(args: argparse.Namespace) -> int:
    if args.command == "today":
        _render_days("今天", [resolve_day()])
        return 0

    if args.command == "yesterday":
        _render_days("昨天", [resolve_yesterday()])
        return 0

    if args.command == "get":
        day = resolve_day(on=parse_date(args.date), day_id=args.day_id)
        _render_days("Day", [day])
        return 0

    if args.command == "week":
        view = load_week(ref=parse_date(args.date), complete=args.complete)
        label = "完整周" if view.complete else "本周至参考日"
        _render_days(f"{label}（参考日 {view.ref.isoformat()}）", view.days)
        return 0

    if args.command == "recent":
        if args.count < 0:
            raise ValueError(f"--count 不能为负数：{args.count}")
        _render_days(f"最近 {args.count} 天", recent_days(count=args.count))
        return 0

    log(f"❌ 未知命令：{args.command}")
    return 4


def main(argv: list[str] | None = None) -> int:
    """
    Day CLI 主入口。

    Returns:
        退出码：0=成功；3=记录不存在；4=参数错误；5=其他失败。
    """
    args = _parse_args(argv)
    setup_logging(debug=args.debug)

    try:
        return _run(args)
    except NotFoundError as err:
        log(f"❌ {err}")
        return 3
    except ValueError as err:
        log(f"❌ 参数错误：{err}")
        return 4
    except Exception as err:  # noqa: BLE001
        logger.debug("[Day CLI] 执行失败", exc_info=True)
        log(f"❌ 执行失败：{err}")
        return 5
    finally:
        reset_db_connection()


if __name__ == "__main__":
    sys.exit(main())
