from __future__ import annotations

import argparse
import logging
from datetime import date
from pathlib import Path

from markets_time.calendar.core import Calendar, NavigationError
from markets_time.calendar.sessions import EXTENDED_HOURS, REGULAR_HOURS, SCOPES
from markets_time.composition import create_calendar
from markets_time.config import Config, calendar_config_from, load_config

logger = logging.getLogger("markets_time")


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid date {value!r}, expected YYYY-MM-DD") from None


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="markets_time", description="Market trading day calendar.")
    parser.add_argument("--config", default=None, help="YAML config file (sessions/timezone overrides)")
    parser.add_argument("--market", default=None, help="Market name (default: from config, else us_equities)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    info = sub.add_parser("info", help="Classify a date and show its sessions")
    info.add_argument("date", type=_parse_date, help="YYYY-MM-DD")

    nxt = sub.add_parser("next", help="Next trading day after a date")
    nxt.add_argument("date", type=_parse_date, help="YYYY-MM-DD")

    prev = sub.add_parser("prev", help="Previous trading day before a date")
    prev.add_argument("date", type=_parse_date, help="YYYY-MM-DD")

    schedule = sub.add_parser("schedule", help="Session table for a date range")
    schedule.add_argument("start", type=_parse_date, help="YYYY-MM-DD")
    schedule.add_argument("end", type=_parse_date, help="YYYY-MM-DD")
    schedule.add_argument("--scope", choices=SCOPES, default=REGULAR_HOURS)
    return parser


def _interval_text(calendar: Calendar, d: date, scope: str) -> str:
    interval = calendar.trading_hours_interval(d, scope)
    if interval is None:
        return "closed"
    return f"{interval.start.strftime('%H:%M')}-{interval.end.strftime('%H:%M')} {calendar.zone_name}"


def _info(calendar: Calendar, d: date) -> None:
    print(f"date:        {d.isoformat()} ({d.strftime('%A')})")
    print(f"trading day: {'yes' if calendar.is_trading_day(d) else 'no'}")
    print(f"early close: {'yes' if calendar.is_early_close_day(d) else 'no'}")
    print(f"regular:     {_interval_text(calendar, d, REGULAR_HOURS)}")
    print(f"extended:    {_interval_text(calendar, d, EXTENDED_HOURS)}")


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        config = load_config(Path(args.config)) if args.config else Config(raw={})
        calendar = create_calendar(calendar_config_from(config, market=args.market))

        if args.command == "info":
            _info(calendar, args.date)
        elif args.command == "next":
            print(calendar.next_trading_day(args.date).isoformat())
        elif args.command == "prev":
            print(calendar.prev_trading_day(args.date).isoformat())
        elif args.command == "schedule":
            frame = calendar.schedule(args.start, args.end, args.scope)
            if frame.empty:
                print("No trading days in range.")
            else:
                print(frame.to_string())
    except (NavigationError, ValueError, KeyError, OSError) as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
