"""Registry of supported markets.

Each entry builds a fresh CalendarConfig; callers construct and pass their own
Calendar rather than sharing a module-level instance.
"""

from __future__ import annotations

from typing import Callable

from markets_time.calendar.core import Calendar
from markets_time.composition import CalendarConfig, create_calendar
from markets_time.markets.us_equities import us_equities_config

MARKETS: dict[str, Callable[[], CalendarConfig]] = {
    "us_equities": us_equities_config,
}


def get_market_config(name: str) -> CalendarConfig:
    try:
        builder = MARKETS[name]
    except KeyError:
        raise KeyError(f"Unknown market {name!r}; known markets: {', '.join(sorted(MARKETS))}") from None
    return builder()


def create_market_calendar(name: str) -> Calendar:
    return create_calendar(get_market_config(name))


__all__ = ["MARKETS", "get_market_config", "create_market_calendar"]
