from __future__ import annotations

from dataclasses import dataclass

from markets_time.calendar.core import Calendar
from markets_time.calendar.rules import DayRules
from markets_time.calendar.sessions import SessionConfig
from markets_time.market_time import MarketTimeFactory
from markets_time.timeutils import DateTimeFactory


@dataclass(frozen=True)
class CalendarConfig:
    """Everything needed to build one market's calendar."""

    zone_name: str
    day_rules: DayRules
    session_config: SessionConfig


def create_calendar(config: CalendarConfig) -> Calendar:
    return Calendar(
        date_time_factory=DateTimeFactory(config.zone_name),
        day_rules=config.day_rules,
        session_config=config.session_config,
    )


def create_market_time_factory(config: CalendarConfig) -> MarketTimeFactory:
    """
    Build a factory producing MarketTime values for the configured market.

    Example:
        factory = create_market_time_factory(us_equities_config())
        t = factory.from_iso("2024-01-16T09:30:00")
        t.is_within_trading_hours()  # True
    """
    calendar = create_calendar(config)
    return MarketTimeFactory(date_time_factory=calendar.date_time_factory, calendar=calendar)
