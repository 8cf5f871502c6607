"""Timezone-aware trading day calendars for financial markets."""

from markets_time.calendar import (
    EXTENDED_HOURS,
    MAX_DAYS_TO_CHECK,
    REGULAR_HOURS,
    Calendar,
    CalendarData,
    CalendarDataError,
    DayRules,
    NavigationError,
    SessionConfig,
    TableDayRules,
    TradingHours,
    TradingInterval,
)
from markets_time.composition import CalendarConfig, create_calendar, create_market_time_factory
from markets_time.market_time import MarketTime, MarketTimeFactory
from markets_time.markets import MARKETS, create_market_calendar, get_market_config
from markets_time.timeutils import DateTimeFactory, HourMinute

__all__ = [
    "EXTENDED_HOURS",
    "MAX_DAYS_TO_CHECK",
    "REGULAR_HOURS",
    "Calendar",
    "CalendarData",
    "CalendarDataError",
    "DayRules",
    "NavigationError",
    "SessionConfig",
    "TableDayRules",
    "TradingHours",
    "TradingInterval",
    "CalendarConfig",
    "create_calendar",
    "create_market_time_factory",
    "MarketTime",
    "MarketTimeFactory",
    "MARKETS",
    "create_market_calendar",
    "get_market_config",
    "DateTimeFactory",
    "HourMinute",
]
