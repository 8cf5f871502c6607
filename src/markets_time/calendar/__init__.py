"""Market calendar core: lookup tables, day rules, session hours and navigation."""

from markets_time.calendar.core import (
    MAX_DAYS_TO_CHECK,
    Calendar,
    NavigationError,
    TradingInterval,
)
from markets_time.calendar.data import CalendarData, CalendarDataError, day, days
from markets_time.calendar.rules import DayRules, TableDayRules, is_weekend
from markets_time.calendar.sessions import (
    EXTENDED_HOURS,
    REGULAR_HOURS,
    SessionConfig,
    TradingHours,
)

__all__ = [
    "MAX_DAYS_TO_CHECK",
    "Calendar",
    "NavigationError",
    "TradingInterval",
    "CalendarData",
    "CalendarDataError",
    "day",
    "days",
    "DayRules",
    "TableDayRules",
    "is_weekend",
    "EXTENDED_HOURS",
    "REGULAR_HOURS",
    "SessionConfig",
    "TradingHours",
]
