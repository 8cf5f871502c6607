"""US equities (NYSE/NASDAQ) market definition.

Trading hours (America/New_York):
- Regular: 09:30 - 16:00, 13:00 on early close days
- Extended: 04:00 - 20:00, 17:00 on early close days

Holiday data covers 2000-2025; dates outside that range are classified by the
weekend rule alone.
"""

from __future__ import annotations

from markets_time.calendar.rules import TableDayRules
from markets_time.calendar.sessions import SessionConfig, TradingHours
from markets_time.composition import CalendarConfig
from markets_time.markets.us_equities.closed_days import US_EQUITIES_CLOSED_DAYS
from markets_time.markets.us_equities.early_close_days import US_EQUITIES_EARLY_CLOSE_DAYS
from markets_time.timeutils import HourMinute

US_EQUITIES_ZONE = "America/New_York"

US_EQUITIES_SESSIONS = SessionConfig(
    regular=TradingHours(
        open_time=HourMinute(9, 30),
        close_time=HourMinute(16, 0),
        early_close_time=HourMinute(13, 0),
    ),
    extended=TradingHours(
        open_time=HourMinute(4, 0),
        close_time=HourMinute(20, 0),
        early_close_time=HourMinute(17, 0),
    ),
)


class USEquitiesDayRules(TableDayRules):
    def __init__(self) -> None:
        super().__init__(US_EQUITIES_CLOSED_DAYS, US_EQUITIES_EARLY_CLOSE_DAYS)


def us_equities_config() -> CalendarConfig:
    return CalendarConfig(
        zone_name=US_EQUITIES_ZONE,
        day_rules=USEquitiesDayRules(),
        session_config=US_EQUITIES_SESSIONS,
    )


__all__ = [
    "US_EQUITIES_ZONE",
    "US_EQUITIES_SESSIONS",
    "US_EQUITIES_CLOSED_DAYS",
    "US_EQUITIES_EARLY_CLOSE_DAYS",
    "USEquitiesDayRules",
    "us_equities_config",
]
