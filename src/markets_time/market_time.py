from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from markets_time.calendar.core import Calendar, TradingInterval
from markets_time.calendar.sessions import REGULAR_HOURS
from markets_time.timeutils import DateTimeFactory


@dataclass(frozen=True)
class MarketTime:
    """A datetime in a market's timezone, paired with that market's calendar."""

    value: datetime
    calendar: Calendar

    def is_on_trading_day(self) -> bool:
        return self.calendar.is_trading_day(self.value)

    def is_early_close_day(self) -> bool:
        return self.calendar.is_early_close_day(self.value)

    def is_within_trading_hours(self, scope: str = REGULAR_HOURS) -> bool:
        return self.calendar.is_within_trading_hours(self.value, scope)

    def day_trading_hours_interval(self, scope: str = REGULAR_HOURS) -> TradingInterval | None:
        return self.calendar.trading_hours_interval(self.value, scope)

    def next_trading_day(self) -> "MarketTime":
        return MarketTime(self.calendar.next_trading_day(self.value), self.calendar)

    def prev_trading_day(self) -> "MarketTime":
        return MarketTime(self.calendar.prev_trading_day(self.value), self.calendar)

    def to_iso_date(self) -> str:
        return self.value.date().isoformat()

    def to_iso_date_time(self) -> str:
        return self.value.strftime("%Y-%m-%dT%H:%M:%S")

    def to_iso_time(self) -> str:
        return self.value.strftime("%H:%M:%S")


@dataclass(frozen=True)
class MarketTimeFactory:
    date_time_factory: DateTimeFactory
    calendar: Calendar

    def from_iso(self, iso: str) -> MarketTime:
        return MarketTime(self.date_time_factory.from_iso(iso), self.calendar)

    def from_datetime(self, value: datetime) -> MarketTime:
        return MarketTime(self.date_time_factory.from_datetime(value), self.calendar)

    def from_millis(self, millis: float) -> MarketTime:
        return MarketTime(self.date_time_factory.from_millis(millis), self.calendar)

    def now(self) -> MarketTime:
        return MarketTime(self.date_time_factory.now(), self.calendar)
