"""Market calendar: day classification, session intervals and trading-day navigation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any, TypeVar

import pandas as pd

from markets_time.calendar.rules import DayRules
from markets_time.calendar.sessions import REGULAR_HOURS, SessionConfig
from markets_time.timeutils import DateTimeFactory, is_valid_date

logger = logging.getLogger(__name__)

# Longer than any holiday cluster in the data (year-end runs, 9/11 closure)
MAX_DAYS_TO_CHECK = 30

D = TypeVar("D", bound=date)


class NavigationError(RuntimeError):
    def __init__(self, message: str, *, start: Any, direction: str, limit: int = MAX_DAYS_TO_CHECK) -> None:
        super().__init__(message)
        self.start = start
        self.direction = direction
        self.limit = limit


@dataclass(frozen=True)
class TradingInterval:
    """Half-open ``[start, end)`` session interval."""

    start: datetime
    end: datetime

    def contains(self, instant: datetime) -> bool:
        if not is_valid_date(instant):
            return False
        return self.start <= instant < self.end

    def __contains__(self, instant: datetime) -> bool:
        return self.contains(instant)

    @property
    def duration(self) -> timedelta:
        return self.end - self.start


def shift_days(value: D, n: int) -> D:
    """Move ``value`` by ``n`` calendar days keeping its wall-clock time."""
    if isinstance(value, pd.Timestamp):
        # Timestamp + timedelta is absolute time and drifts across DST
        return value + pd.DateOffset(days=n)
    return value + timedelta(days=n)


def iso_date(value: date) -> str:
    return date(value.year, value.month, value.day).isoformat()


@dataclass(frozen=True)
class Calendar:
    """
    Trading calendar for one market.

    Inputs are expected to already be in the market's timezone; only their
    calendar date (and, for ``is_within_trading_hours``, their instant) is used.
    """

    date_time_factory: DateTimeFactory
    day_rules: DayRules
    session_config: SessionConfig

    @property
    def zone_name(self) -> str:
        return self.date_time_factory.zone_name

    def is_trading_day(self, d: date) -> bool:
        return self.day_rules.is_trading_day(d)

    def is_early_close_day(self, d: date) -> bool:
        return self.day_rules.is_early_close_day(d)

    def next_trading_day(self, d: D) -> D:
        """
        Find the first trading day after ``d``.

        Raises:
            NavigationError: ``d`` is invalid or no trading day lies within
                MAX_DAYS_TO_CHECK days after it.
        """
        return self._step(d, 1, "after")

    def prev_trading_day(self, d: D) -> D:
        """
        Find the last trading day before ``d``.

        Raises:
            NavigationError: ``d`` is invalid or no trading day lies within
                MAX_DAYS_TO_CHECK days before it.
        """
        return self._step(d, -1, "before")

    def _step(self, d: D, step: int, direction: str) -> D:
        if not is_valid_date(d):
            raise NavigationError(
                f"Cannot search for a trading day {direction} an invalid date: {d!r}",
                start=d,
                direction=direction,
            )

        try:
            candidate = shift_days(d, step)
            for _ in range(MAX_DAYS_TO_CHECK):
                if self.is_trading_day(candidate):
                    logger.debug("Trading day %s %s is %s", direction, iso_date(d), iso_date(candidate))
                    return candidate
                candidate = shift_days(candidate, step)
        except (OverflowError, pd.errors.OutOfBoundsDatetime) as exc:
            raise NavigationError(
                f"Date range exhausted searching for a trading day {direction} {iso_date(d)}",
                start=d,
                direction=direction,
            ) from exc

        raise NavigationError(
            f"No trading day found within {MAX_DAYS_TO_CHECK} days {direction} {iso_date(d)}",
            start=d,
            direction=direction,
        )

    def trading_hours_interval(self, d: date, scope: str = REGULAR_HOURS) -> TradingInterval | None:
        """
        Session interval for the calendar date of ``d``.

        Returns None when ``d`` is not a trading day. On early close days the
        interval ends at the scope's early close time.
        """
        if not self.is_trading_day(d):
            return None

        hours = self.session_config.for_scope(scope)
        close = hours.close_for(self.is_early_close_day(d))
        day_str = iso_date(d)
        return TradingInterval(
            start=self.date_time_factory.from_iso(f"{day_str}T{hours.open_time.to_time_string()}"),
            end=self.date_time_factory.from_iso(f"{day_str}T{close.to_time_string()}"),
        )

    def is_within_trading_hours(self, instant: datetime, scope: str = REGULAR_HOURS) -> bool:
        """
        Whether ``instant`` falls inside its day's session for ``scope``.

        A plain date means midnight and a naive datetime means wall-clock time,
        both in the calendar's zone.
        """
        if is_valid_date(instant) and (not isinstance(instant, datetime) or instant.tzinfo is None):
            instant = self.date_time_factory.from_datetime(instant)
        interval = self.trading_hours_interval(instant, scope)
        return interval is not None and interval.contains(instant)

    def trading_days(self, start: date, end: date) -> list[date]:
        """
        All trading days in a date range.

        Args:
            start: Start date (inclusive).
            end: End date (inclusive).

        Returns:
            Trading days in chronological order; empty if start > end.
        """
        result = []
        current = date(start.year, start.month, start.day)
        last = date(end.year, end.month, end.day)
        while current <= last:
            if self.is_trading_day(current):
                result.append(current)
            current += timedelta(days=1)
        return result

    def schedule(self, start: date, end: date, scope: str = REGULAR_HOURS) -> pd.DataFrame:
        """
        Session table for every trading day in ``[start, end]``.

        Returns:
            DataFrame indexed by session date with ``open``/``close`` timestamps
            (market timezone) and an ``early_close`` flag.
        """
        rows = []
        for d in self.trading_days(start, end):
            interval = self.trading_hours_interval(d, scope)
            if interval is None:
                continue
            rows.append(
                {
                    "date": pd.Timestamp(d),
                    "open": pd.Timestamp(interval.start),
                    "close": pd.Timestamp(interval.end),
                    "early_close": self.is_early_close_day(d),
                }
            )

        frame = pd.DataFrame(rows, columns=["date", "open", "close", "early_close"])
        if frame.empty:
            frame["early_close"] = frame["early_close"].astype(bool)
        return frame.set_index("date")
