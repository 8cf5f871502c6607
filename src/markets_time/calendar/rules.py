"""Trading-day classification rules.

A market supplies a ``DayRules`` implementation; ``Calendar`` only talks to
that interface so a new market needs new tables, not new calendar code.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import Any

from markets_time.calendar.data import CalendarData, CalendarDataError
from markets_time.timeutils import is_valid_date

SATURDAY = 6
SUNDAY = 7


class DayRules(ABC):
    """Answers "is this a trading day" and "does it close early" for one market."""

    @abstractmethod
    def is_trading_day(self, d: date) -> bool:
        ...

    @abstractmethod
    def is_early_close_day(self, d: date) -> bool:
        ...


def is_weekend(d: Any) -> bool:
    """
    Check if a date falls on Saturday or Sunday.

    Args:
        d: The date to check. ``None`` and ``pd.NaT`` are accepted.

    Returns:
        True for Saturday/Sunday, False otherwise or if the date is invalid.
    """
    if not is_valid_date(d):
        return False
    return d.isoweekday() in (SATURDAY, SUNDAY)


class TableDayRules(DayRules):
    """
    Day rules backed by a closed-day table and an early-close-day table.

    A trading day is a weekday that is not in the closed-day table. Early close
    days are looked up directly and must themselves be trading days; that
    cross-table invariant is checked once here, at construction.
    """

    def __init__(self, closed_days: CalendarData, early_close_days: CalendarData) -> None:
        self.closed_days = closed_days
        self.early_close_days = early_close_days
        self._check_early_closes_are_trading_days()

    def _check_early_closes_are_trading_days(self) -> None:
        bad = [
            d.isoformat()
            for d in self.early_close_days.dates()
            if is_weekend(d) or self.closed_days.contains_date(d)
        ]
        if bad:
            raise CalendarDataError(
                f"Early close days in {self.early_close_days.name} are not trading days "
                f"per {self.closed_days.name}: {', '.join(bad)}"
            )

    def is_closed_day(self, d: Any) -> bool:
        return self.closed_days.contains_date(d)

    def is_trading_day(self, d: Any) -> bool:
        if not is_valid_date(d):
            return False
        # Weekend check first, it is cheaper than the table lookup
        if is_weekend(d):
            return False
        return not self.is_closed_day(d)

    def is_early_close_day(self, d: Any) -> bool:
        return self.early_close_days.contains_date(d)
