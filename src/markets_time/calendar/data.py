"""Year -> month -> day lookup tables for market calendars.

Tables are literal Python data validated once at import time. Lookups are
plain dict/frozenset membership tests and never raise.
"""

from __future__ import annotations

import logging
from datetime import date
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping

from markets_time.timeutils import is_valid_date

logger = logging.getLogger(__name__)

RawCalendarData = Mapping[int, Mapping[int, Iterable[int]]]


class CalendarDataError(ValueError):
    pass


def day(day_num: int) -> frozenset[int]:
    """Single day-of-month entry for a literal table."""
    return frozenset([day_num])


def days(day_nums: Iterable[int]) -> frozenset[int]:
    """Multi-day entry for a literal table. Duplicates collapse."""
    return frozenset(day_nums)


def validate(raw: RawCalendarData, name: str) -> None:
    """
    Check that every (year, month, day) in ``raw`` is a real calendar date.

    All problems are collected and reported in a single CalendarDataError so a
    broken table shows every bad entry at once.
    """
    invalid: list[str] = []
    for year, months in raw.items():
        for month, day_set in months.items():
            for d in day_set:
                label = f"{year}-{month:02d}-{d:02d}" if _all_ints(year, month, d) else f"{year}-{month}-{d}"
                if not _all_ints(year, month, d):
                    invalid.append(f"{label} (non-integer component)")
                    continue
                try:
                    built = date(year, month, d)
                except ValueError as exc:
                    invalid.append(f"{label} ({exc})")
                    continue
                if (built.year, built.month, built.day) != (year, month, d):
                    invalid.append(
                        f"{label} (date normalization mismatch: became {built.isoformat()})"
                    )

    if invalid:
        raise CalendarDataError(f"Invalid dates found in {name}:\n" + "\n".join(invalid))


def _all_ints(*values: Any) -> bool:
    return all(isinstance(v, int) and not isinstance(v, bool) for v in values)


class CalendarData:
    """Immutable ``year -> month -> frozenset(day)`` table with O(1) membership."""

    __slots__ = ("name", "_table")

    def __init__(self, table: Mapping[int, Mapping[int, frozenset[int]]], name: str = "calendar data") -> None:
        self.name = name
        self._table = table

    @classmethod
    def from_mapping(cls, raw: RawCalendarData, name: str) -> "CalendarData":
        validate(raw, name)
        frozen = MappingProxyType(
            {
                year: MappingProxyType({month: frozenset(day_set) for month, day_set in months.items()})
                for year, months in raw.items()
            }
        )
        data = cls(frozen, name=name)
        logger.debug("Loaded %s: %d dates across %d years", name, len(data), len(frozen))
        return data

    def contains(self, year: Any, month: Any, day_of_month: Any) -> bool:
        try:
            return day_of_month in self._table.get(year, {}).get(month, ())
        except TypeError:
            # unhashable components
            return False

    def contains_date(self, value: Any) -> bool:
        if not is_valid_date(value):
            return False
        return self.contains(value.year, value.month, value.day)

    def __contains__(self, value: Any) -> bool:
        return self.contains_date(value)

    def dates(self) -> Iterator[date]:
        for year in sorted(self._table):
            months = self._table[year]
            for month in sorted(months):
                for d in sorted(months[month]):
                    yield date(year, month, d)

    @property
    def years(self) -> tuple[int, ...]:
        return tuple(sorted(self._table))

    def __len__(self) -> int:
        return sum(len(day_set) for months in self._table.values() for day_set in months.values())

    def __repr__(self) -> str:
        return f"CalendarData(name={self.name!r}, dates={len(self)})"
