"""Tests for calendar lookup tables and day classification rules."""

from __future__ import annotations

import sys
from datetime import date, timedelta
from pathlib import Path

import pandas as pd

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from markets_time.calendar.data import CalendarData, CalendarDataError, day, days, validate
from markets_time.calendar.rules import DayRules, TableDayRules, is_weekend
from markets_time.markets.us_equities import (
    US_EQUITIES_CLOSED_DAYS,
    US_EQUITIES_EARLY_CLOSE_DAYS,
    USEquitiesDayRules,
)


def _all_dates(start: date, end: date):
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


class TestCalendarData:
    """Test CalendarData construction, validation and lookup."""

    def test_day_helpers_build_frozensets(self):
        """day()/days() produce immutable sets and collapse duplicates."""
        assert day(25) == frozenset({25})
        assert days([1, 1, 2]) == frozenset({1, 2})
        assert days([]) == frozenset()

    def test_contains_known_and_unknown_dates(self):
        """Lookup is exact and never raises for out-of-range input."""
        data = CalendarData.from_mapping({2024: {12: day(25), 1: days([1, 15])}}, "TEST")

        assert data.contains(2024, 12, 25)
        assert data.contains(2024, 1, 15)
        assert not data.contains(2024, 12, 24)
        assert not data.contains(1999, 12, 25)  # year outside the table
        assert not data.contains(2024, 13, 1)   # month that cannot exist
        assert not data.contains(2024, 2, 30)   # day that cannot exist
        assert not data.contains(None, None, None)
        assert not data.contains([2024], 12, 25)  # unhashable
        print("  ✓ CalendarData.contains handles out-of-range input")

    def test_contains_date_and_invalid_instants(self):
        """contains_date accepts date/datetime/Timestamp and degrades to False for None/NaT."""
        data = CalendarData.from_mapping({2024: {12: day(25)}}, "TEST")

        assert data.contains_date(date(2024, 12, 25))
        assert data.contains_date(pd.Timestamp("2024-12-25 10:00", tz="America/New_York"))
        assert date(2024, 12, 25) in data
        assert not data.contains_date(None)
        assert not data.contains_date(pd.NaT)
        assert not data.contains_date("2024-12-25")

    def test_len_years_and_dates(self):
        data = CalendarData.from_mapping({2025: {1: days([20, 1])}, 2024: {12: day(25)}}, "TEST")

        assert len(data) == 3
        assert data.years == (2024, 2025)
        assert list(data.dates()) == [date(2024, 12, 25), date(2025, 1, 1), date(2025, 1, 20)]

    def test_tables_are_immutable(self):
        """The frozen table cannot be mutated through its mappings."""
        raw = {2024: {12: {25}}}
        data = CalendarData.from_mapping(raw, "TEST")

        # Mutating the source dict must not leak into the table
        raw[2024][12].add(26)
        assert not data.contains(2024, 12, 26)

        try:
            data._table[2024][12] = frozenset({1})
            assert False, "Should have raised TypeError"
        except TypeError:
            pass

    def test_validate_rejects_impossible_dates(self):
        """February 30 and a non-leap February 29 are configuration errors."""
        try:
            validate({2024: {2: day(30)}, 2023: {2: day(29)}}, "BROKEN_DAYS")
            assert False, "Should have raised CalendarDataError"
        except CalendarDataError as e:
            message = str(e)
            assert "BROKEN_DAYS" in message
            assert "2024-02-30" in message
            assert "2023-02-29" in message
        print("  ✓ validate reports every invalid entry")

    def test_validate_accepts_leap_day(self):
        validate({2024: {2: day(29)}}, "LEAP")

    def test_validate_rejects_bad_month_and_types(self):
        for raw in ({2024: {13: day(1)}}, {2024: {0: day(1)}}, {2024: {1: day(0)}}, {2024: {1: {"1"}}}):
            try:
                CalendarData.from_mapping(raw, "BAD")
                assert False, f"Should have raised CalendarDataError for {raw}"
            except CalendarDataError:
                pass

    def test_calendar_data_error_is_value_error(self):
        assert issubclass(CalendarDataError, ValueError)


class TestDayRules:
    """Test weekend logic and table-backed day rules."""

    def test_is_weekend_uses_saturday_and_sunday(self):
        assert is_weekend(date(2024, 1, 13))  # Saturday
        assert is_weekend(date(2024, 1, 14))  # Sunday
        assert not is_weekend(date(2024, 1, 12))  # Friday
        assert not is_weekend(date(2024, 1, 15))  # Monday

    def test_is_weekend_false_for_invalid(self):
        assert not is_weekend(None)
        assert not is_weekend(pd.NaT)

    def test_invalid_dates_are_never_trading_or_early_close(self):
        """None/NaT yield False from every classification query."""
        rules = USEquitiesDayRules()
        for invalid in (None, pd.NaT):
            assert not rules.is_trading_day(invalid)
            assert not rules.is_early_close_day(invalid)
            assert not rules.is_closed_day(invalid)

    def test_weekend_checked_before_table_lookup(self):
        """A weekend date never reaches the closed-day table."""
        lookups = []

        class CountingData(CalendarData):
            def contains_date(self, value):
                lookups.append(value)
                return super().contains_date(value)

        closed = CountingData.from_mapping({2024: {12: day(25)}}, "COUNTING")
        rules = TableDayRules(closed, CalendarData.from_mapping({}, "EMPTY"))

        assert not rules.is_trading_day(date(2024, 1, 13))
        assert lookups == []
        assert not rules.is_trading_day(date(2024, 12, 25))
        assert lookups == [date(2024, 12, 25)]

    def test_early_close_on_closed_day_is_rejected(self):
        """Early close days must themselves be trading days."""
        closed = CalendarData.from_mapping({2024: {12: day(25)}}, "CLOSED")
        early = CalendarData.from_mapping({2024: {12: days([24, 25])}}, "EARLY")
        try:
            TableDayRules(closed, early)
            assert False, "Should have raised CalendarDataError"
        except CalendarDataError as e:
            assert "2024-12-25" in str(e)
            assert "2024-12-24" not in str(e)

    def test_early_close_on_weekend_is_rejected(self):
        closed = CalendarData.from_mapping({}, "CLOSED")
        early = CalendarData.from_mapping({2024: {1: day(13)}}, "EARLY")
        try:
            TableDayRules(closed, early)
            assert False, "Should have raised CalendarDataError"
        except CalendarDataError as e:
            assert "2024-01-13" in str(e)

    def test_day_rules_is_abstract(self):
        try:
            DayRules()
            assert False, "Should have raised TypeError"
        except TypeError:
            pass


class TestUSEquitiesData:
    """Properties of the US equities tables over the full 2000-2025 range."""

    def test_trading_day_matches_weekday_and_closed_table(self):
        """is_trading_day == weekday and not closed, for every date in range."""
        rules = USEquitiesDayRules()
        for d in _all_dates(date(1999, 12, 1), date(2026, 1, 31)):
            expected = d.isoweekday() < 6 and d not in US_EQUITIES_CLOSED_DAYS
            assert rules.is_trading_day(d) == expected, f"{d} classified incorrectly"

    def test_early_close_matches_table(self):
        rules = USEquitiesDayRules()
        for d in _all_dates(date(2000, 1, 1), date(2025, 12, 31)):
            assert rules.is_early_close_day(d) == (d in US_EQUITIES_EARLY_CLOSE_DAYS)

    def test_every_early_close_day_is_a_trading_day(self):
        rules = USEquitiesDayRules()
        early = list(US_EQUITIES_EARLY_CLOSE_DAYS.dates())
        assert len(early) > 50
        for d in early:
            assert rules.is_trading_day(d), f"Early close {d} is not a trading day"

    def test_table_coverage(self):
        assert US_EQUITIES_CLOSED_DAYS.years == tuple(range(2000, 2026))
        assert US_EQUITIES_EARLY_CLOSE_DAYS.years == tuple(range(2000, 2026))

    def test_known_closures(self):
        """Federal holidays and special closures are in the closed table."""
        rules = USEquitiesDayRules()
        closed = [
            date(2024, 12, 25),  # Christmas
            date(2024, 11, 28),  # Thanksgiving
            date(2024, 1, 15),   # MLK Day
            date(2024, 3, 29),   # Good Friday
            date(2001, 9, 11),   # 9/11
            date(2001, 9, 14),   # 9/11
            date(2012, 10, 29),  # Hurricane Sandy
            date(2018, 12, 5),   # President George H.W. Bush funeral
            date(2025, 1, 9),    # President Carter funeral
            date(2022, 6, 20),   # Juneteenth (observed)
        ]
        for d in closed:
            assert d.isoweekday() < 6, f"{d} should be a weekday"
            assert not rules.is_trading_day(d), f"{d} should not be a trading day"
        print(f"  ✓ {len(closed)} weekday closures classified as non-trading")

    def test_years_outside_data_fall_back_to_weekend_rule(self):
        rules = USEquitiesDayRules()
        assert rules.is_trading_day(date(1999, 12, 24))  # Friday, no data
        assert rules.is_trading_day(date(2026, 12, 25))  # Friday, no data
        assert not rules.is_trading_day(date(2026, 12, 26))  # Saturday
