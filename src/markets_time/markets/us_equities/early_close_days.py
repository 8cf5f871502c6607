"""US equities early close days (13:00 ET regular / 17:00 ET extended), 2000-2025."""

from __future__ import annotations

from markets_time.calendar.data import CalendarData, day

_EARLY_CLOSE_DAYS = {
    2000: {
        7: day(3),      # Day before Independence Day
        11: day(24),    # Black Friday
    },
    2001: {
        7: day(3),      # Day before Independence Day
        11: day(23),    # Black Friday
        12: day(24),    # Christmas Eve
    },
    2002: {
        7: day(3),      # Day before Independence Day
        11: day(29),    # Black Friday
        12: day(24),    # Christmas Eve
    },
    2003: {
        7: day(3),      # Day before Independence Day
        11: day(28),    # Black Friday
        12: day(24),    # Christmas Eve
    },
    2004: {
        11: day(26),    # Black Friday
    },
    2005: {
        11: day(25),    # Black Friday
    },
    2006: {
        7: day(3),      # Day before Independence Day
        11: day(24),    # Black Friday
    },
    2007: {
        7: day(3),      # Day before Independence Day
        11: day(23),    # Black Friday
        12: day(24),    # Christmas Eve
    },
    2008: {
        7: day(3),      # Day before Independence Day
        11: day(28),    # Black Friday
    },
    2009: {
        11: day(27),    # Black Friday
        12: day(24),    # Christmas Eve
    },
    2010: {
        11: day(26),    # Black Friday
    },
    2011: {
        7: day(1),      # Friday before Independence Day (Monday)
        11: day(25),    # Black Friday
    },
    2012: {
        11: day(23),    # Black Friday
        12: day(24),    # Christmas Eve
    },
    2013: {
        7: day(3),      # Day before Independence Day
        11: day(29),    # Black Friday
        12: day(24),    # Christmas Eve
    },
    2014: {
        7: day(3),      # Day before Independence Day
        11: day(28),    # Black Friday
        12: day(24),    # Christmas Eve
    },
    2015: {
        11: day(27),    # Black Friday
        12: day(24),    # Christmas Eve
    },
    2016: {
        7: day(1),      # Friday before Independence Day (Monday)
        11: day(25),    # Black Friday
        12: day(23),    # Christmas Eve (observed)
    },
    2017: {
        7: day(3),      # Day before Independence Day
        11: day(24),    # Black Friday
    },
    2018: {
        7: day(3),      # Day before Independence Day
        11: day(23),    # Black Friday
        12: day(24),    # Christmas Eve
    },
    2019: {
        7: day(3),      # Day before Independence Day
        11: day(29),    # Black Friday
        12: day(24),    # Christmas Eve
    },
    2020: {
        11: day(27),    # Black Friday
        12: day(24),    # Christmas Eve
    },
    2021: {
        7: day(2),      # Day before observed Independence Day (July 5)
        11: day(26),    # Black Friday
    },
    2022: {
        11: day(25),    # Black Friday
    },
    2023: {
        7: day(3),      # Day before Independence Day
        11: day(24),    # Black Friday
    },
    2024: {
        7: day(3),      # Day before Independence Day
        11: day(29),    # Black Friday
        12: day(24),    # Christmas Eve
    },
    2025: {
        7: day(3),      # Day before Independence Day
        11: day(28),    # Black Friday
        12: day(24),    # Christmas Eve
    },
}

US_EQUITIES_EARLY_CLOSE_DAYS = CalendarData.from_mapping(_EARLY_CLOSE_DAYS, "US_EQUITIES_EARLY_CLOSE_DAYS")
