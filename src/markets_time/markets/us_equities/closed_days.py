"""US equities (NYSE/NASDAQ) full-day closures, 2000-2025.

Source: https://www.nyse.com/markets/hours-calendars

Includes federal holidays, Good Friday, emergency closures (9/11, Hurricane
Sandy) and national days of mourning for presidential funerals.
"""

from __future__ import annotations

from markets_time.calendar.data import CalendarData, day, days

_CLOSED_DAYS = {
    2000: {
        1: day(17),     # Martin Luther King Jr. Day
        2: day(21),     # Presidents Day
        4: day(21),     # Good Friday
        5: day(29),     # Memorial Day
        7: day(4),      # Independence Day
        9: day(4),      # Labor Day
        11: day(23),    # Thanksgiving
        12: day(25),    # Christmas
    },
    2001: {
        1: days([1, 15]),               # New Year's Day, MLK Day
        2: day(19),                     # Presidents Day
        4: day(13),                     # Good Friday
        5: day(28),                     # Memorial Day
        7: day(4),                      # Independence Day
        9: days([3, 11, 12, 13, 14]),   # Labor Day, 9/11 closure
        11: day(22),                    # Thanksgiving
        12: day(25),                    # Christmas
    },
    2002: {
        1: days([1, 21]),   # New Year's Day, MLK Day
        2: day(18),         # Presidents Day
        3: day(29),         # Good Friday
        5: day(27),         # Memorial Day
        7: day(4),          # Independence Day
        9: day(2),          # Labor Day
        11: day(28),        # Thanksgiving
        12: day(25),        # Christmas
    },
    2003: {
        1: days([1, 20]),   # New Year's Day, MLK Day
        2: day(17),         # Presidents Day
        4: day(18),         # Good Friday
        5: day(26),         # Memorial Day
        7: day(4),          # Independence Day
        9: day(1),          # Labor Day
        11: day(27),        # Thanksgiving
        12: day(25),        # Christmas
    },
    2004: {
        1: days([1, 19]),   # New Year's Day, MLK Day
        2: day(16),         # Presidents Day
        4: day(9),          # Good Friday
        5: day(31),         # Memorial Day
        6: day(11),         # President Reagan funeral
        7: day(5),          # Independence Day (observed)
        9: day(6),          # Labor Day
        11: day(25),        # Thanksgiving
        12: day(24),        # Christmas (observed)
    },
    2005: {
        1: day(17),     # MLK Day
        2: day(21),     # Presidents Day
        3: day(25),     # Good Friday
        5: day(30),     # Memorial Day
        7: day(4),      # Independence Day
        9: day(5),      # Labor Day
        11: day(24),    # Thanksgiving
        12: day(26),    # Christmas (observed)
    },
    2006: {
        1: days([2, 16]),   # New Year's Day (observed), MLK Day
        2: day(20),         # Presidents Day
        4: day(14),         # Good Friday
        5: day(29),         # Memorial Day
        7: day(4),          # Independence Day
        9: day(4),          # Labor Day
        11: day(23),        # Thanksgiving
        12: day(25),        # Christmas
    },
    2007: {
        1: days([2, 15]),   # President Ford funeral, MLK Day
        2: day(19),         # Presidents Day
        4: day(6),          # Good Friday
        5: day(28),         # Memorial Day
        7: day(4),          # Independence Day
        9: day(3),          # Labor Day
        11: day(22),        # Thanksgiving
        12: day(25),        # Christmas
    },
    2008: {
        1: days([1, 21]),   # New Year's Day, MLK Day
        2: day(18),         # Presidents Day
        3: day(21),         # Good Friday
        5: day(26),         # Memorial Day
        7: day(4),          # Independence Day
        9: day(1),          # Labor Day
        11: day(27),        # Thanksgiving
        12: day(25),        # Christmas
    },
    2009: {
        1: days([1, 19]),   # New Year's Day, MLK Day
        2: day(16),         # Presidents Day
        4: day(10),         # Good Friday
        5: day(25),         # Memorial Day
        7: day(3),          # Independence Day (observed)
        9: day(7),          # Labor Day
        11: day(26),        # Thanksgiving
        12: day(25),        # Christmas
    },
    2010: {
        1: days([1, 18]),   # New Year's Day, MLK Day
        2: day(15),         # Presidents Day
        4: day(2),          # Good Friday
        5: day(31),         # Memorial Day
        7: day(5),          # Independence Day (observed)
        9: day(6),          # Labor Day
        11: day(25),        # Thanksgiving
        12: day(24),        # Christmas (observed)
    },
    2011: {
        1: day(17),     # MLK Day
        2: day(21),     # Presidents Day
        4: day(22),     # Good Friday
        5: day(30),     # Memorial Day
        7: day(4),      # Independence Day
        9: day(5),      # Labor Day
        11: day(24),    # Thanksgiving
        12: day(26),    # Christmas (observed)
    },
    2012: {
        1: days([2, 16]),   # New Year's Day (observed), MLK Day
        2: day(20),         # Presidents Day
        4: day(6),          # Good Friday
        5: day(28),         # Memorial Day
        7: day(4),          # Independence Day
        9: day(3),          # Labor Day
        10: days([29, 30]), # Hurricane Sandy
        11: day(22),        # Thanksgiving
        12: day(25),        # Christmas
    },
    2013: {
        1: days([1, 21]),   # New Year's Day, MLK Day
        2: day(18),         # Presidents Day
        3: day(29),         # Good Friday
        5: day(27),         # Memorial Day
        7: day(4),          # Independence Day
        9: day(2),          # Labor Day
        11: day(28),        # Thanksgiving
        12: day(25),        # Christmas
    },
    2014: {
        1: days([1, 20]),   # New Year's Day, MLK Day
        2: day(17),         # Presidents Day
        4: day(18),         # Good Friday
        5: day(26),         # Memorial Day
        7: day(4),          # Independence Day
        9: day(1),          # Labor Day
        11: day(27),        # Thanksgiving
        12: day(25),        # Christmas
    },
    2015: {
        1: days([1, 19]),   # New Year's Day, MLK Day
        2: day(16),         # Presidents Day
        4: day(3),          # Good Friday
        5: day(25),         # Memorial Day
        7: day(3),          # Independence Day (observed)
        9: day(7),          # Labor Day
        11: day(26),        # Thanksgiving
        12: day(25),        # Christmas
    },
    2016: {
        1: days([1, 18]),   # New Year's Day, MLK Day
        2: day(15),         # Presidents Day
        3: day(25),         # Good Friday
        5: day(30),         # Memorial Day
        7: day(4),          # Independence Day
        9: day(5),          # Labor Day
        11: day(24),        # Thanksgiving
        12: day(26),        # Christmas (observed)
    },
    2017: {
        1: days([2, 16]),   # New Year's Day (observed), MLK Day
        2: day(20),         # Presidents Day
        4: day(14),         # Good Friday
        5: day(29),         # Memorial Day
        7: day(4),          # Independence Day
        9: day(4),          # Labor Day
        11: day(23),        # Thanksgiving
        12: day(25),        # Christmas
    },
    2018: {
        1: days([1, 15]),   # New Year's Day, MLK Day
        2: day(19),         # Presidents Day
        3: day(30),         # Good Friday
        5: day(28),         # Memorial Day
        7: day(4),          # Independence Day
        9: day(3),          # Labor Day
        11: day(22),        # Thanksgiving
        12: days([5, 25]),  # President George H.W. Bush funeral, Christmas
    },
    2019: {
        1: days([1, 21]),   # New Year's Day, MLK Day
        2: day(18),         # Presidents Day
        4: day(19),         # Good Friday
        5: day(27),         # Memorial Day
        7: day(4),          # Independence Day
        9: day(2),          # Labor Day
        11: day(28),        # Thanksgiving
        12: day(25),        # Christmas
    },
    2020: {
        1: days([1, 20]),   # New Year's Day, MLK Day
        2: day(17),         # Presidents Day
        4: day(10),         # Good Friday
        5: day(25),         # Memorial Day
        7: day(3),          # Independence Day (observed)
        9: day(7),          # Labor Day
        11: day(26),        # Thanksgiving
        12: day(25),        # Christmas
    },
    2021: {
        1: days([1, 18]),   # New Year's Day, MLK Day
        2: day(15),         # Presidents Day
        4: day(2),          # Good Friday
        5: day(31),         # Memorial Day
        7: day(5),          # Independence Day (observed)
        9: day(6),          # Labor Day
        11: day(25),        # Thanksgiving
        12: day(24),        # Christmas (observed)
    },
    2022: {
        1: day(17),     # MLK Day
        2: day(21),     # Presidents Day
        4: day(15),     # Good Friday
        5: day(30),     # Memorial Day
        6: day(20),     # Juneteenth (observed)
        7: day(4),      # Independence Day
        9: day(5),      # Labor Day
        11: day(24),    # Thanksgiving
        12: day(26),    # Christmas (observed)
    },
    2023: {
        1: days([2, 16]),   # New Year's Day (observed), MLK Day
        2: day(20),         # Presidents Day
        4: day(7),          # Good Friday
        5: day(29),         # Memorial Day
        6: day(19),         # Juneteenth
        7: day(4),          # Independence Day
        9: day(4),          # Labor Day
        11: day(23),        # Thanksgiving
        12: day(25),        # Christmas
    },
    2024: {
        1: days([1, 15]),   # New Year's Day, MLK Day
        2: day(19),         # Presidents Day
        3: day(29),         # Good Friday
        5: day(27),         # Memorial Day
        6: day(19),         # Juneteenth
        7: day(4),          # Independence Day
        9: day(2),          # Labor Day
        11: day(28),        # Thanksgiving
        12: day(25),        # Christmas
    },
    2025: {
        1: days([1, 9, 20]),    # New Year's Day, President Carter funeral, MLK Day
        2: day(17),             # Presidents Day
        4: day(18),             # Good Friday
        5: day(26),             # Memorial Day
        6: day(19),             # Juneteenth
        7: day(4),              # Independence Day
        9: day(1),              # Labor Day
        11: day(27),            # Thanksgiving
        12: day(25),            # Christmas
    },
}

US_EQUITIES_CLOSED_DAYS = CalendarData.from_mapping(_CLOSED_DAYS, "US_EQUITIES_CLOSED_DAYS")
