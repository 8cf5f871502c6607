from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import Any
from zoneinfo import ZoneInfo

import pandas as pd


def is_valid_date(value: Any) -> bool:
    """Return False for ``None`` and ``pd.NaT``, the two "invalid instant" values we accept."""
    if value is None:
        return False
    if not isinstance(value, date):
        return False
    return not pd.isna(value)


@dataclass(frozen=True, order=True)
class HourMinute:
    """Wall-clock time of day with validated hour (0-23) and minute (0-59)."""

    hour: int
    minute: int

    def __post_init__(self) -> None:
        if not _is_int(self.hour) or not 0 <= self.hour <= 23:
            raise ValueError(f"Hour must be an integer between 0 and 23, received: {self.hour!r}")
        if not _is_int(self.minute) or not 0 <= self.minute <= 59:
            raise ValueError(f"Minute must be an integer between 0 and 59, received: {self.minute!r}")

    def to_time_string(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}:00"

    def as_time(self) -> time:
        return time(self.hour, self.minute)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def parse_hhmm(value: str) -> HourMinute:
    parts = value.split(":")
    if len(parts) != 2:
        raise ValueError(f"Invalid time: {value}")
    try:
        return HourMinute(int(parts[0]), int(parts[1]))
    except ValueError as exc:
        raise ValueError(f"Invalid time: {value} ({exc})") from exc


@dataclass(frozen=True)
class DateTimeFactory:
    """
    Builds timezone-aware datetimes in a single fixed zone.

    Naive input is interpreted as wall-clock time in the zone; aware input is
    converted into it.
    """

    zone_name: str
    tz: ZoneInfo = field(init=False, repr=False, compare=False)

    MAX_ISO_LENGTH = 64
    MAX_TIMESTAMP_VALUE = 8.64e15

    def __post_init__(self) -> None:
        object.__setattr__(self, "tz", ZoneInfo(self.zone_name))

    def from_iso(self, iso: str) -> datetime:
        if not isinstance(iso, str):
            raise ValueError(f"ISO string must be a str, got {type(iso).__name__}")
        if len(iso) == 0:
            raise ValueError("ISO string cannot be empty")
        if not iso.strip():
            raise ValueError("ISO string cannot be whitespace-only")
        if len(iso) > self.MAX_ISO_LENGTH:
            raise ValueError(
                f"ISO string too long: received {len(iso)} characters, "
                f"maximum allowed is {self.MAX_ISO_LENGTH}. Input: {iso[:50]!r}..."
            )
        try:
            parsed = datetime.fromisoformat(iso)
        except ValueError as exc:
            raise ValueError(f"Invalid DateTime: {exc}") from exc
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=self.tz)
        return parsed.astimezone(self.tz)

    def from_datetime(self, value: datetime) -> datetime:
        """Re-zone ``value`` keeping its wall-clock fields (09:30 UTC becomes 09:30 in the zone)."""
        if not is_valid_date(value):
            raise ValueError(f"Invalid DateTime: {value!r}")
        if isinstance(value, pd.Timestamp):
            value = value.to_pydatetime()
        if not isinstance(value, datetime):
            return datetime(value.year, value.month, value.day, tzinfo=self.tz)
        if value.tzinfo is not None and getattr(value.tzinfo, "key", None) == self.zone_name:
            return value
        return value.replace(tzinfo=self.tz)

    def from_millis(self, millis: float) -> datetime:
        """Instant ``millis`` milliseconds after the Unix epoch, expressed in the zone."""
        if isinstance(millis, bool) or not isinstance(millis, (int, float)):
            raise ValueError(f"Milliseconds must be a number, got {type(millis).__name__}")
        if not math.isfinite(millis):
            raise ValueError(f"Milliseconds must be finite, got {millis}")
        if abs(millis) > self.MAX_TIMESTAMP_VALUE:
            raise ValueError(
                f"Milliseconds out of range: {millis}, maximum magnitude is {self.MAX_TIMESTAMP_VALUE:.0f}"
            )
        try:
            return datetime.fromtimestamp(millis / 1000, self.tz)
        except (OverflowError, OSError) as exc:
            # datetime stops at year 9999, well short of the epoch-millis limit
            raise ValueError(f"Milliseconds out of range: {millis} ({exc})") from exc

    def now(self) -> datetime:
        return datetime.now(self.tz)
