from __future__ import annotations

from dataclasses import dataclass

from markets_time.timeutils import HourMinute

REGULAR_HOURS = "regular"
EXTENDED_HOURS = "extended"
SCOPES = (REGULAR_HOURS, EXTENDED_HOURS)


@dataclass(frozen=True)
class TradingHours:
    """
    Wall-clock session boundaries for one scope.

    Sessions never cross midnight: open < close, and the early close falls
    after the open and no later than the normal close.
    """

    open_time: HourMinute
    close_time: HourMinute
    early_close_time: HourMinute

    def __post_init__(self) -> None:
        if self.open_time >= self.close_time:
            raise ValueError(
                f"Open time {self.open_time.to_time_string()} must be before "
                f"close time {self.close_time.to_time_string()}"
            )
        if not self.open_time < self.early_close_time <= self.close_time:
            raise ValueError(
                f"Early close time {self.early_close_time.to_time_string()} must fall within "
                f"({self.open_time.to_time_string()}, {self.close_time.to_time_string()}]"
            )

    def close_for(self, early_close: bool) -> HourMinute:
        return self.early_close_time if early_close else self.close_time


@dataclass(frozen=True)
class SessionConfig:
    regular: TradingHours
    extended: TradingHours

    def for_scope(self, scope: str) -> TradingHours:
        if scope == REGULAR_HOURS:
            return self.regular
        if scope == EXTENDED_HOURS:
            return self.extended
        raise ValueError(f"Unknown trading hours scope: {scope!r} (expected one of {', '.join(SCOPES)})")
