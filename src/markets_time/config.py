from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import yaml

from markets_time.calendar.sessions import SCOPES, SessionConfig, TradingHours
from markets_time.composition import CalendarConfig
from markets_time.markets import get_market_config
from markets_time.timeutils import HourMinute, parse_hhmm

DEFAULT_MARKET = "us_equities"


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class Config:
    raw: dict[str, Any]

    def get(self, *path: str, default: Any | None = None) -> Any:
        node: Any = self.raw
        for key in path:
            if not isinstance(node, dict) or key not in node:
                return default
            node = node[key]
        return node


def load_config(path: Path) -> Config:
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid config root in {path}")
    return Config(raw=data)


def _hhmm(value: Any) -> HourMinute:
    # YAML 1.1 reads unquoted 9:30 as the base-60 integer 570
    if isinstance(value, int) and not isinstance(value, bool):
        return HourMinute(value // 60, value % 60)
    return parse_hhmm(str(value))


def _trading_hours_from(config: Config, scope: str, base: TradingHours) -> TradingHours:
    section = config.get("sessions", scope, default={})
    if not isinstance(section, dict):
        raise ConfigError(f"sessions.{scope} must be a mapping, got {type(section).__name__}")

    try:
        return TradingHours(
            open_time=_hhmm(section["open"]) if "open" in section else base.open_time,
            close_time=_hhmm(section["close"]) if "close" in section else base.close_time,
            early_close_time=(
                _hhmm(section["early_close"]) if "early_close" in section else base.early_close_time
            ),
        )
    except ValueError as exc:
        raise ConfigError(f"Invalid sessions.{scope}: {exc}") from exc


def calendar_config_from(config: Config, market: str | None = None) -> CalendarConfig:
    """
    Build a CalendarConfig from a YAML config.

    The market's registered defaults are used for anything the file does not
    set; ``market`` overrides the file's ``market`` key.
    """
    name = market or str(config.get("market", default=DEFAULT_MARKET))
    base = get_market_config(name)

    sessions = config.get("sessions", default={})
    if not isinstance(sessions, dict):
        raise ConfigError("sessions must be a mapping")
    unknown = sorted(set(sessions) - set(SCOPES))
    if unknown:
        raise ConfigError(f"Unknown session scopes in config: {', '.join(unknown)}")

    session_config = SessionConfig(
        regular=_trading_hours_from(config, "regular", base.session_config.regular),
        extended=_trading_hours_from(config, "extended", base.session_config.extended),
    )
    zone_name = str(config.get("timezone", default=base.zone_name))
    return replace(base, zone_name=zone_name, session_config=session_config)
