"""Tests for YAML configuration and the command line interface."""

from __future__ import annotations

import sys
from datetime import date
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from markets_time.__main__ import main
from markets_time.calendar.sessions import EXTENDED_HOURS, REGULAR_HOURS
from markets_time.composition import create_calendar
from markets_time.config import Config, ConfigError, calendar_config_from, load_config
from markets_time.timeutils import HourMinute

REPO_CONFIG = Path(__file__).parent.parent / "configs" / "us_equities.yaml"


def create_test_config(overrides: dict = None) -> Config:
    """Create a test configuration."""
    base = {
        "market": "us_equities",
        "timezone": "America/New_York",
        "sessions": {
            "regular": {"open": "09:30", "close": "16:00", "early_close": "13:00"},
            "extended": {"open": "04:00", "close": "20:00", "early_close": "17:00"},
        },
    }
    if overrides:
        _deep_update(base, overrides)
    return Config(raw=base)


def _deep_update(base: dict, updates: dict) -> None:
    """Recursively update nested dict."""
    for k, v in updates.items():
        if isinstance(v, dict) and k in base and isinstance(base[k], dict):
            _deep_update(base[k], v)
        else:
            base[k] = v


class TestConfig:
    """Test config loading and CalendarConfig construction."""

    def test_get_nested_with_default(self):
        config = create_test_config()
        assert config.get("sessions", "regular", "open") == "09:30"
        assert config.get("sessions", "overnight", "open", default="n/a") == "n/a"
        assert config.get("market") == "us_equities"

    def test_repo_config_matches_builtin_market(self):
        config = load_config(REPO_CONFIG)
        calendar_config = calendar_config_from(config)

        assert calendar_config.zone_name == "America/New_York"
        regular = calendar_config.session_config.for_scope(REGULAR_HOURS)
        assert regular.open_time == HourMinute(9, 30)
        assert regular.close_time == HourMinute(16, 0)
        assert regular.early_close_time == HourMinute(13, 0)

    def test_session_override(self):
        config = create_test_config({"sessions": {"extended": {"close": "18:30"}}})
        calendar = create_calendar(calendar_config_from(config))

        interval = calendar.trading_hours_interval(date(2024, 1, 16), EXTENDED_HOURS)
        assert (interval.end.hour, interval.end.minute) == (18, 30)
        assert (interval.start.hour, interval.start.minute) == (4, 0)

    def test_missing_sessions_use_market_defaults(self):
        calendar_config = calendar_config_from(Config(raw={}))
        assert calendar_config.zone_name == "America/New_York"
        assert calendar_config.session_config.extended.close_time == HourMinute(20, 0)

    def test_unquoted_yaml_times(self, tmp_path):
        """YAML reads unquoted 16:00 as a base-60 integer; it still means 16:00."""
        path = tmp_path / "market.yaml"
        path.write_text(
            "market: us_equities\n"
            "sessions:\n"
            "  regular:\n"
            "    open: 9:30\n"
            "    close: 16:00\n"
            "    early_close: 13:00\n",
            encoding="utf-8",
        )
        regular = calendar_config_from(load_config(path)).session_config.regular
        assert regular.open_time == HourMinute(9, 30)
        assert regular.close_time == HourMinute(16, 0)
        assert regular.early_close_time == HourMinute(13, 0)

    def test_invalid_root_raises(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("- just\n- a list\n", encoding="utf-8")
        try:
            load_config(path)
            assert False, "Should have raised ConfigError"
        except ConfigError:
            pass

    def test_invalid_session_values_raise(self):
        for overrides in (
            {"sessions": {"regular": {"open": "25:00"}}},
            {"sessions": {"regular": {"close": "09:00"}}},
            {"sessions": {"regular": "09:30-16:00"}},
            {"sessions": {"overnight": {"open": "20:00"}}},
        ):
            try:
                calendar_config_from(create_test_config(overrides))
                assert False, f"Should have raised ConfigError for {overrides}"
            except ConfigError:
                pass

    def test_market_argument_overrides_file(self):
        config = create_test_config({"market": "lse"})
        calendar_config = calendar_config_from(config, market="us_equities")
        assert calendar_config.zone_name == "America/New_York"

    def test_unknown_market_raises(self):
        try:
            calendar_config_from(create_test_config({"market": "lse"}))
            assert False, "Should have raised KeyError"
        except KeyError:
            pass


class TestCLI:
    """Test the markets_time command line."""

    def test_info_early_close_day(self, capsys):
        assert main(["info", "2024-11-29"]) == 0
        out = capsys.readouterr().out
        assert "trading day: yes" in out
        assert "early close: yes" in out
        assert "09:30-13:00" in out
        assert "04:00-17:00" in out

    def test_info_holiday(self, capsys):
        assert main(["info", "2024-12-25"]) == 0
        out = capsys.readouterr().out
        assert "trading day: no" in out
        assert "regular:     closed" in out

    def test_next_and_prev(self, capsys):
        assert main(["next", "2024-01-12"]) == 0
        assert capsys.readouterr().out.strip() == "2024-01-16"
        assert main(["prev", "2024-01-16"]) == 0
        assert capsys.readouterr().out.strip() == "2024-01-12"

    def test_schedule(self, capsys):
        assert main(["--config", str(REPO_CONFIG), "schedule", "2024-11-25", "2024-11-29"]) == 0
        out = capsys.readouterr().out
        assert "2024-11-25" in out
        assert "2024-11-28" not in out
        assert "2024-11-29" in out

    def test_schedule_empty(self, capsys):
        assert main(["schedule", "2024-01-13", "2024-01-14", "--scope", "extended"]) == 0
        assert "No trading days in range." in capsys.readouterr().out

    def test_unknown_market_exits_nonzero(self):
        assert main(["--market", "lse", "info", "2024-01-16"]) == 1

    def test_missing_config_exits_nonzero(self, tmp_path):
        assert main(["--config", str(tmp_path / "missing.yaml"), "info", "2024-01-16"]) == 1
