"""Tests for configuration helpers."""

from zoneinfo import ZoneInfo

from fitness_tracker.config import Settings, resolve_timezone


def test_settings_defaults(settings: Settings) -> None:
    assert settings.habits_per_day == 7
    assert settings.default_difficulty == "medium"
    assert settings.default_timezone == "UTC"


def test_resolve_timezone() -> None:
    assert resolve_timezone("Europe/Berlin") == ZoneInfo("Europe/Berlin")
    assert resolve_timezone("Mars/Olympus") == ZoneInfo("UTC")
    assert resolve_timezone(None) == ZoneInfo("UTC")
    assert resolve_timezone("", fallback="Europe/Berlin") == ZoneInfo("Europe/Berlin")
