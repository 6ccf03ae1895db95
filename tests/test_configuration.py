"""Mini README: Tests for environment-driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from marina.configuration import DEFAULT_MAX_VESSELS, MarinaSettings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("MARINA_MAX_VESSELS", "MARINA_STRICT_LOCATION_RANGES", "MARINA_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = MarinaSettings()

    assert settings.max_vessels == DEFAULT_MAX_VESSELS == 120
    assert settings.strict_location_ranges is False
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MARINA_MAX_VESSELS", "5")
    monkeypatch.setenv("MARINA_STRICT_LOCATION_RANGES", "true")
    monkeypatch.setenv("MARINA_LOG_LEVEL", "debug")

    settings = MarinaSettings()

    assert settings.max_vessels == 5
    assert settings.strict_location_ranges is True
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(("name", "value"), [("MARINA_MAX_VESSELS", "0"), ("MARINA_LOG_LEVEL", "loud")])
def test_invalid_values_are_rejected(monkeypatch: pytest.MonkeyPatch, name: str, value: str) -> None:
    monkeypatch.setenv(name, value)

    with pytest.raises(ValidationError):
        MarinaSettings()
