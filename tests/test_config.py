"""Tests for configuration adapter."""

import os
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest

from ptv_departures.adapters.config import AppConfig, StopConfigurationLoader
from ptv_departures.adapters.ptv_api.constants import PTV_BASE_URL


@pytest.fixture(autouse=True)
def clean_env() -> Iterator[None]:
    """Run every test without PTV settings from the environment."""
    with patch.dict(os.environ, {}, clear=True):
        yield


def test_config_loads_defaults() -> None:
    """Given no environment variables, when loading config, then defaults are used."""
    config = AppConfig.for_testing()

    assert config.host == "0.0.0.0"
    assert config.port == 8000
    assert config.ptv_base_url == PTV_BASE_URL
    assert config.timezone == "Australia/Melbourne"
    assert config.max_display_departures == 12
    assert config.max_results == 15
    assert config.config_file is None


def test_config_loads_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given environment variables, when loading config, then they are used."""
    monkeypatch.setenv("PTV_DEV_ID", "3001234")
    monkeypatch.setenv("PTV_API_KEY", "secret-key")
    monkeypatch.setenv("MAX_DISPLAY_DEPARTURES", "6")
    monkeypatch.setenv("TIMEZONE", "UTC")

    config = AppConfig.for_testing()

    assert config.ptv_dev_id == "3001234"
    assert config.ptv_api_key.get_secret_value() == "secret-key"
    assert config.max_display_departures == 6
    assert config.timezone == "UTC"


def test_api_key_is_not_shown_in_repr(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given an API key, when rendering config, then the key is masked."""
    monkeypatch.setenv("PTV_API_KEY", "secret-key")

    assert "secret-key" not in repr(AppConfig.for_testing())


def test_config_validates_timezone() -> None:
    """Given an unknown timezone, when loading config, then validation error is raised."""
    with pytest.raises(ValueError, match="IANA timezone"):
        AppConfig.for_testing(timezone="Mars/Olympus_Mons")


def test_config_validates_display_limit() -> None:
    """Given a display limit of 0, when loading config, then validation error is raised."""
    with pytest.raises(ValueError, match="at least 1"):
        AppConfig.for_testing(max_display_departures=0)


def test_config_normalizes_log_level() -> None:
    """Given a lower-case log level, when loading config, then it is upper-cased."""
    assert AppConfig.for_testing(log_level="debug").log_level == "DEBUG"

    with pytest.raises(ValueError, match="log_level"):
        AppConfig.for_testing(log_level="chatty")


def test_credentials_returned_when_configured() -> None:
    """Given dev id and key, when requesting credentials, then both are returned."""
    config = AppConfig.for_testing(ptv_dev_id="abc", ptv_api_key="secret")

    credentials = config.credentials()

    assert credentials.dev_id == "abc"
    assert credentials.signing_key == "secret"


def test_credentials_missing_raises_error() -> None:
    """Given no API key, when requesting credentials, then ValueError is raised."""
    config = AppConfig.for_testing(ptv_dev_id="abc")

    with pytest.raises(ValueError, match="PTV_DEV_ID and PTV_API_KEY"):
        config.credentials()


def test_default_stops_without_config_file() -> None:
    """Given no config file, when loading stops, then the built-in train and tram are used."""
    stops = AppConfig.for_testing().get_stops_config()

    assert [s["key"] for s in stops] == ["trains", "trams"]
    assert stops[0]["route_type"] == 0
    assert stops[1]["route_type"] == 1


def test_config_parses_stops_from_toml(tmp_path: Path) -> None:
    """Given a TOML config file, when loading stops, then its [[stops]] are returned."""
    config_path = tmp_path / "config.toml"
    config_path.write_text(
        """
[[stops]]
key = "buses"
title = "Bus 506"
route_type = 2
stop_id = 12345
direction_id = 3
""",
        encoding="utf-8",
    )

    stops = AppConfig.for_testing(config_file=str(config_path)).get_stops_config()

    assert stops == [
        {"key": "buses", "title": "Bus 506", "route_type": 2, "stop_id": 12345, "direction_id": 3}
    ]


def test_config_raises_error_when_file_not_found() -> None:
    """Given a non-existent config file, when loading stops, then FileNotFoundError is raised."""
    config = AppConfig.for_testing(config_file="nonexistent.toml")

    with pytest.raises(FileNotFoundError, match="Configuration file not found"):
        config.get_stops_config()


def test_config_raises_error_for_invalid_toml(tmp_path: Path) -> None:
    """Given a broken TOML file, when loading stops, then ValueError is raised."""
    config_path = tmp_path / "broken.toml"
    config_path.write_text("[[stops]\nkey = ", encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid TOML"):
        AppConfig.for_testing(config_file=str(config_path)).get_stops_config()


def test_config_raises_error_when_stops_not_a_list(tmp_path: Path) -> None:
    """Given stops as a table, when loading stops, then ValueError is raised."""
    config_path = tmp_path / "config.toml"
    config_path.write_text('[stops]\nkey = "trains"\n', encoding="utf-8")

    with pytest.raises(ValueError, match="must be a list"):
        AppConfig.for_testing(config_file=str(config_path)).get_stops_config()


def test_example_config_file_loads() -> None:
    """Given the shipped example config, when loading stops, then both sections are present."""
    example = Path(__file__).parent.parent / "config.example.toml"

    stop_configs = StopConfigurationLoader.load(AppConfig.for_testing(config_file=str(example)))

    assert [s.key for s in stop_configs] == ["trains", "trams"]
