"""12-factor configuration adapter using environment variables and TOML config."""

import logging
import tomllib
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ptv_departures.adapters.ptv_api.constants import DEFAULT_TIMEOUT_SECONDS, PTV_BASE_URL
from ptv_departures.domain.models.credentials import Credentials
from ptv_departures.domain.models.route_type import RouteType

# Board shown when no config file is given: Jewell station towards the City,
# and tram 19 from Barkly Square towards the City.
DEFAULT_STOPS: list[dict[str, Any]] = [
    {
        "key": "trains",
        "title": "Train - Jewell → City",
        "route_type": int(RouteType.TRAIN),
        "stop_id": 1103,
        "direction_id": 1,
    },
    {
        "key": "trams",
        "title": "Tram 19 - Barkly Sq → City",
        "route_type": int(RouteType.TRAM),
        "stop_id": 2258,
        "direction_id": 5,
    },
]


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=8000, description="Port to bind the server to")
    log_level: str = Field(default="INFO", description="Root log level")

    # PTV API configuration
    ptv_dev_id: str = Field(default="", description="Developer id issued by PTV")
    ptv_api_key: SecretStr = Field(
        default=SecretStr(""), description="Signing key issued by PTV"
    )
    ptv_base_url: str = Field(default=PTV_BASE_URL, description="PTV Timetable API base URL")
    ptv_api_timeout: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS, description="Timeout for PTV API requests in seconds"
    )
    max_results: int = Field(
        default=15,
        description="Default number of departures requested from PTV per stop",
    )

    # Display configuration
    timezone: str = Field(
        default="Australia/Melbourne",
        description="Timezone for departure labels (IANA timezone name)",
    )
    max_display_departures: int = Field(
        default=12, description="Maximum number of departures shown per stop"
    )

    # TOML config file path with [[stops]] entries; built-in stops are used if unset
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file for the stops on the board",
    )

    @classmethod
    def for_testing(cls, **overrides: Any) -> "AppConfig":
        """Build a config that ignores any .env file."""
        return cls(_env_file=None, **overrides)  # type: ignore[call-arg]

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate timezone is a known IANA zone."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"timezone must be an IANA timezone name, got '{v}'") from e
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the standard logging levels."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a logging level name, got '{v}'")
        return level

    @field_validator("max_display_departures", "max_results")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate departure limits are positive."""
        if v < 1:
            raise ValueError("departure limits must be at least 1")
        return v

    def credentials(self) -> Credentials:
        """Return the PTV credentials, failing when either part is missing."""
        api_key = self.ptv_api_key.get_secret_value()
        if not self.ptv_dev_id or not api_key:
            raise ValueError("PTV_DEV_ID and PTV_API_KEY must both be set")
        return Credentials(dev_id=self.ptv_dev_id, signing_key=api_key)

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse the TOML file."""
        if not self.config_file:
            raise ValueError("config_file must be set to load stops configuration")

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            try:
                return tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid TOML in {config_path}: {e}") from e

    def get_stops_config(self) -> list[dict[str, Any]]:
        """Return the stops to show as a list of dicts.

        Reads the [[stops]] array of the TOML file when config_file is set,
        otherwise returns the built-in stops.
        """
        if not self.config_file:
            return [dict(stop) for stop in DEFAULT_STOPS]

        toml_data = self._load_toml_data()
        stops = toml_data.get("stops", [])
        if not isinstance(stops, list):
            raise ValueError("TOML config 'stops' must be a list")
        return stops
