"""Stop configuration loader."""

import logging
from typing import Any

from ptv_departures.adapters.config.app_config import AppConfig
from ptv_departures.domain.models.stop_configuration import StopConfiguration

logger = logging.getLogger(__name__)


def _optional_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (ValueError, TypeError):
        return None


def _require_int(stop_key: str, field: str, value: Any) -> int:
    """Convert a supplied value to int, rejecting anything that is not one."""
    number = _optional_int(value)
    if number is None:
        raise ValueError(f"Stop '{stop_key}': {field} must be an integer, got {value!r}")
    return number


class StopConfigurationLoader:
    """Loads stop configurations from app config."""

    @staticmethod
    def load(config: AppConfig) -> list[StopConfiguration]:
        """Load stop configurations from app config.

        Entries without an integer route_type or stop_id are skipped. Optional
        fields are only unset when omitted; a supplied but invalid value is an
        error.

        Raises:
            ValueError: Two stops share the same key, or a stop has an invalid
                direction_id, max_results or platform_numbers.
        """
        stop_configs: list[StopConfiguration] = []

        for stop_data in config.get_stops_config():
            if not isinstance(stop_data, dict):
                continue

            route_type = _optional_int(stop_data.get("route_type"))
            stop_id = _optional_int(stop_data.get("stop_id"))
            if route_type is None or stop_id is None:
                logger.warning(f"Skipping stop without integer route_type/stop_id: {stop_data}")
                continue

            key = str(stop_data.get("key") or f"{route_type}-{stop_id}")
            title = stop_data.get("title") or key
            if not isinstance(title, str):
                title = key

            direction_id = None
            if "direction_id" in stop_data:
                direction_id = _require_int(key, "direction_id", stop_data["direction_id"])

            max_results = _require_int(
                key, "max_results", stop_data.get("max_results", config.max_results)
            )

            platform_numbers = None
            if "platform_numbers" in stop_data:
                raw_platforms = stop_data["platform_numbers"]
                if not isinstance(raw_platforms, list):
                    raise ValueError(
                        f"Stop '{key}': platform_numbers must be a list, got {raw_platforms!r}"
                    )
                platform_numbers = (
                    tuple(_require_int(key, "platform_numbers", p) for p in raw_platforms)
                    or None
                )

            # Validate expand is a list of strings
            expand = stop_data.get("expand")
            if isinstance(expand, list):
                expand = tuple(str(item) for item in expand if isinstance(item, str)) or None
            else:
                expand = None

            stop_configs.append(
                StopConfiguration(
                    key=key,
                    title=title,
                    route_type=route_type,
                    stop_id=stop_id,
                    direction_id=direction_id,
                    max_results=max_results,
                    platform_numbers=platform_numbers,
                    expand=expand,
                )
            )

        keys = [stop_config.key for stop_config in stop_configs]
        if len(keys) != len(set(keys)):
            duplicates = {k for k in keys if keys.count(k) > 1}
            raise ValueError(f"Stop keys must be unique. Duplicate keys found: {duplicates}")

        return stop_configs
