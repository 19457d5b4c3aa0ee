"""Configuration adapters."""

from ptv_departures.adapters.config.app_config import AppConfig
from ptv_departures.adapters.config.stop_configuration_loader import StopConfigurationLoader

__all__ = ["AppConfig", "StopConfigurationLoader"]
