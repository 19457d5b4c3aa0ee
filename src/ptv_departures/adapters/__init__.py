"""Adapters layer - external system integrations."""

from ptv_departures.adapters.config import AppConfig, StopConfigurationLoader
from ptv_departures.adapters.ptv_api import (
    PtvApiClient,
    PtvHttpClient,
    SignedRequestBuilder,
)

__all__ = [
    "AppConfig",
    "PtvApiClient",
    "PtvHttpClient",
    "SignedRequestBuilder",
    "StopConfigurationLoader",
]
