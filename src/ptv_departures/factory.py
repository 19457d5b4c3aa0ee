"""Wiring of the PTV client stack from configuration."""

from typing import TYPE_CHECKING

from ptv_departures.adapters.config import AppConfig
from ptv_departures.adapters.ptv_api import PtvApiClient, PtvHttpClient, SignedRequestBuilder
from ptv_departures.application.services import DepartureAggregator

if TYPE_CHECKING:
    from aiohttp import ClientSession


def build_api_client(config: AppConfig, session: "ClientSession") -> PtvApiClient:
    """Create a signed PTV API client.

    Raises:
        ValueError: PTV credentials are not configured.
    """
    signer = SignedRequestBuilder(config.credentials(), base_url=config.ptv_base_url)
    http_client = PtvHttpClient(session, signer, timeout_seconds=config.ptv_api_timeout)
    return PtvApiClient(http_client)


def build_aggregator(config: AppConfig, api_client: PtvApiClient) -> DepartureAggregator:
    """Create a departure aggregator using the configured zone and display cap."""
    return DepartureAggregator(
        api_client,
        timezone=config.timezone,
        display_limit=config.max_display_departures,
    )
