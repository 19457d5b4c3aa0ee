"""Ports (interfaces) for the ports-and-adapters architecture."""

from ptv_departures.domain.ports.departure_repository import DepartureRepository
from ptv_departures.domain.ports.transit_api_client import TransitApiClient

__all__ = [
    "DepartureRepository",
    "TransitApiClient",
]
