"""Domain layer - core models, errors and ports."""

from ptv_departures.domain.errors import MalformedResponseError, PtvApiError, UpstreamError
from ptv_departures.domain.models import (
    Credentials,
    DepartureOptions,
    DepartureQuery,
    NormalizedDeparture,
    RawDeparture,
    RouteType,
    StopConfiguration,
)
from ptv_departures.domain.ports import DepartureRepository, TransitApiClient

__all__ = [
    "Credentials",
    "DepartureOptions",
    "DepartureQuery",
    "DepartureRepository",
    "MalformedResponseError",
    "NormalizedDeparture",
    "PtvApiError",
    "RawDeparture",
    "RouteType",
    "StopConfiguration",
    "TransitApiClient",
    "UpstreamError",
]
