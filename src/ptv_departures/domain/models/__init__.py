"""Domain models for PTV departures."""

from ptv_departures.domain.models.api_responses import (
    ApiStatus,
    DeparturesResponse,
    DirectionsForRouteResponse,
    SearchResult,
)
from ptv_departures.domain.models.credentials import Credentials
from ptv_departures.domain.models.departure_board import BoardSection, DepartureBoard
from ptv_departures.domain.models.departure_query import DepartureOptions, DepartureQuery
from ptv_departures.domain.models.error_details import ErrorDetails
from ptv_departures.domain.models.network import Direction, Route, Stop
from ptv_departures.domain.models.normalized_departure import NormalizedDeparture
from ptv_departures.domain.models.raw_departure import RawDeparture
from ptv_departures.domain.models.route_type import RouteType
from ptv_departures.domain.models.stop_configuration import StopConfiguration

__all__ = [
    "ApiStatus",
    "BoardSection",
    "Credentials",
    "DepartureBoard",
    "DepartureOptions",
    "DepartureQuery",
    "DeparturesResponse",
    "Direction",
    "DirectionsForRouteResponse",
    "ErrorDetails",
    "NormalizedDeparture",
    "RawDeparture",
    "Route",
    "RouteType",
    "SearchResult",
    "Stop",
    "StopConfiguration",
]
