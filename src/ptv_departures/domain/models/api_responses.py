"""Models for decoded PTV API responses."""

from dataclasses import dataclass, field

from ptv_departures.domain.models.network import Direction, Route, Stop
from ptv_departures.domain.models.raw_departure import RawDeparture


@dataclass(frozen=True)
class ApiStatus:
    """Status block attached to every PTV response."""

    version: str = ""
    health: int = 0


@dataclass(frozen=True)
class DeparturesResponse:
    """Departures for a stop plus the ancillary dictionaries keyed by id."""

    departures: list[RawDeparture]
    stops: dict[str, Stop] = field(default_factory=dict)
    routes: dict[str, Route] = field(default_factory=dict)
    directions: dict[str, Direction] = field(default_factory=dict)
    status: ApiStatus = field(default_factory=ApiStatus)


@dataclass(frozen=True)
class SearchResult:
    """Stops and routes matching a search term."""

    stops: list[Stop] = field(default_factory=list)
    routes: list[Route] = field(default_factory=list)
    status: ApiStatus = field(default_factory=ApiStatus)


@dataclass(frozen=True)
class DirectionsForRouteResponse:
    """Directions available on a route."""

    directions: list[Direction] = field(default_factory=list)
    status: ApiStatus = field(default_factory=ApiStatus)
