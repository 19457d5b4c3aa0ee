"""Stop, route and direction domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Stop:
    """A PTV stop."""

    stop_id: int
    stop_name: str
    stop_suburb: str
    route_type: int


@dataclass(frozen=True)
class Route:
    """A PTV route (train line, tram route, bus route)."""

    route_id: int
    route_name: str
    route_number: str
    route_type: int


@dataclass(frozen=True)
class Direction:
    """A direction of travel on a route."""

    direction_id: int
    direction_name: str
    route_id: int
