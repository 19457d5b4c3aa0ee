"""Parser for PTV Timetable API v3 responses."""

from datetime import UTC, datetime
from typing import Any

from ptv_departures.domain.errors import MalformedResponseError
from ptv_departures.domain.models.api_responses import (
    ApiStatus,
    DeparturesResponse,
    DirectionsForRouteResponse,
    SearchResult,
)
from ptv_departures.domain.models.network import Direction, Route, Stop
from ptv_departures.domain.models.raw_departure import RawDeparture

REQUIRED_DEPARTURE_FIELDS = (
    "stop_id",
    "route_id",
    "run_id",
    "direction_id",
    "scheduled_departure_utc",
)


class PtvResponseParser:
    """Converts decoded PTV JSON into domain models.

    Parsing is strict: a record missing a field we depend on fails the whole
    response with MalformedResponseError instead of being patched up.
    """

    @staticmethod
    def parse_departures_response(data: dict[str, Any]) -> DeparturesResponse:
        """Parse a /v3/departures response."""
        departures_data = PtvResponseParser._require_list(data, "departures")
        departures = [PtvResponseParser.parse_departure(dep) for dep in departures_data]

        return DeparturesResponse(
            departures=departures,
            stops={
                str(key): PtvResponseParser._parse_stop(value)
                for key, value in PtvResponseParser._optional_dict(data, "stops").items()
            },
            routes={
                str(key): PtvResponseParser._parse_route(value)
                for key, value in PtvResponseParser._optional_dict(data, "routes").items()
            },
            directions={
                str(key): PtvResponseParser._parse_direction(value)
                for key, value in PtvResponseParser._optional_dict(data, "directions").items()
            },
            status=PtvResponseParser._parse_status(data.get("status")),
        )

    @staticmethod
    def parse_search_result(data: dict[str, Any]) -> SearchResult:
        """Parse a /v3/search response."""
        stops = data.get("stops") or []
        routes = data.get("routes") or []
        if not isinstance(stops, list) or not isinstance(routes, list):
            raise MalformedResponseError("search result 'stops' and 'routes' must be lists")

        return SearchResult(
            stops=[PtvResponseParser._parse_stop(stop) for stop in stops],
            routes=[PtvResponseParser._parse_route(route) for route in routes],
            status=PtvResponseParser._parse_status(data.get("status")),
        )

    @staticmethod
    def parse_directions_response(data: dict[str, Any]) -> DirectionsForRouteResponse:
        """Parse a /v3/directions/route response."""
        directions = PtvResponseParser._require_list(data, "directions")
        return DirectionsForRouteResponse(
            directions=[PtvResponseParser._parse_direction(d) for d in directions],
            status=PtvResponseParser._parse_status(data.get("status")),
        )

    @staticmethod
    def parse_departure(dep: Any) -> RawDeparture:
        """Parse a single departure record."""
        if not isinstance(dep, dict):
            raise MalformedResponseError(f"departure must be an object, got {type(dep).__name__}")

        missing = [name for name in REQUIRED_DEPARTURE_FIELDS if dep.get(name) is None]
        if missing:
            raise MalformedResponseError(f"departure is missing {', '.join(missing)}")

        platform_number = dep.get("platform_number")

        return RawDeparture(
            stop_id=PtvResponseParser._int_field(dep, "stop_id"),
            route_id=PtvResponseParser._int_field(dep, "route_id"),
            run_id=PtvResponseParser._int_field(dep, "run_id"),
            direction_id=PtvResponseParser._int_field(dep, "direction_id"),
            scheduled_departure_utc=PtvResponseParser.parse_time(dep["scheduled_departure_utc"]),
            estimated_departure_utc=(
                PtvResponseParser.parse_time(dep["estimated_departure_utc"])
                if dep.get("estimated_departure_utc")
                else None
            ),
            at_platform=bool(dep.get("at_platform", False)),
            platform_number=str(platform_number) if platform_number is not None else None,
        )

    @staticmethod
    def parse_time(value: Any) -> datetime:
        """Parse an ISO 8601 UTC timestamp such as "2024-05-06T07:42:00Z"."""
        if not isinstance(value, str) or not value:
            raise MalformedResponseError(f"invalid timestamp: {value!r}")

        try:
            parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError as e:
            raise MalformedResponseError(f"invalid timestamp: {value!r}") from e

        # PTV timestamps are UTC even when the offset is omitted
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=UTC)
        return parsed.astimezone(UTC)

    @staticmethod
    def _int_field(record: dict[str, Any], name: str) -> int:
        value = record.get(name)
        if isinstance(value, bool):
            raise MalformedResponseError(f"'{name}' must be an integer, got {value!r}")
        try:
            return int(value)  # type: ignore[arg-type]
        except (TypeError, ValueError) as e:
            raise MalformedResponseError(f"'{name}' must be an integer, got {value!r}") from e

    @staticmethod
    def _require_list(data: dict[str, Any], name: str) -> list[Any]:
        value = data.get(name)
        if not isinstance(value, list):
            raise MalformedResponseError(f"response is missing '{name}' list")
        return value

    @staticmethod
    def _optional_dict(data: dict[str, Any], name: str) -> dict[str, Any]:
        value = data.get(name)
        if value is None:
            return {}
        if not isinstance(value, dict):
            raise MalformedResponseError(f"'{name}' must be an object")
        return value

    @staticmethod
    def _require_object(value: Any, kind: str) -> dict[str, Any]:
        if not isinstance(value, dict):
            raise MalformedResponseError(f"{kind} must be an object")
        return value

    @staticmethod
    def _parse_stop(value: Any) -> Stop:
        stop = PtvResponseParser._require_object(value, "stop")
        return Stop(
            stop_id=PtvResponseParser._int_field(stop, "stop_id"),
            stop_name=str(stop.get("stop_name") or ""),
            stop_suburb=str(stop.get("stop_suburb") or ""),
            route_type=PtvResponseParser._int_field(stop, "route_type"),
        )

    @staticmethod
    def _parse_route(value: Any) -> Route:
        route = PtvResponseParser._require_object(value, "route")
        return Route(
            route_id=PtvResponseParser._int_field(route, "route_id"),
            route_name=str(route.get("route_name") or ""),
            route_number=str(route.get("route_number") or ""),
            route_type=PtvResponseParser._int_field(route, "route_type"),
        )

    @staticmethod
    def _parse_direction(value: Any) -> Direction:
        direction = PtvResponseParser._require_object(value, "direction")
        return Direction(
            direction_id=PtvResponseParser._int_field(direction, "direction_id"),
            direction_name=str(direction.get("direction_name") or ""),
            route_id=PtvResponseParser._int_field(direction, "route_id"),
        )

    @staticmethod
    def _parse_status(value: Any) -> ApiStatus:
        if not isinstance(value, dict):
            return ApiStatus()
        try:
            health = int(value.get("health") or 0)
        except (TypeError, ValueError) as e:
            raise MalformedResponseError(f"invalid status health: {value.get('health')!r}") from e
        return ApiStatus(version=str(value.get("version") or ""), health=health)
