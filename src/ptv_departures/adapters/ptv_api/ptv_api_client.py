"""PTV Timetable API client implementing the TransitApiClient port."""

import logging
from urllib.parse import quote

from ptv_departures.adapters.ptv_api.constants import DIRECTIONS_FOR_ROUTE_PATH, SEARCH_PATH
from ptv_departures.adapters.ptv_api.http_client import PtvHttpClient
from ptv_departures.adapters.ptv_api.response_parser import PtvResponseParser
from ptv_departures.domain.models.api_responses import (
    DeparturesResponse,
    DirectionsForRouteResponse,
    SearchResult,
)
from ptv_departures.domain.models.departure_query import DepartureQuery
from ptv_departures.domain.ports.transit_api_client import TransitApiClient

logger = logging.getLogger(__name__)


class PtvApiClient(TransitApiClient):
    """Read-only PTV operations: departures, stop search, directions for a route."""

    def __init__(self, http_client: PtvHttpClient) -> None:
        """Initialize with a signed HTTP client."""
        self._http_client = http_client

    async def get_departures(self, query: DepartureQuery) -> DeparturesResponse:
        """Get raw departures for a stop.

        Args:
            query: Route type, stop id and the optional request parameters.

        Returns:
            Parsed departures with the ancillary stop/route/direction dictionaries.
        """
        data = await self._http_client.get_json(query.path, query.query_params())
        response = PtvResponseParser.parse_departures_response(data)
        logger.debug(
            f"Fetched {len(response.departures)} departures for "
            f"route type {query.route_type} stop {query.stop_id}"
        )
        return response

    async def search_stops(
        self, term: str, route_types: list[int] | None = None
    ) -> SearchResult:
        """Search stops and routes by name.

        Args:
            term: Free-text search term.
            route_types: Restrict results to these route types.
        """
        query_params: dict[str, str] = {}
        if route_types:
            query_params["route_types"] = ",".join(str(int(rt)) for rt in route_types)

        path = SEARCH_PATH.format(term=quote(term, safe=""))
        data = await self._http_client.get_json(path, query_params)
        return PtvResponseParser.parse_search_result(data)

    async def get_directions_for_route(self, route_id: int) -> DirectionsForRouteResponse:
        """Get the directions of travel on a route."""
        path = DIRECTIONS_FOR_ROUTE_PATH.format(route_id=route_id)
        data = await self._http_client.get_json(path)
        return PtvResponseParser.parse_directions_response(data)
