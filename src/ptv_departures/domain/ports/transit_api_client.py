"""Transit API client port."""

from typing import Protocol

from ptv_departures.domain.models.api_responses import (
    DeparturesResponse,
    DirectionsForRouteResponse,
    SearchResult,
)
from ptv_departures.domain.models.departure_query import DepartureQuery


class TransitApiClient(Protocol):
    """Port for the read-only operations of the transit provider's API."""

    async def get_departures(self, query: DepartureQuery) -> DeparturesResponse:
        """Get raw departures for a stop."""
        ...

    async def search_stops(
        self, term: str, route_types: list[int] | None = None
    ) -> SearchResult:
        """Search stops and routes by name."""
        ...

    async def get_directions_for_route(self, route_id: int) -> DirectionsForRouteResponse:
        """Get the directions of travel on a route."""
        ...
