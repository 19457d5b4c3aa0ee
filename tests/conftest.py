"""Shared fixtures for PTV departures tests."""

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import pytest

from ptv_departures.domain.models import (
    Credentials,
    DepartureQuery,
    DeparturesResponse,
    DirectionsForRouteResponse,
    RawDeparture,
    SearchResult,
)

# Monday 2024-05-06, 5:30 pm in Melbourne (AEST, UTC+10)
FIXED_NOW = datetime(2024, 5, 6, 7, 30, tzinfo=UTC)


@pytest.fixture
def fixed_now() -> datetime:
    """A fixed "now" for deterministic time calculations."""
    return FIXED_NOW


@pytest.fixture
def credentials() -> Credentials:
    """Credentials used by the documented signing example."""
    return Credentials(dev_id="abc", signing_key="secret")


@pytest.fixture
def make_departure() -> Callable[..., RawDeparture]:
    """Factory for raw departures scheduled relative to FIXED_NOW."""

    def _make(minutes: float, direction_id: int = 1, run_id: int = 1) -> RawDeparture:
        return RawDeparture(
            stop_id=1103,
            route_id=6,
            run_id=run_id,
            direction_id=direction_id,
            scheduled_departure_utc=FIXED_NOW + timedelta(minutes=minutes),
        )

    return _make


class FakeTransitApiClient:
    """Transit API client returning a canned departures response."""

    def __init__(
        self,
        departures: list[RawDeparture] | None = None,
        error: Exception | None = None,
    ) -> None:
        """Initialize with departures to return or an error to raise."""
        self.departures = departures or []
        self.error = error
        self.queries: list[DepartureQuery] = []

    async def get_departures(self, query: DepartureQuery) -> DeparturesResponse:
        """Record the query and return the canned departures."""
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return DeparturesResponse(departures=list(self.departures))

    async def search_stops(
        self,
        term: str,  # noqa: ARG002
        route_types: list[int] | None = None,  # noqa: ARG002
    ) -> SearchResult:
        """Return an empty search result."""
        return SearchResult()

    async def get_directions_for_route(
        self,
        route_id: int,  # noqa: ARG002
    ) -> DirectionsForRouteResponse:
        """Return no directions."""
        return DirectionsForRouteResponse()


@pytest.fixture
def fake_api_client_factory() -> Callable[..., FakeTransitApiClient]:
    """Factory for fake transit API clients."""
    return FakeTransitApiClient
