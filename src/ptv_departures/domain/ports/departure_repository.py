"""Departure repository port."""

from typing import Protocol

from ptv_departures.domain.models.departure_query import DepartureOptions
from ptv_departures.domain.models.normalized_departure import NormalizedDeparture


class DepartureRepository(Protocol):
    """Port for retrieving display-ready departures for one stop."""

    async def get_departures(
        self,
        route_type: int,
        stop_id: int,
        options: DepartureOptions | None = None,
    ) -> list[NormalizedDeparture]:
        """Get upcoming departures for a stop, soonest first."""
        ...
