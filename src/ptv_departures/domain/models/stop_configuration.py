"""Stop configuration domain model."""

from dataclasses import dataclass

from ptv_departures.domain.models.departure_query import DepartureOptions


@dataclass(frozen=True)
class StopConfiguration:
    """One section of the departure board: a stop, a mode and a direction."""

    key: str
    title: str
    route_type: int
    stop_id: int
    direction_id: int | None = None
    max_results: int | None = None
    platform_numbers: tuple[int, ...] | None = None
    expand: tuple[str, ...] | None = None

    def options(self) -> DepartureOptions:
        """Departure options for this stop."""
        return DepartureOptions(
            max_results=self.max_results,
            direction_id=self.direction_id,
            platform_numbers=self.platform_numbers,
            expand=self.expand,
        )
