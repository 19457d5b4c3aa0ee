"""Departure query domain models."""

from dataclasses import dataclass, field

DEPARTURES_PATH = "/v3/departures/route_type/{route_type}/stop/{stop_id}"


@dataclass(frozen=True)
class DepartureOptions:
    """Optional parameters of a departures request. None means not supplied."""

    max_results: int | None = None
    direction_id: int | None = None
    platform_numbers: tuple[int, ...] | None = None
    expand: tuple[str, ...] | None = None


@dataclass(frozen=True)
class DepartureQuery:
    """A single departures request for one stop and route type."""

    route_type: int
    stop_id: int
    options: DepartureOptions = field(default_factory=DepartureOptions)

    @property
    def path(self) -> str:
        """API path for this query."""
        return DEPARTURES_PATH.format(route_type=int(self.route_type), stop_id=self.stop_id)

    def query_params(self) -> dict[str, str]:
        """Build query parameters, including only the options that were supplied.

        Keys are inserted in a fixed order so the signed and the sent query
        strings are built from the same sequence.
        """
        options = self.options
        params: dict[str, str] = {}

        # A zero provider cap is treated as "not supplied"
        if options.max_results:
            params["max_results"] = str(options.max_results)

        if options.direction_id is not None:
            params["direction_id"] = str(options.direction_id)

        if options.platform_numbers:
            params["platform_numbers"] = ",".join(str(p) for p in options.platform_numbers)

        if options.expand:
            params["expand"] = ",".join(options.expand)

        return params
