"""Departure aggregation service."""

import logging
from collections.abc import Callable, Iterable
from datetime import UTC, datetime
from zoneinfo import ZoneInfo

from ptv_departures.domain.models.departure_query import DepartureOptions, DepartureQuery
from ptv_departures.domain.models.normalized_departure import NormalizedDeparture
from ptv_departures.domain.models.raw_departure import RawDeparture
from ptv_departures.domain.ports.departure_repository import DepartureRepository
from ptv_departures.domain.ports.transit_api_client import TransitApiClient

logger = logging.getLogger(__name__)

DEFAULT_TIMEZONE = "Australia/Melbourne"
DEFAULT_DISPLAY_LIMIT = 12


def _utc_now() -> datetime:
    return datetime.now(UTC)


def format_time_label(local_time: datetime) -> str:
    """Format a local time as a 12-hour clock label, e.g. "5:42 pm"."""
    hour = local_time.hour % 12 or 12
    suffix = "am" if local_time.hour < 12 else "pm"
    return f"{hour}:{local_time.minute:02d} {suffix}"


class DepartureAggregator(DepartureRepository):
    """Fetches departures for one stop and turns them into display-ready records.

    Each call issues exactly one request to the transit API. The aggregator
    holds no per-request state, so one instance can serve concurrent calls
    for different stops.
    """

    def __init__(
        self,
        api_client: TransitApiClient,
        timezone: str = DEFAULT_TIMEZONE,
        display_limit: int = DEFAULT_DISPLAY_LIMIT,
        now_provider: Callable[[], datetime] = _utc_now,
    ) -> None:
        """Initialize the aggregator.

        Args:
            api_client: Transit API client used for the departures request.
            timezone: IANA zone used for the time and weekday labels.
            display_limit: Maximum number of departures returned per call.
            now_provider: Returns the current instant as an aware datetime.
        """
        if display_limit < 1:
            raise ValueError("display_limit must be at least 1")
        self._api_client = api_client
        self._timezone = ZoneInfo(timezone)
        self._display_limit = display_limit
        self._now_provider = now_provider

    async def get_departures(
        self,
        route_type: int,
        stop_id: int,
        options: DepartureOptions | None = None,
    ) -> list[NormalizedDeparture]:
        """Get upcoming departures for a stop, soonest first.

        Args:
            route_type: Transport mode of the stop (train, tram, ...).
            stop_id: Provider stop id.
            options: Provider-side cap, direction filter and other request options.

        Returns:
            At most display_limit future departures; empty when none qualify.

        Raises:
            UpstreamError: The provider call failed.
            MalformedResponseError: The provider response is missing fields.
        """
        options = options or DepartureOptions()
        query = DepartureQuery(route_type=route_type, stop_id=stop_id, options=options)

        response = await self._api_client.get_departures(query)
        now = self._now_provider()

        departures = self.normalize(response.departures, options.direction_id, now)
        logger.debug(
            f"{len(departures)} of {len(response.departures)} departures kept for "
            f"route type {route_type} stop {stop_id}"
        )
        return departures

    def normalize(
        self,
        departures: Iterable[RawDeparture],
        direction_id: int | None,
        now: datetime,
    ) -> list[NormalizedDeparture]:
        """Filter, order, label and truncate raw departures against a fixed now."""
        upcoming: list[tuple[int, datetime]] = []

        for departure in departures:
            if direction_id is not None and departure.direction_id != direction_id:
                continue

            scheduled = departure.scheduled_departure_utc
            minutes_until = round((scheduled - now).total_seconds() / 60)
            if minutes_until < 0:
                continue

            upcoming.append((minutes_until, scheduled))

        upcoming.sort()

        return [
            self._to_normalized(scheduled, minutes_until)
            for minutes_until, scheduled in upcoming[: self._display_limit]
        ]

    def _to_normalized(self, scheduled: datetime, minutes_until: int) -> NormalizedDeparture:
        local_time = scheduled.astimezone(self._timezone)
        return NormalizedDeparture(
            scheduled_time_label=format_time_label(local_time),
            day_of_week_label=local_time.strftime("%a"),
            minutes_until=minutes_until,
        )
