"""Departure board service."""

import asyncio
import logging

from ptv_departures.domain.errors import PtvApiError
from ptv_departures.domain.models.departure_board import BoardSection, DepartureBoard
from ptv_departures.domain.models.error_details import ErrorDetails
from ptv_departures.domain.models.normalized_departure import NormalizedDeparture
from ptv_departures.domain.models.stop_configuration import StopConfiguration
from ptv_departures.domain.ports.departure_repository import DepartureRepository

logger = logging.getLogger(__name__)


class DepartureBoardService:
    """Builds the departure board for all configured stops.

    Stops are fetched concurrently and awaited one by one, so a failing stop
    only empties its own section.
    """

    def __init__(
        self,
        departure_repository: DepartureRepository,
        stop_configs: list[StopConfiguration],
    ) -> None:
        """Initialize with a departure repository and the stops to show."""
        self._departure_repository = departure_repository
        self._stop_configs = list(stop_configs)

    @property
    def stop_configs(self) -> list[StopConfiguration]:
        """Configured stops, in display order."""
        return list(self._stop_configs)

    async def get_board(self) -> DepartureBoard:
        """Fetch every configured stop and collect the results."""
        tasks = [
            (stop_config, asyncio.create_task(self._fetch(stop_config)))
            for stop_config in self._stop_configs
        ]

        sections = []
        try:
            for stop_config, task in tasks:
                sections.append(await self._collect(stop_config, task))
        finally:
            for _, task in tasks:
                if not task.done():
                    task.cancel()
                elif not task.cancelled():
                    # Retrieve results of tasks left unawaited after an earlier failure
                    task.exception()

        return DepartureBoard(sections=sections)

    async def _fetch(self, stop_config: StopConfiguration) -> list[NormalizedDeparture]:
        return await self._departure_repository.get_departures(
            stop_config.route_type,
            stop_config.stop_id,
            stop_config.options(),
        )

    async def _collect(
        self,
        stop_config: StopConfiguration,
        task: "asyncio.Task[list[NormalizedDeparture]]",
    ) -> BoardSection:
        """Await one stop's task, turning provider errors into an errored section."""
        try:
            departures = await task
        except PtvApiError as e:
            logger.error(f"Failed to fetch departures for {stop_config.title}: {e}")
            return BoardSection(
                key=stop_config.key,
                title=stop_config.title,
                error=ErrorDetails.from_exception(e),
            )

        return BoardSection(key=stop_config.key, title=stop_config.title, departures=departures)
