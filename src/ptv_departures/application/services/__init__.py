"""Application services."""

from ptv_departures.application.services.departure_aggregator import DepartureAggregator
from ptv_departures.application.services.departure_board_service import DepartureBoardService

__all__ = ["DepartureAggregator", "DepartureBoardService"]
