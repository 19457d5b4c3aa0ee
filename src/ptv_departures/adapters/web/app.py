"""Starlette application serving the departure board as JSON."""

import logging

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from ptv_departures.application.services.departure_board_service import DepartureBoardService

logger = logging.getLogger(__name__)

DEPARTURES_ROUTE = "/api/ptv/departures"


def create_app(board_service: DepartureBoardService) -> Starlette:
    """Create the web application.

    Args:
        board_service: Service that builds the board for the configured stops.
    """

    async def departures(request: Request) -> JSONResponse:  # noqa: ARG001
        board = await board_service.get_board()
        # Partial results are still useful; only a board with nothing to show is an error
        status_code = 502 if board.all_failed else 200
        return JSONResponse(board.to_dict(), status_code=status_code)

    async def health(request: Request) -> JSONResponse:  # noqa: ARG001
        return JSONResponse({"status": "ok"})

    routes = [
        Route(DEPARTURES_ROUTE, departures, methods=["GET"]),
        Route("/health", health, methods=["GET"]),
    ]
    logger.info(f"Serving departure board for {len(board_service.stop_configs)} stop(s)")
    return Starlette(routes=routes)
