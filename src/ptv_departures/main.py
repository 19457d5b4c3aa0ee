"""Main entry point for the PTV departures server."""

import asyncio
import logging
import sys

import aiohttp
import uvicorn

from ptv_departures.adapters.config import AppConfig, StopConfigurationLoader
from ptv_departures.adapters.web import create_app
from ptv_departures.application.services import DepartureBoardService
from ptv_departures.factory import build_aggregator, build_api_client

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)


async def main() -> None:
    """Main application entry point."""
    config = AppConfig()
    logging.getLogger().setLevel(config.log_level)

    try:
        stop_configs = StopConfigurationLoader.load(config)
    except (ValueError, FileNotFoundError) as e:
        logger.error(f"Invalid stop configuration: {e}")
        sys.exit(1)

    if not stop_configs:
        logger.error("No stops configured.")
        logger.error("Add [[stops]] entries with route_type and stop_id to your config file.")
        sys.exit(1)

    logger.info(f"Loaded {len(stop_configs)} stop(s):")
    for stop_config in stop_configs:
        logger.info(
            f"  - {stop_config.key}: route type {stop_config.route_type}, "
            f"stop {stop_config.stop_id}, direction {stop_config.direction_id}"
        )

    # Create aiohttp session for efficient HTTP connections
    async with aiohttp.ClientSession() as session:
        try:
            api_client = build_api_client(config, session)
        except ValueError as e:
            logger.error(f"Invalid PTV configuration: {e}")
            sys.exit(1)

        board_service = DepartureBoardService(build_aggregator(config, api_client), stop_configs)
        app = create_app(board_service)

        server = uvicorn.Server(
            uvicorn.Config(app, host=config.host, port=config.port, log_level="info")
        )
        await server.serve()


def run() -> None:
    """Synchronous entry point for the server command."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Shutting down...")


if __name__ == "__main__":
    run()
