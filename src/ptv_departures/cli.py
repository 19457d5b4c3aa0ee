"""CLI helpers for finding PTV stop, route and direction ids."""

import asyncio
import json
import sys
from dataclasses import asdict
from typing import Any

import aiohttp

from ptv_departures.adapters.config import AppConfig
from ptv_departures.domain.errors import PtvApiError
from ptv_departures.domain.models import (
    DepartureOptions,
    DirectionsForRouteResponse,
    NormalizedDeparture,
    RouteType,
    SearchResult,
)
from ptv_departures.factory import build_aggregator, build_api_client


def _route_type_name(route_type: int) -> str:
    """Readable name for a route type, falling back to the number."""
    try:
        return RouteType(route_type).name.replace("_", " ").title()
    except ValueError:
        return str(route_type)


def format_search_result(result: SearchResult) -> list[str]:
    """Format search results as printable lines."""
    lines: list[str] = []
    if result.stops:
        lines.append(f"\nFound {len(result.stops)} stop(s):\n")
        for stop in result.stops:
            lines.append(f"  {stop.stop_name} ({stop.stop_suburb})")
            lines.append(
                f"    stop_id: {stop.stop_id}  route_type: {stop.route_type} "
                f"({_route_type_name(stop.route_type)})"
            )
    if result.routes:
        lines.append(f"\nFound {len(result.routes)} route(s):\n")
        for route in result.routes:
            number = f"{route.route_number} " if route.route_number else ""
            lines.append(f"  {number}{route.route_name}")
            lines.append(f"    route_id: {route.route_id}  route_type: {route.route_type}")
    return lines


def format_directions(response: DirectionsForRouteResponse) -> list[str]:
    """Format directions as printable lines."""
    return [
        f"  direction_id: {direction.direction_id}  {direction.direction_name}"
        for direction in response.directions
    ]


def format_departures(departures: list[NormalizedDeparture]) -> list[str]:
    """Format departures as printable lines."""
    return [
        f"  {d.day_of_week_label} {d.scheduled_time_label:>8}  (in {d.minutes_until} min)"
        for d in departures
    ]


def _toml_string(value: str) -> str:
    # JSON string escapes are a subset of TOML basic string escapes
    return json.dumps(value, ensure_ascii=False)


def generate_stop_snippet(
    key: str, title: str, route_type: int, stop_id: int, direction_id: int | None
) -> str:
    """Generate a TOML [[stops]] entry for the config file."""
    lines = [
        "[[stops]]",
        f"key = {_toml_string(key)}",
        f"title = {_toml_string(title)}",
        f"route_type = {route_type}",
        f"stop_id = {stop_id}",
    ]
    if direction_id is not None:
        lines.append(f"direction_id = {direction_id}")
    return "\n".join(lines)


def _print_json(payload: Any) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False, default=str))


async def _run_command(args: Any, config: AppConfig) -> None:
    if args.command == "generate":
        print(
            generate_stop_snippet(
                args.key, args.title, args.route_type, args.stop_id, args.direction_id
            )
        )
        return

    async with aiohttp.ClientSession() as session:
        api_client = build_api_client(config, session)

        if args.command == "search":
            result = await api_client.search_stops(args.term, args.route_type or None)
            if args.json:
                _print_json(asdict(result))
                return
            lines = format_search_result(result)
            if not lines:
                print(f"No stops or routes found for '{args.term}'", file=sys.stderr)
                sys.exit(1)
            print("\n".join(lines))

        elif args.command == "directions":
            response = await api_client.get_directions_for_route(args.route_id)
            if args.json:
                _print_json(asdict(response))
                return
            print(f"\nDirections for route {args.route_id}:\n")
            print("\n".join(format_directions(response)))

        elif args.command == "departures":
            aggregator = build_aggregator(config, api_client)
            departures = await aggregator.get_departures(
                args.route_type,
                args.stop_id,
                DepartureOptions(max_results=args.max_results, direction_id=args.direction_id),
            )
            if args.json:
                _print_json([asdict(d) for d in departures])
                return
            if not departures:
                print("No upcoming departures.")
                return
            print("\n".join(format_departures(departures)))


def _build_parser() -> Any:
    import argparse

    parser = argparse.ArgumentParser(
        description="PTV Departures Configuration Helper",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Search for stops (train stations only)
  ptv-config search "Jewell" --route-type 0

  # List directions of a route
  ptv-config directions 6

  # Show upcoming departures towards the City
  ptv-config departures 0 1103 --direction-id 1

  # Generate config snippet
  ptv-config generate trains "Train - Jewell" 0 1103 --direction-id 1
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    search_parser = subparsers.add_parser("search", help="Search for stops and routes")
    search_parser.add_argument("term", help="Stop or route name to search for")
    search_parser.add_argument(
        "--route-type", type=int, action="append", help="Restrict to a route type (repeatable)"
    )
    search_parser.add_argument("--json", action="store_true", help="Output as JSON")

    directions_parser = subparsers.add_parser("directions", help="List directions of a route")
    directions_parser.add_argument("route_id", type=int, help="Route id")
    directions_parser.add_argument("--json", action="store_true", help="Output as JSON")

    departures_parser = subparsers.add_parser("departures", help="Show upcoming departures")
    departures_parser.add_argument("route_type", type=int, help="Route type (0=train, 1=tram)")
    departures_parser.add_argument("stop_id", type=int, help="Stop id")
    departures_parser.add_argument("--direction-id", type=int, help="Only this direction")
    departures_parser.add_argument("--max-results", type=int, help="Departures to request")
    departures_parser.add_argument("--json", action="store_true", help="Output as JSON")

    generate_parser = subparsers.add_parser("generate", help="Generate config snippet")
    generate_parser.add_argument("key", help="Section key, e.g. trains")
    generate_parser.add_argument("title", help="Section title")
    generate_parser.add_argument("route_type", type=int, help="Route type")
    generate_parser.add_argument("stop_id", type=int, help="Stop id")
    generate_parser.add_argument("--direction-id", type=int, help="Direction id")

    return parser


async def main() -> None:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        await _run_command(args, AppConfig())
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)
    except (PtvApiError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
