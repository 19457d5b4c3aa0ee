"""Tests for domain models."""

import pytest

from ptv_departures.domain.errors import MalformedResponseError, UpstreamError
from ptv_departures.domain.models import (
    BoardSection,
    Credentials,
    DepartureBoard,
    DepartureOptions,
    DepartureQuery,
    ErrorDetails,
    NormalizedDeparture,
    RouteType,
    StopConfiguration,
)


def test_credentials_repr_hides_signing_key() -> None:
    """Given credentials, when rendering repr, then the signing key is not shown."""
    credentials = Credentials(dev_id="3001234", signing_key="super-secret")

    assert "super-secret" not in repr(credentials)
    assert "3001234" in repr(credentials)


def test_credentials_are_frozen() -> None:
    """Given credentials, when trying to modify, then raises AttributeError."""
    credentials = Credentials(dev_id="abc", signing_key="secret")

    with pytest.raises(AttributeError):
        credentials.dev_id = "other"  # type: ignore[misc]


def test_departure_query_path_accepts_route_type_enum() -> None:
    """Given a RouteType member, when building the path, then its integer value is used."""
    query = DepartureQuery(route_type=RouteType.TRAM, stop_id=2258)

    assert query.path == "/v3/departures/route_type/1/stop/2258"


def test_departure_query_params_include_only_supplied_options() -> None:
    """Given only a direction, when building params, then only direction_id is present."""
    query = DepartureQuery(route_type=0, stop_id=1103, options=DepartureOptions(direction_id=0))

    assert query.query_params() == {"direction_id": "0"}


def test_departure_query_zero_max_results_is_not_sent() -> None:
    """Given max_results 0, when building params, then it is treated as not supplied."""
    query = DepartureQuery(route_type=0, stop_id=1103, options=DepartureOptions(max_results=0))

    assert query.query_params() == {}


def test_departure_query_empty_lists_are_not_sent() -> None:
    """Given empty platform and expand lists, when building params, then neither is sent."""
    options = DepartureOptions(platform_numbers=(), expand=())
    query = DepartureQuery(route_type=0, stop_id=1103, options=options)

    assert query.query_params() == {}


def test_normalized_departure_display_dict_hides_minutes() -> None:
    """Given a normalized departure, when converting for display, then only labels are exposed."""
    departure = NormalizedDeparture(
        scheduled_time_label="5:42 pm", day_of_week_label="Mon", minutes_until=12
    )

    assert departure.to_display_dict() == {"scheduledTime": "5:42 pm", "dayOfWeek": "Mon"}


def test_stop_configuration_options() -> None:
    """Given a stop configuration, when building options, then all fields are carried over."""
    stop_config = StopConfiguration(
        key="trains",
        title="Trains",
        route_type=0,
        stop_id=1103,
        direction_id=1,
        max_results=15,
        expand=("Stop",),
    )

    assert stop_config.options() == DepartureOptions(
        max_results=15, direction_id=1, platform_numbers=None, expand=("Stop",)
    )


def test_error_details_from_upstream_error() -> None:
    """Given an UpstreamError, when converting, then status and reason are kept."""
    details = ErrorDetails.from_exception(UpstreamError(404, "Not Found"))

    assert details == ErrorDetails(status_code=404, reason="Not Found")


def test_error_details_from_malformed_response() -> None:
    """Given a MalformedResponseError, when converting, then there is no status code."""
    details = ErrorDetails.from_exception(MalformedResponseError("missing departures"))

    assert details.status_code is None
    assert details.reason == "missing departures"


def test_empty_board_is_not_all_failed() -> None:
    """Given a board without sections, when checking, then it is not reported as failed."""
    assert DepartureBoard(sections=[]).all_failed is False


def test_board_section_lookup() -> None:
    """Given a board, when looking up keys, then matching sections or None are returned."""
    board = DepartureBoard(sections=[BoardSection(key="trains", title="Trains")])

    assert board.section("trains") is not None
    assert board.section("buses") is None
