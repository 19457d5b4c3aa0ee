"""Web adapter."""

from ptv_departures.adapters.web.app import DEPARTURES_ROUTE, create_app

__all__ = ["DEPARTURES_ROUTE", "create_app"]
