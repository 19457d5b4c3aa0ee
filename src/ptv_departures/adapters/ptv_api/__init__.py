"""PTV Timetable API adapter."""

from ptv_departures.adapters.ptv_api.http_client import PtvHttpClient
from ptv_departures.adapters.ptv_api.ptv_api_client import PtvApiClient
from ptv_departures.adapters.ptv_api.request_signer import SignedRequestBuilder
from ptv_departures.adapters.ptv_api.response_parser import PtvResponseParser

__all__ = [
    "PtvApiClient",
    "PtvHttpClient",
    "PtvResponseParser",
    "SignedRequestBuilder",
]
