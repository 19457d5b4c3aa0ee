"""Constants for the PTV Timetable API adapter.

API Documentation: https://timetableapi.ptv.vic.gov.au/swagger/ui/index

Every request must carry the developer id (devid) and an HMAC-SHA1
signature of the path and query string.
"""

PTV_BASE_URL = "https://timetableapi.ptv.vic.gov.au"

# API paths
SEARCH_PATH = "/v3/search/{term}"  # GET /v3/search/{term}?route_types=...
DIRECTIONS_FOR_ROUTE_PATH = "/v3/directions/route/{route_id}"

# Query parameters owned by the signer
DEVID_PARAM = "devid"
SIGNATURE_PARAM = "signature"

# HTTP headers
DEFAULT_HEADERS = {
    "Accept": "application/json",
}

DEFAULT_TIMEOUT_SECONDS = 10
