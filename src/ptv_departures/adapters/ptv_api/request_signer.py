"""Signed request URLs for the PTV Timetable API.

PTV authenticates a request by an HMAC-SHA1 of ``path?query`` (including
``devid``) under the developer's key, sent as a trailing ``signature``
parameter. The query string is serialized exactly once and the same string
is both signed and sent.
"""

import hashlib
import hmac
from collections.abc import Mapping
from urllib.parse import urlencode

from ptv_departures.adapters.ptv_api.constants import DEVID_PARAM, PTV_BASE_URL, SIGNATURE_PARAM
from ptv_departures.domain.models.credentials import Credentials


class SignedRequestBuilder:
    """Builds fully qualified, signed PTV API URLs."""

    def __init__(self, credentials: Credentials, base_url: str = PTV_BASE_URL) -> None:
        """Initialize with credentials and the API base URL.

        Args:
            credentials: Developer id and signing key.
            base_url: Scheme and host of the API, without a trailing slash.
        """
        self._credentials = credentials
        self._base_url = base_url.rstrip("/")

    @property
    def dev_id(self) -> str:
        """Developer id sent with every request."""
        return self._credentials.dev_id

    def sign(self, message: str) -> str:
        """Return the upper-case hex HMAC-SHA1 of message."""
        digest = hmac.new(
            self._credentials.signing_key.encode("utf-8"),
            message.encode("utf-8"),
            hashlib.sha1,
        )
        return digest.hexdigest().upper()

    def build_query_string(self, query_params: Mapping[str, str] | None = None) -> str:
        """Serialize parameters in caller order with devid appended last."""
        pairs = [
            (key, value)
            for key, value in (query_params or {}).items()
            if key not in (DEVID_PARAM, SIGNATURE_PARAM)
        ]
        pairs.append((DEVID_PARAM, self._credentials.dev_id))
        return urlencode(pairs)

    def build_url(self, path: str, query_params: Mapping[str, str] | None = None) -> str:
        """Build a signed URL for an API path.

        Args:
            path: API path starting with "/", e.g. "/v3/directions/route/6".
            query_params: Query parameters in the order they should be sent.

        Returns:
            base URL + path + "?" + query string + "&signature=" + signature.
        """
        query_string = self.build_query_string(query_params)
        signature = self.sign(f"{path}?{query_string}")
        return f"{self._base_url}{path}?{query_string}&{SIGNATURE_PARAM}={signature}"
