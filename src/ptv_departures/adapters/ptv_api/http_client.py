"""HTTP client for signed PTV Timetable API requests."""

import json
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import aiohttp

from ptv_departures.adapters.api_request_logger import log_api_request
from ptv_departures.adapters.ptv_api.constants import DEFAULT_HEADERS, DEFAULT_TIMEOUT_SECONDS
from ptv_departures.adapters.ptv_api.request_signer import SignedRequestBuilder
from ptv_departures.domain.errors import MalformedResponseError, UpstreamError

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession


class PtvHttpClient:
    """Issues signed GET requests against the PTV API and decodes the JSON body."""

    def __init__(
        self,
        session: "ClientSession | None",
        signer: SignedRequestBuilder,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        """Initialize with an aiohttp session and a request signer.

        Args:
            session: Shared aiohttp ClientSession for HTTP requests.
            signer: Builds the signed URL for every request.
            timeout_seconds: Total timeout for one request, connect included.
        """
        self._session = session
        self._signer = signer
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def get_json(
        self, path: str, query_params: Mapping[str, str] | None = None
    ) -> dict[str, Any]:
        """Fetch a signed API path and return the decoded JSON object.

        Raises:
            UpstreamError: Non-2xx status, transport failure or timeout.
            MalformedResponseError: The body is not a JSON object.
        """
        if not self._session:
            raise RuntimeError("PTV API requires an aiohttp session")

        url = self._signer.build_url(path, query_params)
        log_api_request("GET", url, headers=DEFAULT_HEADERS)

        try:
            async with self._session.get(
                url, headers=DEFAULT_HEADERS, timeout=self._timeout
            ) as response:
                return await self._handle_response(response, path)
        except TimeoutError as e:
            raise UpstreamError(None, f"request to {path} timed out") from e
        except aiohttp.ClientError as e:
            raise UpstreamError(None, f"request to {path} failed: {e}") from e

    async def _handle_response(self, response: "ClientResponse", path: str) -> dict[str, Any]:
        """Check the status and decode the body of a response."""
        if not 200 <= response.status < 300:
            body = await response.text()
            reason = self._error_reason(response.reason, body)
            logger.debug(f"PTV API returned status {response.status} for {path}: {body[:200]}")
            raise UpstreamError(response.status, reason)

        try:
            data = await response.json(content_type=None)
        except ValueError as e:
            raise MalformedResponseError(f"body of {path} is not valid JSON") from e

        if not isinstance(data, dict):
            raise MalformedResponseError(f"body of {path} is not a JSON object")
        return data

    @staticmethod
    def _error_reason(status_text: str | None, body: str) -> str:
        """Combine the HTTP reason phrase with the provider's error message, if any."""
        reason = status_text or "Unknown error"
        try:
            payload = json.loads(body) if body else None
        except ValueError:
            return reason

        if isinstance(payload, dict) and payload.get("message"):
            return f"{reason}: {payload['message']}"
        return reason
