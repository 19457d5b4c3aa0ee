"""Utility for logging API requests when PTV_LOG_REQUESTS is enabled."""

import json
import logging
import os
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

logger = logging.getLogger(__name__)

REDACTED = "***REDACTED***"

# Query parameters that identify or authenticate the developer account
SENSITIVE_QUERY_PARAMS = {"devid", "signature"}


def should_log_requests() -> bool:
    """Check if request logging is enabled via PTV_LOG_REQUESTS environment variable."""
    return os.getenv("PTV_LOG_REQUESTS", "").lower() == "true"


def redact_url(url: str) -> str:
    """Replace credential-bearing query parameter values, keeping parameter order."""
    parts = urlsplit(url)
    if not parts.query:
        return url
    pairs = [
        (key, REDACTED if key.lower() in SENSITIVE_QUERY_PARAMS else value)
        for key, value in parse_qsl(parts.query, keep_blank_values=True)
    ]
    return urlunsplit(parts._replace(query=urlencode(pairs, safe="*")))


def log_api_request(
    method: str,
    url: str,
    headers: dict[str, str] | None = None,
) -> None:
    """Log API request details if PTV_LOG_REQUESTS is enabled.

    Args:
        method: HTTP method (GET, POST, etc.).
        url: Full request URL; devid and signature are redacted.
        headers: Request headers (optional). PTV requests carry no credentials
            in headers, so they are logged as sent.
    """
    if not should_log_requests():
        return

    log_parts = [f"{method} {redact_url(url)}"]

    if headers:
        log_parts.append(f"Headers: {json.dumps(headers, indent=2)}")

    logger.info("API Request:\n" + "\n".join(log_parts))
