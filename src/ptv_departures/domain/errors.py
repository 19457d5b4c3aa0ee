"""Errors raised while talking to the PTV Timetable API."""


class PtvApiError(RuntimeError):
    """Base class for failures of a single PTV API call."""


class UpstreamError(PtvApiError):
    """The provider answered with a non-2xx status, or could not be reached."""

    def __init__(self, status_code: int | None, reason: str) -> None:
        self.status_code = status_code
        self.reason = reason
        if status_code is None:
            super().__init__(f"PTV API error: {reason}")
        else:
            super().__init__(f"PTV API error: {status_code} {reason}")


class MalformedResponseError(PtvApiError):
    """The provider answered, but the body is missing fields we rely on."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Malformed PTV API response: {reason}")
