"""Error details domain model."""

from pydantic import BaseModel, ConfigDict


class ErrorDetails(BaseModel):
    """Details about an error, including HTTP status code if applicable."""

    model_config = ConfigDict(frozen=True)

    status_code: int | None = None
    reason: str

    @classmethod
    def from_exception(cls, error: Exception) -> "ErrorDetails":
        """Build error details from a raised exception."""
        status_code = getattr(error, "status_code", None)
        reason = getattr(error, "reason", None) or str(error)
        return cls(status_code=status_code, reason=str(reason))
