"""Raw departure domain model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class RawDeparture:
    """A departure exactly as reported by the provider, with parsed timestamps."""

    stop_id: int
    route_id: int
    run_id: int
    direction_id: int
    scheduled_departure_utc: datetime
    estimated_departure_utc: datetime | None = None
    at_platform: bool = False
    platform_number: str | None = None
