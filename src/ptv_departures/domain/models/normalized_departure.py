"""Normalized departure domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NormalizedDeparture:
    """A display-ready departure in the transit system's local time."""

    scheduled_time_label: str
    day_of_week_label: str
    minutes_until: int

    def to_display_dict(self) -> dict[str, str]:
        """Shape consumed by the presentation layer."""
        return {
            "scheduledTime": self.scheduled_time_label,
            "dayOfWeek": self.day_of_week_label,
        }
