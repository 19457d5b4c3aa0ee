"""Departure board domain models."""

from dataclasses import dataclass, field
from typing import Any

from ptv_departures.domain.models.error_details import ErrorDetails
from ptv_departures.domain.models.normalized_departure import NormalizedDeparture


@dataclass(frozen=True)
class BoardSection:
    """Departures for one configured stop, or the error that prevented them."""

    key: str
    title: str
    departures: list[NormalizedDeparture] = field(default_factory=list)
    error: ErrorDetails | None = None

    @property
    def failed(self) -> bool:
        """Whether fetching this section failed."""
        return self.error is not None


@dataclass(frozen=True)
class DepartureBoard:
    """All configured sections, in configuration order."""

    sections: list[BoardSection]

    def section(self, key: str) -> BoardSection | None:
        """Find a section by key."""
        for section in self.sections:
            if section.key == key:
                return section
        return None

    @property
    def all_failed(self) -> bool:
        """Whether every section failed (an empty board never counts as failed)."""
        return bool(self.sections) and all(section.failed for section in self.sections)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the JSON shape served to the presentation layer."""
        result: dict[str, Any] = {
            section.key: [d.to_display_dict() for d in section.departures]
            for section in self.sections
        }
        result["errors"] = {
            section.key: section.error.model_dump()
            for section in self.sections
            if section.error is not None
        }
        return result
