"""Credentials domain model."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Credentials:
    """Developer id and signing key issued by PTV for the Timetable API."""

    dev_id: str
    signing_key: str = field(repr=False)
