"""Route type domain model."""

from enum import IntEnum


class RouteType(IntEnum):
    """Transport modes as numbered by the PTV Timetable API."""

    TRAIN = 0
    TRAM = 1
    BUS = 2
    VLINE = 3
    NIGHT_BUS = 4
