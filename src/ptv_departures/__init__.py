"""Signed PTV Timetable API client and next-departures aggregation."""

__version__ = "0.1.0"
