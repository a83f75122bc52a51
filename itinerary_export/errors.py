"""Exceptions raised by the itinerary exporter."""
import datetime


class InvalidRangeError(ValueError):
    """Trip end date falls before its start date."""

    def __init__(self, start: datetime.date, end: datetime.date):
        self.start = start
        self.end = end
        super().__init__(f"End date {end.isoformat()} is before start date {start.isoformat()}")


class RenderError(RuntimeError):
    """A rendering backend failed to produce the document."""
