"""
Renderer interface - Backends that turn an itinerary report into a document.
"""
import re
from abc import ABC, abstractmethod

from ...models.layout import ItineraryReport


NO_EVENTS_TEXT = "No events scheduled"


class ItineraryRenderer(ABC):
    """Base class for document backends."""

    name: str = ""
    media_type: str = "application/octet-stream"
    extension: str = ""

    @abstractmethod
    def render(self, report: ItineraryReport) -> bytes:
        """
        Produce the complete document.

        Raises:
            RenderError: If the backend fails
        """


def export_filename(trip_name: str, extension: str) -> str:
    """Download name such as 'Summer in Lisbon Itinerary.pdf'."""
    safe_name = re.sub(r"[^a-zA-Z0-9\s]", "", trip_name or "").strip() or "Trip"
    return f"{safe_name} Itinerary.{extension}"
