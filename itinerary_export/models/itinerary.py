"""
Itinerary view models - Rendering-ready projections of a trip.
"""
from pydantic import BaseModel, Field, computed_field
from enum import Enum
import datetime


class EventCategory(str, Enum):
    """Source collection of a display event."""
    ARRIVAL = "arrival"
    ACTIVITY = "activity"
    DEPARTURE = "departure"


class CategoryStyle(BaseModel):
    """Border, background and text colors for one event category."""
    border: str
    background: str
    text: str


CATEGORY_STYLES: dict[EventCategory, CategoryStyle] = {
    EventCategory.ARRIVAL: CategoryStyle(border="#28a745", background="#d4edda", text="#155724"),
    EventCategory.ACTIVITY: CategoryStyle(border="#007bff", background="#cce7ff", text="#004085"),
    EventCategory.DEPARTURE: CategoryStyle(border="#dc3545", background="#f8d7da", text="#721c24"),
}

CATEGORY_ICONS: dict[EventCategory, str] = {
    EventCategory.ARRIVAL: "🛬",
    EventCategory.ACTIVITY: "📅",
    EventCategory.DEPARTURE: "🛫",
}


class DisplayEvent(BaseModel):
    """A single arrival, activity or departure ready for display."""
    category: EventCategory = Field(..., description="Source collection")
    time: str = Field(..., description="Single time or 'start - end' range")
    description: str = Field(..., description="Human readable event text")
    icon: str = Field(..., description="Glyph shown before the event")

    @computed_field
    @property
    def label(self) -> str:
        return f"{self.icon} {self.time} - {self.description}"

    @property
    def style(self) -> CategoryStyle:
        return CATEGORY_STYLES[self.category]


class DayViewModel(BaseModel):
    """All events of one calendar day."""
    date: datetime.date = Field(..., description="Calendar day")
    date_key: str = Field(..., description="Zero-padded YYYY-MM-DD key")
    title: str = Field(..., description="Display title, e.g. 'Monday, July 14'")
    events: list[DisplayEvent] = Field(
        default_factory=list,
        description="Arrivals, then activities, then departures"
    )

    @property
    def has_events(self) -> bool:
        return bool(self.events)


class TripSummary(BaseModel):
    """Header block printed above the day cards."""
    name: str
    date_range: str = Field(..., description="e.g. 'July 14, 2024 to July 16, 2024'")
    arrival_count: int = 0
    activity_count: int = 0
    departure_count: int = 0

    @computed_field
    @property
    def stats_line(self) -> str:
        return (
            f"{self.arrival_count} Arrivals • "
            f"{self.activity_count} Activities • "
            f"{self.departure_count} Departures"
        )
