"""Data models for the itinerary exporter."""
from .trip import Trip, ArrivalEvent, ActivityEvent, DepartureEvent
from .itinerary import (
    EventCategory,
    CategoryStyle,
    CATEGORY_STYLES,
    DisplayEvent,
    DayViewModel,
    TripSummary,
)
from .layout import PackingStrategy, LayoutPolicy, Page, PagePlan, ItineraryReport

__all__ = [
    "Trip",
    "ArrivalEvent",
    "ActivityEvent",
    "DepartureEvent",
    "EventCategory",
    "CategoryStyle",
    "CATEGORY_STYLES",
    "DisplayEvent",
    "DayViewModel",
    "TripSummary",
    "PackingStrategy",
    "LayoutPolicy",
    "Page",
    "PagePlan",
    "ItineraryReport",
]
