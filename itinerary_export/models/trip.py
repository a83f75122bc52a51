"""
Trip models - The itinerary record supplied by the host page.
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
import datetime


class ArrivalEvent(BaseModel):
    """A traveler or flight arriving on a given day."""
    model_config = ConfigDict(populate_by_name=True)

    date: str = Field(..., description="Arrival date (YYYY-MM-DD)")
    time: str = Field(default="", description="Arrival time, e.g. '14:30'")
    name: str = Field(..., description="Traveler or flight label")


class DepartureEvent(BaseModel):
    """A traveler or flight departing on a given day."""
    model_config = ConfigDict(populate_by_name=True)

    date: str = Field(..., description="Departure date (YYYY-MM-DD)")
    time: str = Field(default="", description="Departure time, e.g. '18:05'")
    name: str = Field(..., description="Traveler or flight label")


class ActivityEvent(BaseModel):
    """A scheduled activity with an optional end time."""
    model_config = ConfigDict(populate_by_name=True)

    date: str = Field(..., description="Activity date (YYYY-MM-DD)")
    start_time: str = Field(default="", alias="startTime", description="Start time, e.g. '09:00'")
    end_time: Optional[str] = Field(None, alias="endTime", description="Optional end time")
    name: str = Field(..., description="Activity name")


class Trip(BaseModel):
    """
    Top-level itinerary record.

    Event collections are always lists; a missing or null collection
    is read as empty.
    """
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., description="Trip name")
    start_date: datetime.date = Field(..., alias="startDate", description="First day of the trip (inclusive)")
    end_date: datetime.date = Field(..., alias="endDate", description="Last day of the trip (inclusive)")
    arrivals: list[ArrivalEvent] = Field(default_factory=list)
    activities: list[ActivityEvent] = Field(default_factory=list)
    departures: list[DepartureEvent] = Field(default_factory=list)

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def strip_time_of_day(cls, v):
        """Anchor dates at midnight: drop any embedded time-of-day."""
        if isinstance(v, datetime.datetime):
            return v.date()
        if isinstance(v, str) and len(v) > 10:
            return v[:10]
        return v

    @field_validator("arrivals", "activities", "departures", mode="before")
    @classmethod
    def none_as_empty(cls, v):
        return [] if v is None else v

    def event_counts(self) -> tuple[int, int, int]:
        """Total arrivals, activities and departures, in or out of range."""
        return len(self.arrivals), len(self.activities), len(self.departures)
