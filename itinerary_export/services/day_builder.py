"""
Day itinerary builder - Buckets a trip's events into per-day view models.
"""
import logging
from datetime import date
from typing import Optional

from .date_range import expand
from .formatting import DateFormatter, get_formatter
from ..models.trip import Trip
from ..models.itinerary import CATEGORY_ICONS, DayViewModel, DisplayEvent, EventCategory

logger = logging.getLogger(__name__)


class DayItineraryBuilder:
    """Builds one DayViewModel per calendar day of a trip."""

    def __init__(self, formatter: Optional[DateFormatter] = None):
        self.formatter = formatter or get_formatter()

    def build(self, day: date, trip: Trip) -> DayViewModel:
        """
        Collect the events scheduled on a single day.

        Events keep their collection order, grouped as arrivals,
        then activities, then departures. No time sort is applied.
        """
        date_key = self.formatter.key(day)
        events: list[DisplayEvent] = []

        for arrival in trip.arrivals:
            if arrival.date == date_key:
                events.append(DisplayEvent(
                    category=EventCategory.ARRIVAL,
                    time=arrival.time,
                    description=f"{arrival.name} arrives",
                    icon=CATEGORY_ICONS[EventCategory.ARRIVAL],
                ))

        for activity in trip.activities:
            if activity.date == date_key:
                events.append(DisplayEvent(
                    category=EventCategory.ACTIVITY,
                    time=self._activity_time(activity.start_time, activity.end_time),
                    description=activity.name,
                    icon=CATEGORY_ICONS[EventCategory.ACTIVITY],
                ))

        for departure in trip.departures:
            if departure.date == date_key:
                events.append(DisplayEvent(
                    category=EventCategory.DEPARTURE,
                    time=departure.time,
                    description=f"{departure.name} departs",
                    icon=CATEGORY_ICONS[EventCategory.DEPARTURE],
                ))

        return DayViewModel(
            date=day,
            date_key=date_key,
            title=self.formatter.title(day),
            events=events,
        )

    def build_all(self, trip: Trip) -> list[DayViewModel]:
        """Build view models for every day from start_date to end_date."""
        days = [self.build(day, trip) for day in expand(trip.start_date, trip.end_date)]

        placed = sum(len(d.events) for d in days)
        total = sum(trip.event_counts())
        if placed < total:
            logger.debug(f"Dropped {total - placed} event(s) outside {trip.start_date} to {trip.end_date}")

        return days

    @staticmethod
    def _activity_time(start_time: str, end_time: Optional[str]) -> str:
        if end_time:
            return f"{start_time} - {end_time}"
        return start_time
