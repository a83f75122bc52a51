"""Tests for building per-day view models."""
import pytest
from datetime import date

from itinerary_export.errors import InvalidRangeError
from itinerary_export.models import Trip, EventCategory
from itinerary_export.services.day_builder import DayItineraryBuilder
from itinerary_export.services.formatting import get_formatter


@pytest.fixture
def trip():
    return Trip(
        name="Lisbon",
        start_date=date(2024, 7, 14),
        end_date=date(2024, 7, 16),
        arrivals=[
            {"date": "2024-07-14", "time": "10:30", "name": "Ana"},
            {"date": "2024-07-20", "time": "08:00", "name": "Late Bruno"},
        ],
        activities=[
            {"date": "2024-07-15", "startTime": "09:00", "endTime": "11:00", "name": "Walking tour"},
            {"date": "2024-07-14", "startTime": "19:30", "name": "Dinner"},
            {"date": "2024-07-13", "startTime": "12:00", "name": "Too early"},
        ],
        departures=[
            {"date": "2024-07-16", "time": "17:45", "name": "Ana"},
            {"date": "2024-07-14", "time": "06:00", "name": "Carla"},
        ],
    )


class TestDayItineraryBuilder:
    """Test event bucketing and display metadata."""

    def test_day_key_and_title(self, trip):
        """Keys are zero-padded ISO dates; titles use the long style."""
        day = DayItineraryBuilder().build(date(2024, 7, 4), trip)

        assert day.date_key == "2024-07-04"
        assert day.title == "Thursday, July 4"

    def test_arrival_display(self, trip):
        """Arrivals get the landing icon and 'arrives' text."""
        day = DayItineraryBuilder().build(date(2024, 7, 14), trip)
        arrival = day.events[0]

        assert arrival.category == EventCategory.ARRIVAL
        assert arrival.icon == "🛬"
        assert arrival.time == "10:30"
        assert arrival.description == "Ana arrives"

    def test_activity_time_range(self, trip):
        """Activities with an end time show 'start - end'."""
        day = DayItineraryBuilder().build(date(2024, 7, 15), trip)

        assert len(day.events) == 1
        assert day.events[0].time == "09:00 - 11:00"
        assert day.events[0].description == "Walking tour"
        assert day.events[0].icon == "📅"
        assert day.events[0].label == "📅 09:00 - 11:00 - Walking tour"

    def test_activity_without_end_time(self, trip):
        """Activities without an end time show only the start."""
        day = DayItineraryBuilder().build(date(2024, 7, 14), trip)
        activity = [e for e in day.events if e.category == EventCategory.ACTIVITY][0]

        assert activity.time == "19:30"

    def test_grouped_by_category_not_time(self, trip):
        """Arrivals, then activities, then departures regardless of clock time."""
        day = DayItineraryBuilder().build(date(2024, 7, 14), trip)

        assert [e.category for e in day.events] == [
            EventCategory.ARRIVAL,
            EventCategory.ACTIVITY,
            EventCategory.DEPARTURE,
        ]
        # 06:00 departure still comes last
        assert day.events[-1].description == "Carla departs"
        assert day.events[-1].icon == "🛫"

    def test_day_without_events(self, trip):
        """A day with nothing scheduled has an empty event list."""
        quiet = trip.model_copy(update={"arrivals": [], "activities": [], "departures": []})
        day = DayItineraryBuilder().build(date(2024, 7, 15), quiet)

        assert day.events == []
        assert not day.has_events

    def test_missing_collections_are_empty(self):
        """Absent or null collections build without error."""
        bare = Trip.model_validate({
            "name": "Bare",
            "startDate": "2024-07-14",
            "endDate": "2024-07-14",
            "arrivals": None,
        })
        day = DayItineraryBuilder().build(date(2024, 7, 14), bare)

        assert day.events == []

    def test_build_all_places_each_in_range_event_once(self, trip):
        """Every in-range event lands in exactly one day; others are dropped."""
        days = DayItineraryBuilder().build_all(trip)

        assert [d.date_key for d in days] == ["2024-07-14", "2024-07-15", "2024-07-16"]
        descriptions = [e.description for d in days for e in d.events]
        assert len(descriptions) == 5
        assert len(set(descriptions)) == 5
        assert "Late Bruno arrives" not in descriptions
        assert "Too early" not in descriptions

    def test_build_all_rejects_inverted_trip(self, trip):
        """A trip ending before it starts raises InvalidRangeError."""
        inverted = trip.model_copy(update={"end_date": date(2024, 7, 10)})

        with pytest.raises(InvalidRangeError):
            DayItineraryBuilder().build_all(inverted)

    def test_injected_formatter(self, trip):
        """Titles come from the supplied formatter."""
        builder = DayItineraryBuilder(get_formatter("short"))
        day = builder.build(date(2024, 7, 14), trip)

        assert day.title == "Sun, Jul 14"
