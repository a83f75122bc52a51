"""Tests for trip parsing and date formatting."""
import pytest
from datetime import date, datetime

from itinerary_export.models import Trip, DisplayEvent, EventCategory, TripSummary, CATEGORY_STYLES
from itinerary_export.services.formatting import DateFormatter, EnglishDateFormatter, get_formatter


class TestTrip:
    """Test Trip validation."""

    def test_camel_case_payload(self):
        """Host page JSON keys are accepted."""
        trip = Trip.model_validate({
            "name": "Porto",
            "startDate": "2024-07-14",
            "endDate": "2024-07-16",
            "activities": [{"date": "2024-07-15", "startTime": "09:00", "endTime": "11:00", "name": "Tour"}],
        })

        assert trip.start_date == date(2024, 7, 14)
        assert trip.activities[0].start_time == "09:00"
        assert trip.activities[0].end_time == "11:00"
        assert trip.arrivals == []
        assert trip.departures == []

    def test_time_of_day_stripped(self):
        """Dates with a time component are anchored to the calendar day."""
        trip = Trip.model_validate({
            "name": "Porto",
            "startDate": "2024-07-14T15:30:00",
            "endDate": datetime(2024, 7, 16, 8, 0),
        })

        assert trip.start_date == date(2024, 7, 14)
        assert trip.end_date == date(2024, 7, 16)

    def test_inverted_range_is_not_a_model_error(self):
        """Range checking is left to the expander."""
        trip = Trip(name="Backwards", start_date=date(2024, 7, 16), end_date=date(2024, 7, 14))
        assert trip.end_date < trip.start_date

    def test_event_counts(self):
        trip = Trip.model_validate({
            "name": "Counts",
            "startDate": "2024-07-14",
            "endDate": "2024-07-14",
            "arrivals": [{"date": "2024-07-14", "time": "10:00", "name": "A"}],
            "departures": None,
        })
        assert trip.event_counts() == (1, 0, 0)


class TestDisplayModels:
    """Test derived display fields."""

    def test_label_and_style(self):
        event = DisplayEvent(category=EventCategory.DEPARTURE, time="17:45", description="Ana departs", icon="🛫")

        assert event.label == "🛫 17:45 - Ana departs"
        assert event.style == CATEGORY_STYLES[EventCategory.DEPARTURE]
        assert event.style.border == "#dc3545"
        assert event.model_dump()["label"] == "🛫 17:45 - Ana departs"

    def test_stats_line(self):
        summary = TripSummary(name="X", date_range="", arrival_count=2, activity_count=5, departure_count=1)
        assert summary.stats_line == "2 Arrivals • 5 Activities • 1 Departures"


class TestFormatters:
    """Test date formatting styles."""

    def test_key_is_zero_padded(self):
        assert DateFormatter().key(date(2024, 1, 5)) == "2024-01-05"

    def test_long_title(self):
        assert EnglishDateFormatter().title(date(2024, 7, 15)) == "Monday, July 15"

    def test_short_title(self):
        assert get_formatter("short").title(date(2024, 7, 15)) == "Mon, Jul 15"

    def test_iso_title(self):
        assert get_formatter("iso").title(date(2024, 7, 15)) == "2024-07-15"

    def test_long_date(self):
        assert get_formatter().long_date(date(2024, 7, 14)) == "July 14, 2024"

    def test_unknown_style(self):
        with pytest.raises(ValueError):
            get_formatter("klingon")
