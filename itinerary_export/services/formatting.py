"""
Date formatting - Keys and titles for day cards.
Names are fixed English tables so output never depends on the process locale.
"""
import datetime


WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


class DateFormatter:
    """Base formatter: ISO keys and ISO titles."""

    def key(self, day: datetime.date) -> str:
        """Zero-padded YYYY-MM-DD in the local calendar."""
        return f"{day.year:04d}-{day.month:02d}-{day.day:02d}"

    def title(self, day: datetime.date) -> str:
        return self.key(day)

    def long_date(self, day: datetime.date) -> str:
        return self.key(day)


class EnglishDateFormatter(DateFormatter):
    """English day titles, e.g. 'Monday, July 14' or 'Mon, Jul 14'."""

    def __init__(self, style: str = "long"):
        self.style = style

    def title(self, day: datetime.date) -> str:
        weekday = WEEKDAYS[day.weekday()]
        month = MONTHS[day.month - 1]
        if self.style == "short":
            return f"{weekday[:3]}, {month[:3]} {day.day}"
        return f"{weekday}, {month} {day.day}"

    def long_date(self, day: datetime.date) -> str:
        return f"{MONTHS[day.month - 1]} {day.day}, {day.year}"


def get_formatter(style: str = "long") -> DateFormatter:
    """Build a formatter for a title style: 'long', 'short' or 'iso'."""
    if style in ("long", "short"):
        return EnglishDateFormatter(style)
    if style == "iso":
        return DateFormatter()
    raise ValueError(f"Unknown title style: {style}")
