"""Services for the itinerary exporter."""
from .date_range import expand
from .formatting import DateFormatter, EnglishDateFormatter, get_formatter
from .day_builder import DayItineraryBuilder
from .layout_planner import PaginatedLayoutPlanner, estimate_height
from .exporter import ItineraryExporter, ExportResult

__all__ = [
    "expand",
    "DateFormatter",
    "EnglishDateFormatter",
    "get_formatter",
    "DayItineraryBuilder",
    "PaginatedLayoutPlanner",
    "estimate_height",
    "ItineraryExporter",
    "ExportResult",
]
