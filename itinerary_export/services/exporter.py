"""
Itinerary Exporter - Turns a trip into a downloadable document.
Expands the date range, builds day cards, paginates, then hands the
report to a rendering backend.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from .day_builder import DayItineraryBuilder
from .formatting import DateFormatter, get_formatter
from .layout_planner import PaginatedLayoutPlanner
from .renderers import ItineraryRenderer, PdfRenderer, export_filename
from ..models.trip import Trip
from ..models.itinerary import DayViewModel, TripSummary
from ..models.layout import ItineraryReport, LayoutPolicy

logger = logging.getLogger(__name__)


@dataclass
class ExportResult:
    """A rendered document ready for download."""
    content: bytes
    media_type: str
    filename: str
    page_count: int
    day_count: int


class ItineraryExporter:
    """Runs the export pipeline for one trip at a time."""

    def __init__(
        self,
        formatter: Optional[DateFormatter] = None,
        renderer: Optional[ItineraryRenderer] = None
    ):
        self.formatter = formatter or get_formatter()
        self.renderer = renderer or PdfRenderer()
        self.builder = DayItineraryBuilder(self.formatter)
        self.planner = PaginatedLayoutPlanner()

    def build_days(self, trip: Trip) -> list[DayViewModel]:
        """
        Build one view model per trip day.

        Raises:
            InvalidRangeError: If the trip ends before it starts
        """
        return self.builder.build_all(trip)

    def build_summary(self, trip: Trip) -> TripSummary:
        """Header block: name, date range and event totals."""
        arrivals, activities, departures = trip.event_counts()
        return TripSummary(
            name=trip.name,
            date_range=(
                f"{self.formatter.long_date(trip.start_date)} to "
                f"{self.formatter.long_date(trip.end_date)}"
            ),
            arrival_count=arrivals,
            activity_count=activities,
            departure_count=departures,
        )

    def build_report(self, trip: Trip, policy: Optional[LayoutPolicy] = None) -> ItineraryReport:
        """Days, pagination and header, ready for any renderer."""
        days = self.build_days(trip)
        plan = self.planner.plan(days, policy)
        return ItineraryReport(summary=self.build_summary(trip), plan=plan)

    def export(self, trip: Trip, policy: Optional[LayoutPolicy] = None) -> ExportResult:
        """
        Render a trip to a document.

        Args:
            trip: The trip to export
            policy: Page capacity policy

        Returns:
            ExportResult with the document bytes and download name

        Raises:
            InvalidRangeError: If the trip ends before it starts
            RenderError: If the backend fails
        """
        logger.info(f"Starting {self.renderer.name} export for trip: {trip.name}")

        report = self.build_report(trip, policy)
        content = self.renderer.render(report)

        logger.info(
            f"Exported {report.plan.day_count} day(s) on "
            f"{report.plan.page_count} page(s) for trip: {trip.name}"
        )

        return ExportResult(
            content=content,
            media_type=self.renderer.media_type,
            filename=export_filename(trip.name, self.renderer.extension),
            page_count=report.plan.page_count,
            day_count=report.plan.day_count,
        )
