"""
HTML renderer - Standalone markup with styled day cards.
Suitable for printing or feeding to an HTML-to-PDF converter.
"""
import html
import logging

from .base import ItineraryRenderer, NO_EVENTS_TEXT
from ...errors import RenderError
from ...models.itinerary import CATEGORY_STYLES, DayViewModel, TripSummary
from ...models.layout import ItineraryReport, Page

logger = logging.getLogger(__name__)


BASE_CSS = """
.pdf-container {
    font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;
    padding: 20px;
    background: #fff;
    color: #333;
    line-height: 1.4;
    width: 760px;
}
.title-section {
    text-align: center;
    padding: 40px 20px;
    border-bottom: 2px solid #007bff;
    margin-bottom: 30px;
}
.trip-title { font-size: 28px; font-weight: bold; color: #1a1a1a; margin-bottom: 15px; }
.trip-dates { font-size: 16px; color: #666; margin-bottom: 20px; }
.trip-stats { font-size: 14px; color: #333; margin-bottom: 20px; }
.day-cards-grid {
    display: flex;
    flex-wrap: wrap;
    gap: 20px 16px;
    justify-content: flex-start;
    margin-top: 10px;
}
.day-cards-grid + .day-cards-grid { page-break-before: always; }
.day-card {
    background: #fff;
    border: 1px solid #ddd;
    border-radius: 6px;
    padding: 15px;
    box-shadow: 0 1px 3px rgba(0,0,0,0.1);
    width: 340px;
    box-sizing: border-box;
    flex: 0 0 340px;
    page-break-inside: avoid;
}
.day-title {
    font-size: 16px;
    font-weight: bold;
    color: #1a1a1a;
    margin-bottom: 10px;
    border-bottom: 1px solid #eee;
    padding-bottom: 5px;
}
.event-item { margin: 6px 0; padding: 6px 10px; border-radius: 4px; font-size: 13px; }
.no-events { color: #888; font-style: italic; padding: 8px 0; }
"""


def _category_css() -> str:
    rules = []
    for category, style in CATEGORY_STYLES.items():
        rules.append(
            f".event-{category.value} {{ background: {style.background}; "
            f"border-left: 3px solid {style.border}; color: {style.text}; }}"
        )
    return "\n".join(rules)


class HtmlRenderer(ItineraryRenderer):
    """Renders the report as an HTML document."""

    name = "html"
    media_type = "text/html"
    extension = "html"

    def render(self, report: ItineraryReport) -> bytes:
        try:
            parts = [
                "<!DOCTYPE html>",
                '<html><head><meta charset="utf-8">',
                f"<title>{html.escape(report.summary.name)}</title>",
                f"<style>{BASE_CSS}{_category_css()}</style>",
                '</head><body><div class="pdf-container">',
                self._title_section(report.summary),
            ]
            parts.extend(self._page(page) for page in report.plan.pages)
            parts.append("</div></body></html>")
            return "\n".join(parts).encode("utf-8")
        except Exception as e:
            logger.error(f"HTML rendering failed: {e}")
            raise RenderError(f"HTML rendering failed: {e}") from e

    def _title_section(self, summary: TripSummary) -> str:
        return (
            '<div class="title-section">'
            f'<div class="trip-title">{html.escape(summary.name)}</div>'
            f'<div class="trip-dates">{html.escape(summary.date_range)}</div>'
            f'<div class="trip-stats">{html.escape(summary.stats_line)}</div>'
            "</div>"
        )

    def _page(self, page: Page) -> str:
        cards = "".join(self._day_card(day) for day in page.days)
        return f'<div class="day-cards-grid" data-page="{page.number}">{cards}</div>'

    def _day_card(self, day: DayViewModel) -> str:
        body = [f'<div class="day-title">{html.escape(day.title)}</div>']
        if not day.has_events:
            body.append(f'<div class="no-events">{NO_EVENTS_TEXT}</div>')
        for event in day.events:
            body.append(
                f'<div class="event-item event-{event.category.value}">'
                f"{html.escape(event.label)}</div>"
            )
        return f'<div class="day-card" data-date="{day.date_key}">{"".join(body)}</div>'
