"""
PDF itinerary renderer built on ReportLab platypus.

Lays out a title section followed by day cards in a two-column grid.
Each page of the plan starts on a new PDF page. Cards sit in grid rows
and move to the next page whole; a card taller than a full page is
placed on its own and continues over the break with its title repeated.
"""
import io
import logging
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import cm
from reportlab.platypus import (
    SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle, PageBreak
)

from .base import ItineraryRenderer, NO_EVENTS_TEXT
from ...errors import RenderError
from ...models.itinerary import CATEGORY_STYLES, DayViewModel, TripSummary
from ...models.layout import ItineraryReport, Page

logger = logging.getLogger(__name__)


class PdfRenderer(ItineraryRenderer):
    """Renders the report as an A4 PDF."""

    name = "pdf"
    media_type = "application/pdf"
    extension = "pdf"

    COLOR_PRIMARY = colors.HexColor('#007bff')
    COLOR_TEXT = colors.HexColor('#1a1a1a')
    COLOR_MUTED = colors.HexColor('#666666')
    COLOR_BORDER = colors.HexColor('#dddddd')
    COLOR_RULE = colors.HexColor('#eeeeee')

    COLUMNS = 2
    CARD_WIDTH = 7.7 * cm
    GUTTER = 0.5 * cm
    ROW_GAP = 14

    def __init__(self):
        self.styles = getSampleStyleSheet()
        self._create_custom_styles()

    def _create_custom_styles(self):
        """Create custom paragraph styles"""

        self.styles.add(ParagraphStyle(
            name='TripTitle',
            parent=self.styles['Title'],
            fontSize=24,
            leading=28,
            textColor=self.COLOR_TEXT,
            spaceAfter=10,
            alignment=TA_CENTER,
            fontName='Helvetica-Bold'
        ))

        self.styles.add(ParagraphStyle(
            name='TripDates',
            parent=self.styles['Normal'],
            fontSize=13,
            textColor=self.COLOR_MUTED,
            spaceAfter=8,
            alignment=TA_CENTER,
            fontName='Helvetica'
        ))

        self.styles.add(ParagraphStyle(
            name='TripStats',
            parent=self.styles['Normal'],
            fontSize=11,
            textColor=self.COLOR_TEXT,
            spaceAfter=12,
            alignment=TA_CENTER,
            fontName='Helvetica'
        ))

        self.styles.add(ParagraphStyle(
            name='DayTitle',
            parent=self.styles['Normal'],
            fontSize=12,
            leading=15,
            textColor=self.COLOR_TEXT,
            fontName='Helvetica-Bold'
        ))

        self.styles.add(ParagraphStyle(
            name='NoEvents',
            parent=self.styles['Normal'],
            fontSize=10,
            textColor=colors.HexColor('#888888'),
            fontName='Helvetica-Oblique'
        ))

        for category, style in CATEGORY_STYLES.items():
            self.styles.add(ParagraphStyle(
                name=f'Event-{category.value}',
                parent=self.styles['Normal'],
                fontSize=9.5,
                leading=12,
                textColor=colors.HexColor(style.text),
                fontName='Helvetica'
            ))

    def render(self, report: ItineraryReport) -> bytes:
        buffer = io.BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            rightMargin=2*cm,
            leftMargin=2*cm,
            topMargin=2*cm,
            bottomMargin=2*cm,
            title=f"{report.summary.name} Itinerary",
        )

        # Frame padding is 6pt on each side
        max_height = doc.height - 12

        story = []
        story.extend(self._create_title_section(report.summary))
        for index, page in enumerate(report.plan.pages):
            if index:
                story.append(PageBreak())
            story.extend(self._create_page(page, max_height))

        try:
            doc.build(story, onFirstPage=self._add_page_decorations,
                      onLaterPages=self._add_page_decorations)
        except Exception as e:
            logger.error(f"PDF generation failed: {e}")
            raise RenderError(f"PDF generation failed: {e}") from e

        return buffer.getvalue()

    def _create_title_section(self, summary: TripSummary):
        """Trip name, date range and event totals"""
        title = Table(
            [
                [Paragraph(escape(summary.name), self.styles['TripTitle'])],
                [Paragraph(escape(summary.date_range), self.styles['TripDates'])],
                [Paragraph(escape(summary.stats_line), self.styles['TripStats'])],
            ],
            colWidths=[self.COLUMNS * self.CARD_WIDTH + self.GUTTER],
        )
        title.setStyle(TableStyle([
            ('ALIGN', (0, 0), (-1, -1), 'CENTER'),
            ('TOPPADDING', (0, 0), (-1, 0), 24),
            ('LINEBELOW', (0, -1), (-1, -1), 2, self.COLOR_PRIMARY),
            ('BOTTOMPADDING', (0, -1), (-1, -1), 16),
        ]))
        return [title, Spacer(1, 0.8*cm)]

    def _create_page(self, page: Page, max_height: float):
        """Grid of day cards, COLUMNS per row; oversized cards stand alone"""
        elements = []
        pending = []
        for day in page.days:
            card = self._create_day_card(day)
            _, height = card.wrap(self.CARD_WIDTH, max_height)
            if height + self.ROW_GAP <= max_height:
                pending.append(card)
                continue

            logger.debug(f"Day {day.date_key} exceeds one page; letting it flow")
            elements.extend(self._create_grid(pending))
            pending = []
            elements.append(self._create_day_card(day, splittable=True))
            elements.append(Spacer(1, self.ROW_GAP))

        elements.extend(self._create_grid(pending))
        return elements

    def _create_grid(self, cards):
        rows = []
        for start in range(0, len(cards), self.COLUMNS):
            row = cards[start:start + self.COLUMNS]
            row.extend([""] * (self.COLUMNS - len(row)))
            rows.append(row)

        if not rows:
            return []

        grid = Table(
            rows,
            colWidths=[self.CARD_WIDTH + self.GUTTER] * self.COLUMNS,
        )
        grid.setStyle(TableStyle([
            ('VALIGN', (0, 0), (-1, -1), 'TOP'),
            ('LEFTPADDING', (0, 0), (-1, -1), 0),
            ('RIGHTPADDING', (0, 0), (-1, -1), self.GUTTER),
            ('BOTTOMPADDING', (0, 0), (-1, -1), self.ROW_GAP),
        ]))
        return [grid]

    def _create_day_card(self, day: DayViewModel, splittable: bool = False) -> Table:
        """
        One bordered card: title row, then one colored row per event.

        A splittable card is placed directly in the story, so ReportLab
        can break it between event rows and repeat the title row.
        """
        rows = [[Paragraph(escape(day.title), self.styles['DayTitle'])]]
        commands = [
            ('BOX', (0, 0), (-1, -1), 0.75, self.COLOR_BORDER),
            ('LINEBELOW', (0, 0), (-1, 0), 0.5, self.COLOR_RULE),
            ('LEFTPADDING', (0, 0), (-1, -1), 8),
            ('RIGHTPADDING', (0, 0), (-1, -1), 8),
            ('TOPPADDING', (0, 0), (-1, 0), 8),
            ('BOTTOMPADDING', (0, 0), (-1, 0), 6),
        ]

        if not day.has_events:
            rows.append([Paragraph(NO_EVENTS_TEXT, self.styles['NoEvents'])])

        for row_index, event in enumerate(day.events, 1):
            style = event.style
            rows.append([Paragraph(escape(event.label), self.styles[f'Event-{event.category.value}'])])
            commands.extend([
                ('BACKGROUND', (0, row_index), (0, row_index), colors.HexColor(style.background)),
                ('LINEBEFORE', (0, row_index), (0, row_index), 3, colors.HexColor(style.border)),
                ('TOPPADDING', (0, row_index), (0, row_index), 5),
                ('BOTTOMPADDING', (0, row_index), (0, row_index), 5),
            ])

        if splittable:
            card = Table(rows, colWidths=[self.CARD_WIDTH], repeatRows=1, hAlign='LEFT')
        else:
            card = Table(rows, colWidths=[self.CARD_WIDTH])
        card.setStyle(TableStyle(commands))
        return card

    def _add_page_decorations(self, canvas, doc):
        """Add footer to each page"""
        canvas.saveState()
        canvas.setFont('Helvetica', 8)
        canvas.setFillColor(self.COLOR_MUTED)
        canvas.drawString(2*cm, 1.2*cm, f"Trip Itinerary • Page {doc.page}")
        canvas.restoreState()
