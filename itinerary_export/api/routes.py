"""
API Routes for Itinerary Export.
"""
import logging
from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import Response
from pydantic import BaseModel
from typing import Optional

from ..config import settings, get_layout_policy
from ..errors import InvalidRangeError, RenderError
from ..models.trip import Trip
from ..models.itinerary import DayViewModel, TripSummary
from ..models.layout import LayoutPolicy, Page
from ..services.exporter import ItineraryExporter
from ..services.formatting import get_formatter
from ..services.renderers import get_renderer


router = APIRouter(prefix="/api", tags=["itinerary-export"])
logger = logging.getLogger(__name__)


# Request/Response Models
class ExportRequest(BaseModel):
    trip: Trip
    policy: Optional[LayoutPolicy] = None


class PlanResponse(BaseModel):
    summary: TripSummary
    pages: list[Page]
    page_count: int
    day_count: int


def get_exporter(output_format: Optional[str] = None) -> ItineraryExporter:
    """Build an exporter from settings, optionally overriding the backend."""
    try:
        renderer = get_renderer(output_format or settings.renderer)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return ItineraryExporter(get_formatter(settings.title_style), renderer)


# Endpoints

@router.post("/itinerary/days", response_model=list[DayViewModel])
async def build_days(trip: Trip):
    """Build the per-day view models for a trip."""
    try:
        return get_exporter().build_days(trip)
    except InvalidRangeError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/itinerary/plan", response_model=PlanResponse)
async def plan_pages(request: ExportRequest):
    """Paginate a trip's day cards without rendering them."""
    try:
        report = get_exporter().build_report(request.trip, request.policy or get_layout_policy())
    except InvalidRangeError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return PlanResponse(
        summary=report.summary,
        pages=report.plan.pages,
        page_count=report.plan.page_count,
        day_count=report.plan.day_count,
    )


@router.post("/itinerary/export")
async def export_itinerary(
    request: ExportRequest,
    output_format: Optional[str] = Query(None, alias="format", description="'pdf' or 'html'; defaults to the configured renderer")
):
    """Render a trip to a downloadable document."""
    exporter = get_exporter(output_format)

    try:
        result = exporter.export(request.trip, request.policy or get_layout_policy())
    except InvalidRangeError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except RenderError as e:
        logger.error(f"Export failed for trip {request.trip.name}: {e}")
        raise HTTPException(status_code=500, detail=f"Error generating document: {e}")

    return Response(
        content=result.content,
        media_type=result.media_type,
        headers={
            "Content-Disposition": f'attachment; filename="{result.filename}"',
            "X-Page-Count": str(result.page_count),
        },
    )
