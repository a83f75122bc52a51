"""Document backends for itinerary export."""
from .base import ItineraryRenderer, export_filename
from .html_renderer import HtmlRenderer
from .pdf_renderer import PdfRenderer


RENDERERS: dict[str, type[ItineraryRenderer]] = {
    PdfRenderer.name: PdfRenderer,
    HtmlRenderer.name: HtmlRenderer,
}


def get_renderer(name: str) -> ItineraryRenderer:
    """Get a renderer by name ('pdf' or 'html')."""
    renderer_cls = RENDERERS.get(name)
    if renderer_cls is None:
        raise ValueError(f"Unknown renderer: {name}")
    return renderer_cls()


__all__ = [
    "ItineraryRenderer",
    "HtmlRenderer",
    "PdfRenderer",
    "RENDERERS",
    "get_renderer",
    "export_filename",
]
