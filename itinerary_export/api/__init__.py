"""HTTP API for the itinerary exporter."""
from .routes import router

__all__ = ["router"]
