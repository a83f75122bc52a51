"""Trip itinerary exporter: day cards, pagination and PDF/HTML rendering."""
