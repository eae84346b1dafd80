"""API routes package."""

from .health_routes import router as health_router
from .scrape_routes import router as scrape_router, get_extractor

__all__ = ["health_router", "scrape_router", "get_extractor"]
