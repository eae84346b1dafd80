"""API 엔드포인트 패키지 - export only."""

from .routes import health_router, scrape_router, get_extractor

__all__ = ["health_router", "scrape_router", "get_extractor"]
