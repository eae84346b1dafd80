"""헬스 체크 엔드포인트"""
from fastapi import APIRouter
from datetime import datetime

from wishlist_scraper import __version__
from wishlist_scraper.core.config import settings
from wishlist_scraper.engine import ENGINE_VERSION
from wishlist_scraper.schemas.scrape_schema import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    헬스 체크 엔드포인트

    - 서버 상태
    - 렌더링 서비스 폴백 활성화 여부 (자격 증명 존재)
    """
    return HealthResponse(
        status="ok",
        timestamp=datetime.now(),
        version=__version__,
        engine_version=ENGINE_VERSION,
        render_enabled=settings.render_enabled,
    )


@router.get("/")
async def root():
    """루트 엔드포인트"""
    return {
        "service": settings.api_title,
        "version": __version__,
        "docs": "/docs"
    }
