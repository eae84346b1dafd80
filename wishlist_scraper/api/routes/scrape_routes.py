"""Scrape Routes (Engine Layer)

HTTP Layer가 Engine Layer로 요청을 위임하는 단순한 Translator 역할만 수행합니다.
"""

from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from wishlist_scraper.core.exceptions import (
    InvalidRequestException,
    ScraperException,
    UnexpectedErrorException,
    UpstreamFetchFailedException,
)
from wishlist_scraper.core.logging import logger, sanitize_for_log
from wishlist_scraper.crawlers import DirectFetchExecutor, build_render_executor
from wishlist_scraper.engine import BudgetConfig, FetchOrchestrator, ProductExtractor
from wishlist_scraper.schemas.scrape_schema import ErrorResponse, ScrapeRequest, ScrapeResponse

router = APIRouter(prefix="/api", tags=["scrape"])

# 싱글톤 엔진 (읽기 전용 설정만 공유)
_extractor: Optional[ProductExtractor] = None


def get_extractor() -> ProductExtractor:
    """ProductExtractor 싱글톤

    렌더링 자격 증명은 프로세스 시작 시 한 번 읽습니다.
    """
    global _extractor
    if _extractor is None:
        orchestrator = FetchOrchestrator(
            direct_executor=DirectFetchExecutor(),
            render_executor=build_render_executor(),
            budget_config=BudgetConfig.from_settings(),
        )
        _extractor = ProductExtractor(orchestrator)
    return _extractor


def error_response(exc: ScraperException, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


@router.post(
    "/scrape-product",
    response_model=ScrapeResponse,
    responses={
        400: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def scrape_product(
    request: ScrapeRequest,
    extractor: ProductExtractor = Depends(get_extractor),
):
    """상품 메타데이터 스크랩 API

    Flow:
        1. URL 검증 (실패 시 400, 네트워크 호출 없음)
        2. Direct → Rendered 페치 (둘 다 실패 시 502)
        3. 필드 추출 (필드별 실패는 null)
    """
    logger.info(f"[API] Scrape request: url={sanitize_for_log(request.url or '')}")

    try:
        result = await extractor.extract(request.url)
    except InvalidRequestException as e:
        logger.warning(f"[API] Invalid request: {e}")
        return error_response(e, e.message)
    except UpstreamFetchFailedException as e:
        logger.warning(f"[API] Upstream fetch failed: {e.details.get('attempts')}")
        return error_response(e, "Failed to fetch page")
    except Exception as e:
        logger.error(f"[API] Scrape failed: {type(e).__name__}: {e}", exc_info=True)
        return error_response(
            UnexpectedErrorException(type(e).__name__),
            "Unexpected error while scraping product",
        )

    return ScrapeResponse(
        title=result.title,
        description=result.description,
        image_url=result.image_url,
        price=result.price,
        source=result.source.value if result.source else None,
    )
