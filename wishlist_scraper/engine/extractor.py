"""Product Extractor - Main Engine Entry Point

Coordinates the whole extraction pipeline:
1. URL validation (네트워크 호출 전)
2. Fetch (Direct → Rendered)
3. Parse tree build
4. Field resolvers (title / description / image / price)
5. Result assembly

필드별 실패는 조용히 None으로 degrade 하며, 오류로 표면화되는 것은
검증 실패와 페치 전체 실패뿐입니다.
"""

from __future__ import annotations

from typing import Callable, Optional, TypeVar

from wishlist_scraper.core.logging import logger, sanitize_for_log
from wishlist_scraper.core.security import SecurityValidator
from wishlist_scraper.crawlers import FetchResult
from wishlist_scraper.extractors import (
    ParsedDocument,
    ProbeContext,
    build_document,
    extract_description,
    extract_title,
    select_rules,
)
from wishlist_scraper.utils.url_utils import get_hostname

from .orchestrator import FetchOrchestrator
from .result import ExtractionResult

T = TypeVar("T")


class ProductExtractor:
    """상품 메타데이터 추출 엔진"""

    def __init__(self, orchestrator: FetchOrchestrator):
        if not orchestrator:
            raise ValueError("orchestrator must not be None")
        self.orchestrator = orchestrator

    async def extract(self, url: str) -> ExtractionResult:
        """URL 하나에 대한 best-effort 메타데이터

        Raises:
            InvalidRequestException: URL 누락/형식 오류/허용되지 않는 스킴
            UpstreamFetchFailedException: 두 페치 티어 모두 실패
        """
        target = SecurityValidator.validate_url(url)
        fetched = await self.orchestrator.fetch(target)
        return self.assemble(fetched)

    def assemble(self, fetched: FetchResult) -> ExtractionResult:
        """페치 결과 → ExtractionResult (예외를 던지지 않음)"""
        doc = build_document(fetched.html)
        base_url = fetched.final_url
        ctx = ProbeContext(html=fetched.html, base_url=base_url, host=get_hostname(base_url))
        rules = select_rules(ctx.host)

        result = ExtractionResult(
            title=_guarded("title", extract_title, doc, ctx),
            description=_guarded("description", extract_description, doc, ctx),
            image_url=_guarded("image", rules.resolve_image, doc, ctx),
            price=_guarded("price", rules.resolve_price, doc, ctx),
            source=fetched.source,
        )

        logger.info(
            f"[EXTRACT] Done: url={sanitize_for_log(base_url)}, rules={rules.name}, "
            f"source={fetched.source.value}, title={'Y' if result.title else 'N'}, "
            f"image={'Y' if result.image_url else 'N'}, price={result.price}"
        )
        return result


def _guarded(
    field: str,
    resolver: Callable[[ParsedDocument, ProbeContext], Optional[T]],
    doc: ParsedDocument,
    ctx: ProbeContext,
) -> Optional[T]:
    try:
        return resolver(doc, ctx)
    except Exception as e:
        logger.warning(f"[EXTRACT] {field} resolver failed: {type(e).__name__}: {e}", exc_info=True)
        return None
