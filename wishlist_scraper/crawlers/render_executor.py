"""Render Fetch Executor - 외부 렌더링 서비스(ScraperAPI 호환) 경유 GET

대상 URL과 API 키, render 플래그를 쿼리 파라미터로 넘기면
실제 브라우저에서 스크립트를 실행한 HTML을 본문으로 돌려줍니다.
응답은 불투명하게 취급하며 non-2xx/빈 본문/타임아웃은 모두 티어 실패입니다.
"""

from __future__ import annotations

import asyncio
from typing import Optional

from wishlist_scraper.core.config import settings
from wishlist_scraper.core.logging import logger, sanitize_for_log

from .executor import FetchExecutor
from .http_client import HttpClient, get_http_client
from .result import FetchResult, FetchSource


class RenderFetchExecutor(FetchExecutor):
    """2단계: 렌더링 서비스"""

    def __init__(
        self,
        api_key: str,
        endpoint: Optional[str] = None,
        client: Optional[HttpClient] = None,
    ) -> None:
        if not api_key:
            raise ValueError("api_key must not be empty")
        self.api_key = api_key
        self.endpoint = endpoint or settings.scraper_api_url
        self.client = client or get_http_client()

    async def execute(self, url: str, timeout: float) -> Optional[FetchResult]:
        loop = asyncio.get_running_loop()
        started = loop.time()
        logger.info(f"[RENDER] Fetching via rendering service: {sanitize_for_log(url, max_length=120)} (timeout={timeout:.1f}s)")

        res = await self.client.get_text(
            self.endpoint,
            timeout_s=timeout,
            params={"api_key": self.api_key, "url": url, "render": "true"},
        )
        if not res:
            return None

        status, html, _ = res
        if not 200 <= status < 300:
            logger.info(f"[RENDER] Non-OK status: {status}")
            return None
        if not html or not html.strip():
            logger.info("[RENDER] Empty body")
            return None

        elapsed_ms = (loop.time() - started) * 1000
        logger.info(f"[RENDER] OK (len={len(html)}, elapsed={elapsed_ms:.0f}ms)")
        # 렌더링 서비스 URL이 아니라 요청한 페이지 URL을 기준으로 상대 경로를 푼다
        return FetchResult(
            html=html,
            final_url=url,
            source=FetchSource.RENDERED,
            status_code=status,
            elapsed_ms=elapsed_ms,
        )


class DisabledRenderExecutor(FetchExecutor):
    """렌더링 자격 증명이 없을 때 주입하는 실행자

    오케스트레이터는 동일한 인터페이스를 기대하므로, 구현체를 주입해
    렌더링 단계에서 '결과 없음'으로 자연스럽게 종료되도록 만듭니다.
    """

    async def execute(self, url: str, timeout: float) -> Optional[FetchResult]:
        logger.info("[RENDER:disabled] No rendering credential configured, skipping")
        return None


def build_render_executor() -> FetchExecutor:
    """설정에 따라 렌더링 실행자 선택"""
    if settings.render_enabled:
        return RenderFetchExecutor(api_key=settings.scraper_api_key.strip())
    return DisabledRenderExecutor()
