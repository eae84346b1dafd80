"""Direct Fetch Executor - 브라우저 유사 헤더로 대상 페이지를 직접 GET"""

from __future__ import annotations

import asyncio
from typing import Optional

from wishlist_scraper.core.config import settings
from wishlist_scraper.core.logging import logger, sanitize_for_log

from .executor import FetchExecutor
from .http_client import HttpClient, get_http_client
from .result import FetchResult, FetchSource


def is_insufficient_html(html: Optional[str], min_length: int) -> bool:
    """200 OK라도 너무 짧은 본문은 봇 차단/빈 셸 페이지로 간주"""
    if not html:
        return True
    return len(html) <= min_length


class DirectFetchExecutor(FetchExecutor):
    """1단계: 직접 요청

    특징:
    - curl_cffi 요청 단위 세션 (브라우저 TLS 지문 + 헤더, 쿠키 비공유)
    - 리다이렉트 추적, 최종 URL 기록
    - 2xx + 최소 본문 길이 초과일 때만 채택
    """

    def __init__(
        self,
        client: Optional[HttpClient] = None,
        min_html_length: Optional[int] = None,
    ) -> None:
        self.client = client or get_http_client()
        self.min_html_length = (
            settings.scraper_min_html_length if min_html_length is None else min_html_length
        )

    async def execute(self, url: str, timeout: float) -> Optional[FetchResult]:
        loop = asyncio.get_running_loop()
        started = loop.time()
        logger.info(f"[DIRECT] Fetching {sanitize_for_log(url, max_length=120)} (timeout={timeout:.1f}s)")

        res = await self.client.get_text(url, timeout_s=timeout)
        if not res:
            return None

        status, html, final_url = res
        if not 200 <= status < 300:
            logger.info(f"[DIRECT] Non-OK status: {status}")
            return None

        if is_insufficient_html(html, self.min_html_length):
            logger.info(
                f"[DIRECT] Insufficient HTML (len={len(html) if html else 0}, min={self.min_html_length})"
            )
            return None

        elapsed_ms = (loop.time() - started) * 1000
        logger.info(f"[DIRECT] OK (len={len(html)}, elapsed={elapsed_ms:.0f}ms)")
        return FetchResult(
            html=html,
            final_url=final_url or url,
            source=FetchSource.DIRECT,
            status_code=status,
            elapsed_ms=elapsed_ms,
        )
