"""Fetch Orchestrator - Direct → Rendered 2단계 페치

1. Direct fetch (브라우저 유사 헤더, 리다이렉트 추적)
2. Rendering service fallback (자격 증명이 있을 때만)
3. 둘 다 실패하면 UpstreamFetchFailedException

각 티어는 asyncio.wait_for로 개별 상한을 걸고, 같은 티어 안에서는 재시도하지 않습니다.
두 요청은 절대 동시에 나가지 않습니다 (Direct가 불충분할 때만 Rendered 시도).
"""

from __future__ import annotations

import asyncio
from typing import Optional

from wishlist_scraper.core.exceptions import UpstreamFetchFailedException
from wishlist_scraper.core.logging import logger, sanitize_for_log
from wishlist_scraper.crawlers import FetchExecutor, FetchResult

from .budget import BudgetConfig


class FetchOrchestrator:
    """페치 오케스트레이터

    요청 간 공유 가변 상태가 없으므로 동시 호출에 안전합니다.
    """

    def __init__(
        self,
        direct_executor: FetchExecutor,
        render_executor: FetchExecutor,
        budget_config: Optional[BudgetConfig] = None,
    ):
        """
        Args:
            direct_executor: 1단계 실행자 (execute 메서드 구현)
            render_executor: 2단계 실행자 (자격 증명이 없으면 DisabledRenderExecutor)
            budget_config: 티어별 타임아웃 (기본값: 설정에서 로드)
        """
        if not direct_executor:
            raise ValueError("direct_executor must not be None")
        if not render_executor:
            raise ValueError("render_executor must not be None")

        self.direct = direct_executor
        self.render = render_executor
        self.budget = budget_config or BudgetConfig.from_settings()

    async def fetch(self, url: str) -> FetchResult:
        """검증된 URL의 HTML을 가져온다

        Raises:
            UpstreamFetchFailedException: 두 티어 모두 실패/불충분
        """
        attempts: list[str] = []

        result = await self._try_tier("direct", self.direct, url, self.budget.direct_timeout, attempts)
        if result:
            return result

        result = await self._try_tier("render", self.render, url, self.budget.render_timeout, attempts)
        if result:
            return result

        logger.warning(f"[FETCH] All tiers failed: url={sanitize_for_log(url)}, attempts={attempts}")
        raise UpstreamFetchFailedException(url, attempts=attempts)

    async def _try_tier(
        self,
        name: str,
        executor: FetchExecutor,
        url: str,
        timeout: float,
        attempts: list[str],
    ) -> Optional[FetchResult]:
        """단일 티어 1회 실행. 타임아웃/오류는 불충분으로 분류"""
        try:
            result = await asyncio.wait_for(executor.execute(url, timeout), timeout=timeout)
        except asyncio.TimeoutError:
            logger.warning(f"[FETCH] {name} tier timed out after {timeout:.1f}s")
            attempts.append(f"{name}:timeout")
            return None
        except Exception as e:
            logger.warning(f"[FETCH] {name} tier failed: {type(e).__name__}: {e}")
            attempts.append(f"{name}:error")
            return None

        if result is None or not result.html:
            attempts.append(f"{name}:insufficient")
            return None

        attempts.append(f"{name}:ok")
        return result
