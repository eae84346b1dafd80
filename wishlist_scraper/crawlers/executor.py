"""Executor Protocol - Interface for direct/rendered fetch tiers

Defines the common interface that all fetch executors must implement.
"""

from typing import Optional, Protocol

from .result import FetchResult


class FetchExecutor(Protocol):
    """페치 실행자 프로토콜

    Direct/Rendered 티어가 구현해야 할 인터페이스입니다.

    구현 예시:
        class DirectFetchExecutor(FetchExecutor):
            async def execute(self, url: str, timeout: float) -> Optional[FetchResult]:
                # HTTP GET 로직
                ...
    """

    async def execute(self, url: str, timeout: float) -> Optional[FetchResult]:
        """페치 실행

        Args:
            url: 검증된 대상 URL
            timeout: 타임아웃 (초)

        Returns:
            충분한 HTML을 얻으면 FetchResult, 불충분/실패면 None
        """
        ...
