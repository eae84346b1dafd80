"""Fetch Budget - 티어별 타임아웃 설정

- Direct: 5초 (기본)
- Rendered: 10초 (기본)
두 값 모두 환경 변수(SCRAPER_DIRECT_TIMEOUT_S / SCRAPER_RENDER_TIMEOUT_S)로 조정합니다.
"""

from dataclasses import dataclass
from typing import Optional

from wishlist_scraper.core.config import Settings, settings


@dataclass(frozen=True)
class BudgetConfig:
    """티어별 타임아웃 (초)"""

    direct_timeout: float = 5.0
    render_timeout: float = 10.0

    def __post_init__(self):
        """설정 검증"""
        if self.direct_timeout <= 0 or self.render_timeout <= 0:
            raise ValueError(
                f"Tier timeouts must be positive (direct={self.direct_timeout}s, render={self.render_timeout}s)"
            )

    @property
    def total(self) -> float:
        """최악의 경우 한 요청이 쓰는 페치 시간"""
        return self.direct_timeout + self.render_timeout

    @classmethod
    def from_settings(cls, source: Optional[Settings] = None) -> "BudgetConfig":
        source = source or settings
        return cls(
            direct_timeout=source.scraper_direct_timeout_s,
            render_timeout=source.scraper_render_timeout_s,
        )
