"""Fetch Result Standard Format

페치 단계 결과의 표준 형식을 정의합니다.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class FetchSource(str, Enum):
    """HTML을 공급한 페치 티어 (응답의 source 값)"""

    DIRECT = "direct"
    RENDERED = "scraper"


@dataclass
class FetchResult:
    """페치 결과 표준 포맷

    Attributes:
        html: 원문 HTML
        final_url: 리다이렉트 이후 URL (상대 URL 해석 기준)
        source: HTML을 공급한 티어
        status_code: 응답 상태 코드
        elapsed_ms: 해당 티어 소요 시간 (밀리초)
    """

    html: str
    final_url: str
    source: FetchSource
    status_code: Optional[int] = None
    elapsed_ms: Optional[float] = None
