"""전역 테스트 설정

역할:
- 테스트 환경 구성
- 공통 Fake 실행자/HTTP 클라이언트 주입
- HTML → (ParsedDocument, ProbeContext) 헬퍼

금지:
- 실제 네트워크 호출
"""

from __future__ import annotations

import asyncio
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Optional

import pytest


# 프로젝트 루트를 경로에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from wishlist_scraper.crawlers import FetchResult, FetchSource  # noqa: E402
from wishlist_scraper.extractors import ProbeContext, build_document  # noqa: E402
from wishlist_scraper.utils.url_utils import get_hostname  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def test_env() -> None:
    """테스트 환경 변수 설정 (세션 전역)"""
    os.environ["ENVIRONMENT"] = "test"
    os.environ["LOG_LEVEL"] = "INFO"


@dataclass
class FakeExecutor:
    """오케스트레이터 Unit 테스트용 페치 실행자

    - result를 그대로 반환 (None이면 불충분)
    - delay 동안 대기 후 반환 (타임아웃 시나리오)
    - error가 있으면 예외
    """

    result: Optional[FetchResult] = None
    delay: float = 0.0
    error: Optional[Exception] = None
    calls: list[tuple[str, float]] = field(default_factory=list)

    async def execute(self, url: str, timeout: float) -> Optional[FetchResult]:
        self.calls.append((url, timeout))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.result


@dataclass
class FakeHttpClient:
    """HttpClient 대체 (get_text만 구현)

    handler(url, params) -> (status, text, final_url) | None
    """

    handler: Callable[[str, Optional[dict[str, Any]]], Optional[tuple[int, str, str]]]
    calls: list[dict[str, Any]] = field(default_factory=list)

    async def get_text(
        self,
        url: str,
        *,
        timeout_s: float,
        params: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
        follow_redirects: bool = True,
    ) -> Optional[tuple[int, str, str]]:
        self.calls.append({"url": url, "timeout_s": timeout_s, "params": params})
        return self.handler(url, params)


def make_result(html: str, url: str = "https://shop.example.com/p/1", source: FetchSource = FetchSource.DIRECT) -> FetchResult:
    return FetchResult(html=html, final_url=url, source=source, status_code=200)


def parse(html: str, url: str = "https://shop.example.com/p/1"):
    """HTML → (doc, ctx)"""
    return build_document(html), ProbeContext(html=html, base_url=url, host=get_hostname(url))


@pytest.fixture
def parse_html():
    """HTML → (ParsedDocument, ProbeContext) 변환 함수"""
    return parse


@pytest.fixture
def fetch_result():
    """FetchResult 생성 함수"""
    return make_result


@pytest.fixture
def fake_executor():
    """FakeExecutor 팩토리"""
    return FakeExecutor


@pytest.fixture
def fake_http_client():
    """FakeHttpClient 팩토리"""
    return FakeHttpClient
