"""커스텀 예외 정의 (Structured Exception Hierarchy)

HTTP 상태 코드 매핑:
- InvalidRequestException → 400
- UpstreamFetchFailedException → 502
- UnexpectedErrorException → 500
"""
from typing import Any, Optional


class ScraperException(Exception):
    """기본 예외 클래스 - 모든 커스텀 예외의 부모"""
    status_code: int = 500

    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


class InvalidRequestException(ScraperException):
    """URL 누락/형식 오류/허용되지 않는 스킴"""
    status_code = 400

    def __init__(self, reason: str, details: Optional[dict[str, Any]] = None):
        super().__init__(reason, "INVALID_REQUEST", details or {"reason": reason})


class UpstreamFetchFailedException(ScraperException):
    """직접 요청과 렌더링 서비스 요청이 모두 실패/불충분"""
    status_code = 502

    def __init__(self, url: str, attempts: Optional[list[str]] = None, details: Optional[dict[str, Any]] = None):
        message = f"Failed to fetch page: {url}"
        super().__init__(
            message,
            "UPSTREAM_FETCH_FAILED",
            details or {"url": url, "attempts": attempts or []},
        )


class UnexpectedErrorException(ScraperException):
    """분류되지 않은 파싱/런타임 오류"""
    status_code = 500

    def __init__(self, reason: str, details: Optional[dict[str, Any]] = None):
        message = f"Unexpected error while scraping product: {reason}"
        super().__init__(message, "UNEXPECTED_ERROR", details or {"reason": reason})
