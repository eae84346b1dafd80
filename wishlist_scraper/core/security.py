"""입력 보안 검증 (URL Validator)

네트워크 호출 이전에 잘못된 URL을 거절합니다.
"""

from typing import Any
from urllib.parse import urlparse

from wishlist_scraper.core.exceptions import InvalidRequestException
from wishlist_scraper.core.logging import logger, sanitize_for_log


class SecurityValidator:
    """입력 보안 검증"""

    MAX_URL_LENGTH = 2048
    ALLOWED_SCHEMES = ("http", "https")

    @staticmethod
    def validate_url(url: Any) -> str:
        """URL 검증

        Args:
            url: 요청 본문의 url 값 (타입 미확정)

        Returns:
            앞뒤 공백을 제거한 URL

        Raises:
            InvalidRequestException: 누락/파싱 실패/허용되지 않는 스킴
        """
        if not url or not isinstance(url, str) or not url.strip():
            raise InvalidRequestException("Missing or invalid URL")

        candidate = url.strip()
        if len(candidate) > SecurityValidator.MAX_URL_LENGTH:
            raise InvalidRequestException(
                f"URL must be at most {SecurityValidator.MAX_URL_LENGTH} characters"
            )

        try:
            parsed = urlparse(candidate)
            # 포트 파싱 오류는 속성 접근 시점에 발생
            _ = parsed.port
        except ValueError as e:
            logger.warning(f"[VALIDATE] Unparsable URL: {sanitize_for_log(candidate)} ({e})")
            raise InvalidRequestException("Missing or invalid URL") from e

        if parsed.scheme.lower() not in SecurityValidator.ALLOWED_SCHEMES:
            logger.warning(f"[VALIDATE] Disallowed scheme: {parsed.scheme or '[none]'}")
            raise InvalidRequestException("URL must start with http:// or https://")

        if not parsed.hostname:
            raise InvalidRequestException("Missing or invalid URL")

        return candidate
