"""URL 해석 유틸리티"""
from typing import Optional
from urllib.parse import urljoin, urlparse

from wishlist_scraper.utils.resource_loader import load_tracking_patterns


def get_hostname(url: str) -> str:
    """URL의 호스트명을 소문자로 반환 (실패 시 빈 문자열)

    Examples:
        >>> get_hostname("https://www.Amazon.com/dp/B000")
        'www.amazon.com'
        >>> get_hostname("invalid")
        ''
    """
    if not url:
        return ""
    try:
        return (urlparse(url).hostname or "").lower()
    except ValueError:
        return ""


def resolve_url(candidate: Optional[str], base_url: str) -> Optional[str]:
    """상대/프로토콜-상대 후보를 절대 URL로 변환합니다.

    - "//host/path" -> "{base scheme}://host/path"
    - "/path" -> "{base origin}/path"
    - "http(s)://..." -> 그대로
    - 그 외 -> base_url 기준 상대 참조로 해석

    http(s) 절대 URL이 아니게 되는 경우(data:, javascript: 등)와
    해석 실패는 None을 반환합니다.
    """
    if not candidate:
        return None

    c = candidate.strip()
    if not c:
        return None

    try:
        if c.startswith(("http://", "https://")):
            return c

        base = urlparse(base_url)
        if c.startswith("//"):
            if not base.scheme:
                return None
            resolved = f"{base.scheme}:{c}"
        elif c.startswith("/"):
            if not base.scheme or not base.netloc:
                return None
            resolved = f"{base.scheme}://{base.netloc}{c}"
        else:
            resolved = urljoin(base_url, c)

        parsed = urlparse(resolved)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            return None
        return resolved
    except ValueError:
        return None


def is_tracking_pixel(url: str) -> bool:
    """추적 픽셀/비콘 URL 여부 (패턴 목록은 resources/sites/tracking.yaml)"""
    if not url:
        return False
    lowered = url.lower()
    return any(pattern in lowered for pattern in load_tracking_patterns())
