"""공용 유틸리티 (URL 해석, 가격 정규화, 텍스트 정리, 리소스 로딩)."""

from .prices import normalize_price
from .text import clean_text
from .url_utils import get_hostname, is_tracking_pixel, resolve_url

__all__ = [
    "normalize_price",
    "clean_text",
    "get_hostname",
    "is_tracking_pixel",
    "resolve_url",
]
