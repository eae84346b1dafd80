"""Image Resolver - 범용 체인 + 후보 검증."""

from __future__ import annotations

import re
from typing import Iterable, Optional

from wishlist_scraper.utils.url_utils import is_tracking_pixel, resolve_url

from .document import ParsedDocument, ProbeContext, node_attr

# 아이콘/스페이서 배제용 최소 크기 (선언된 경우에만 검사)
MIN_IMAGE_DIMENSION = 120

_META_IMAGE_SELECTORS = (
    'meta[property="og:image"]',
    'meta[name="og:image"]',
    'meta[property="og:image:url"]',
    'meta[name="twitter:image"]',
    'meta[property="twitter:image"]',
)


def accept_image(candidate: Optional[str], ctx: ProbeContext) -> Optional[str]:
    """절대 URL로 해석하고 추적 픽셀이면 버린다"""
    if not candidate or candidate.strip().lower().startswith("data:"):
        return None
    resolved = resolve_url(candidate, ctx.base_url)
    if not resolved or is_tracking_pixel(resolved):
        return None
    return resolved


def first_accepted(candidates: Iterable[Optional[str]], ctx: ProbeContext) -> Optional[str]:
    for candidate in candidates:
        accepted = accept_image(candidate, ctx)
        if accepted:
            return accepted
    return None


def meta_image(doc: ParsedDocument, ctx: ProbeContext) -> Optional[str]:
    return first_accepted((doc.attr(s, "content") for s in _META_IMAGE_SELECTORS), ctx)


def link_image_src(doc: ParsedDocument, ctx: ProbeContext) -> Optional[str]:
    return accept_image(doc.attr('link[rel="image_src"]', "href"), ctx)


def _declared_dimension(value: Optional[str]) -> Optional[int]:
    """width/height 속성의 px 값 ("300", "300px"). 숫자가 아니면 미선언 취급"""
    if not value:
        return None
    m = re.fullmatch(r"\s*(\d+)(?:\.\d+)?\s*(?:px)?\s*", value)
    return int(m.group(1)) if m else None


def _large_enough(node) -> bool:
    for name in ("width", "height"):
        size = _declared_dimension((node.attributes or {}).get(name))
        if size is not None and size < MIN_IMAGE_DIMENSION:
            return False
    return True


def first_large_img(doc: ParsedDocument, ctx: ProbeContext) -> Optional[str]:
    for node in doc.css("img"):
        # lazy-load 이미지는 src에 data: 플레이스홀더, data-src에 실제 경로
        src = next(
            (
                v for v in (node_attr(node, "src"), node_attr(node, "data-src"))
                if v and not v.strip().lower().startswith("data:")
            ),
            None,
        )
        if not src:
            continue
        if not _large_enough(node):
            continue
        accepted = accept_image(src, ctx)
        if accepted:
            return accepted
    return None


GENERIC_IMAGE_PROBES = (
    meta_image,
    link_image_src,
    first_large_img,
)
