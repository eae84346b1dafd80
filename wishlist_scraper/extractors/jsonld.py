"""JSON-LD(구조화 데이터) 가격 탐색.

- ``application/ld+json`` 블록을 모두 파싱 (HTML 주석 래퍼 제거)
- 파싱 실패 블록은 로그만 남기고 건너뜀
- 첫 번째로 값을 내는 블록이 승리
"""

from __future__ import annotations

import json
import re
from typing import Any, Iterator, Optional

from wishlist_scraper.core.logging import logger
from wishlist_scraper.utils.prices import normalize_price

from .document import ParsedDocument, ProbeContext, node_text

# 값 탐색 순서 (점 표기 경로)
PRICE_PATHS = (
    ("offers", "price"),
    ("offers", "lowPrice"),
    ("offers", "highPrice"),
    ("offers", "priceSpecification", "price"),
    ("price",),
    ("priceSpecification", "price"),
)

# 하위 엔티티가 들어 있는 컨테이너 키
_NESTED_KEYS = ("@graph", "itemListElement", "item", "itemOffered", "mainEntity")

# 비정상적으로 깊은 문서에서 재귀 폭주 방지
_MAX_DEPTH = 12

_COMMENT_WRAPPER = re.compile(r"^\s*<!--|-->\s*$")


def iter_jsonld_blocks(doc: ParsedDocument) -> Iterator[Any]:
    """파싱 가능한 JSON-LD 블록을 문서 순서대로 반환"""
    for idx, node in enumerate(doc.css('script[type="application/ld+json"]')):
        raw = node_text(node)
        if not raw:
            continue
        payload = _COMMENT_WRAPPER.sub("", raw).strip()
        if not payload:
            continue
        try:
            yield json.loads(payload)
        except (ValueError, RecursionError) as e:
            logger.debug(f"[JSONLD] Skipping unparsable block #{idx}: {type(e).__name__}: {e}")


def _values_at(node: Any, path: tuple[str, ...]) -> Iterator[Any]:
    """경로를 따라가며 리스트는 펼쳐서 모든 값을 반환 (offers가 배열인 경우 등)"""
    if not path:
        yield node
        return
    if isinstance(node, list):
        for item in node:
            yield from _values_at(item, path)
        return
    if isinstance(node, dict) and path[0] in node:
        yield from _values_at(node[path[0]], path[1:])


def find_price(node: Any, depth: int = 0) -> Optional[float]:
    """파싱된 JSON-LD 값에서 가격을 재귀 탐색"""
    if depth > _MAX_DEPTH:
        return None

    if isinstance(node, list):
        for item in node:
            price = find_price(item, depth + 1)
            if price is not None:
                return price
        return None

    if not isinstance(node, dict):
        return None

    for path in PRICE_PATHS:
        for value in _values_at(node, path):
            if isinstance(value, (dict, list)):
                continue
            price = normalize_price(value)
            if price is not None:
                return price

    for key in _NESTED_KEYS:
        if key in node:
            price = find_price(node[key], depth + 1)
            if price is not None:
                return price
    return None


def jsonld_price(doc: ParsedDocument, ctx: ProbeContext) -> Optional[float]:
    for block in iter_jsonld_blocks(doc):
        price = find_price(block)
        if price is not None:
            return price
    return None
