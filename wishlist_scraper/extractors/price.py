"""Price Resolver - 범용 가격 티어.

티어 순서 (처음으로 값이 채택되는 티어가 승리):
1. meta / microdata 태그
2. 사이트 전용 티어 (Amazon, Best Buy - sites/ 참고)
3. JSON-LD
4. 범용 microdata (itemprop="price")
5. 흔한 가격 컨테이너 클래스
6. 최후 수단: 원문 HTML의 첫 "$" 숫자 패턴
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from wishlist_scraper.utils.prices import normalize_price

from .chain import Probe
from .document import ParsedDocument, ProbeContext, node_attr, node_text
from .jsonld import jsonld_price

# 티어 번호 (PriceCandidate.tier)
TIER_META = 1
TIER_SITE = 2
TIER_JSONLD = 3
TIER_MICRODATA = 4
TIER_CONTAINER = 5
TIER_REGEX = 6

_META_PRICE_SELECTORS = (
    'meta[property="product:price:amount"]',
    'meta[name="product:price:amount"]',
    'meta[property="og:price:amount"]',
    'meta[name="og:price:amount"]',
    'meta[itemprop="price"]',
    'meta[name="twitter:data1"]',
    'meta[property="twitter:data1"]',
)

_CONTAINER_SELECTORS = (
    ".priceView-customer-price span",
    '[data-testid="price"]',
    ".price",
    ".Price",
    ".pricing",
)

_DOLLAR_PATTERN = re.compile(r"\$\s?(\d{1,3}(?:,\d{3})+(?:\.\d{2})?|\d+(?:\.\d{2})?)")


@dataclass(frozen=True)
class PriceCandidate:
    """티어 내 비교용 가격 후보"""

    raw_text: str
    tier: int
    site_specific: bool = False

    @property
    def value(self) -> Optional[float]:
        return normalize_price(self.raw_text)


def first_valid(candidates: Iterable[PriceCandidate]) -> Optional[float]:
    for candidate in candidates:
        value = candidate.value
        if value is not None:
            return value
    return None


def meta_price(doc: ParsedDocument, ctx: ProbeContext) -> Optional[float]:
    return first_valid(
        PriceCandidate(raw, TIER_META)
        for raw in (doc.attr(s, "content", "value") for s in _META_PRICE_SELECTORS)
        if raw
    )


def microdata_price(doc: ParsedDocument, ctx: ProbeContext) -> Optional[float]:
    """첫 itemprop="price" 요소만 본다: content → value → 텍스트"""
    node = doc.css_first('[itemprop="price"]')
    if node is None:
        return None
    raw = node_attr(node, "content", "value") or node_text(node)
    return normalize_price(raw)


def container_price(doc: ParsedDocument, ctx: ProbeContext) -> Optional[float]:
    for selector in _CONTAINER_SELECTORS:
        raw = doc.text(selector)
        if not raw:
            continue
        value = PriceCandidate(raw, TIER_CONTAINER).value
        if value is not None:
            return value
    return None


def regex_price(doc: ParsedDocument, ctx: ProbeContext) -> Optional[float]:
    m = _DOLLAR_PATTERN.search(ctx.html or "")
    if not m:
        return None
    return PriceCandidate(m.group(1), TIER_REGEX).value


def build_price_chain(site_probes: Sequence[Probe] = ()) -> tuple[Probe, ...]:
    """사이트 전용 프로브를 2번째 티어에 끼운 전체 가격 체인"""
    return (
        meta_price,
        *site_probes,
        jsonld_price,
        microdata_price,
        container_price,
        regex_price,
    )
