"""Best Buy 규칙 세트 (가격만 사이트 전용, 이미지는 범용 체인).

Phase A: 우선순위 셀렉터 후보 중 하한(floor) 이상인 첫 값.
Phase B: (A 실패 시) 본문 JSON 키 + "$nn.nn" 후보를 모두 모아
         하한 이상 중 최솟값, 하한 이상이 없으면 전체 최솟값.

NOTE: 하한/최솟값 규칙은 관찰된 마크업에서 얻은 휴리스틱입니다.
월 할부·플랜 금액(소액)과 정가/경쟁사/번들 금액(고액)을 동시에 피하려는 것이며
다른 리테일러로 일반화하지 않습니다.
"""

from __future__ import annotations

import re
from typing import Any, Dict, Iterable, List, Optional, Sequence

from wishlist_scraper.core.config import settings
from wishlist_scraper.core.logging import logger
from wishlist_scraper.utils.resource_loader import load_site_rules

from ..chain import Probe
from ..document import ParsedDocument, ProbeContext, node_attr, node_text
from ..price import TIER_SITE, PriceCandidate
from .base import SiteRules


def pick_priority(values: Iterable[Optional[float]], floor: float) -> Optional[float]:
    """Phase A: 하한 이상인 첫 값"""
    for value in values:
        if value is not None and value >= floor:
            return value
    return None


def pick_lowest_sane(values: Iterable[Optional[float]], floor: float) -> Optional[float]:
    """Phase B: 하한 이상 중 최솟값, 없으면 전체 최솟값"""
    valid = [v for v in values if v is not None]
    if not valid:
        return None
    sane = [v for v in valid if v >= floor]
    return min(sane) if sane else min(valid)


class BestBuyRules(SiteRules):
    name = "bestbuy"

    def __init__(self, rules: Optional[Dict[str, Any]] = None, price_floor: Optional[float] = None) -> None:
        super().__init__(rules if rules is not None else load_site_rules("bestbuy"))
        price_rules = self.rules.get("price") or {}
        self.priority_selectors: List[str] = list(price_rules.get("priority_selectors") or [])
        self.json_patterns = [re.compile(p) for p in price_rules.get("json_patterns") or []]
        dollar = price_rules.get("dollar_pattern")
        self.dollar_pattern = re.compile(dollar) if dollar else None
        self.price_floor = settings.bestbuy_price_floor if price_floor is None else price_floor

    def priority_candidates(self, doc: ParsedDocument) -> List[PriceCandidate]:
        candidates: List[PriceCandidate] = []
        for selector in self.priority_selectors:
            for node in doc.css(selector):
                raw = node_attr(node, "content", "value") or node_text(node)
                if raw:
                    candidates.append(PriceCandidate(raw, TIER_SITE, site_specific=True))
        return candidates

    def embedded_candidates(self, html: str) -> List[PriceCandidate]:
        candidates: List[PriceCandidate] = []
        for pattern in self.json_patterns:
            candidates.extend(
                PriceCandidate(m.group(1), TIER_SITE, site_specific=True)
                for m in pattern.finditer(html)
            )
        if self.dollar_pattern is not None:
            candidates.extend(
                PriceCandidate(m.group(1), TIER_SITE, site_specific=True)
                for m in self.dollar_pattern.finditer(html)
            )
        return candidates

    def priority_price(self, doc: ParsedDocument, ctx: ProbeContext) -> Optional[float]:
        value = pick_priority((c.value for c in self.priority_candidates(doc)), self.price_floor)
        if value is not None:
            logger.debug(f"[PRICE:bestbuy] Phase A accepted {value}")
        return value

    def embedded_price(self, doc: ParsedDocument, ctx: ProbeContext) -> Optional[float]:
        candidates = self.embedded_candidates(ctx.html or "")
        value = pick_lowest_sane((c.value for c in candidates), self.price_floor)
        if value is not None:
            logger.debug(f"[PRICE:bestbuy] Phase B accepted {value} from {len(candidates)} candidates")
        return value

    @property
    def price_probes(self) -> Sequence[Probe]:
        return (self.priority_price, self.embedded_price)
