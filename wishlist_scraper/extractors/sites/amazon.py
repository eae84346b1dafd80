"""Amazon 규칙 세트.

이미지: data-old-hires → data-a-dynamic-image(JSON 첫 키) → 본문 hiRes/large
       → og/twitter 메타 → 대표 이미지 src
가격: offscreen span/priceblock 셀렉터 → 본문 JSON 가격 필드 정규식
"""

from __future__ import annotations

import json
import re
from typing import Any, Dict, List, Optional, Sequence

from wishlist_scraper.utils.resource_loader import load_site_rules

from ..chain import Probe
from ..document import ParsedDocument, ProbeContext, node_attr, node_text
from ..image import accept_image, meta_image
from ..price import TIER_SITE, PriceCandidate, first_valid
from .base import SiteRules


def _is_json_shaped(value: str) -> bool:
    return value.lstrip().startswith(("{", "["))


def _unescape_json_url(value: str) -> str:
    return value.replace("\\/", "/").replace("\\u002F", "/").replace("\\u0026", "&")


class AmazonRules(SiteRules):
    name = "amazon"

    def __init__(self, rules: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(rules if rules is not None else load_site_rules("amazon"))
        image_rules = self.rules.get("image") or {}
        price_rules = self.rules.get("price") or {}

        self.image_selectors: List[str] = list(image_rules.get("image_selectors") or [])
        self.image_patterns = [re.compile(p) for p in image_rules.get("embedded_patterns") or []]
        self.preferred_host: str = image_rules.get("preferred_host") or ""

        self.price_selectors: List[str] = list(price_rules.get("selectors") or [])
        self.dollar_span_selector: str = price_rules.get("dollar_span_selector") or ""
        self.price_patterns = [re.compile(p) for p in price_rules.get("embedded_patterns") or []]

    # ------------------------------------------------------------------
    # Image
    # ------------------------------------------------------------------

    def _image_nodes(self, doc: ParsedDocument):
        for selector in self.image_selectors:
            node = doc.css_first(selector)
            if node is not None:
                yield node

    def _prefer(self, accepted: List[str]) -> Optional[str]:
        """media CDN URL 우선, 없으면 첫 후보"""
        if not accepted:
            return None
        if self.preferred_host:
            for url in accepted:
                if self.preferred_host in url:
                    return url
        return accepted[0]

    def old_hires(self, doc: ParsedDocument, ctx: ProbeContext) -> Optional[str]:
        accepted = []
        for node in self._image_nodes(doc):
            value = node_attr(node, "data-old-hires")
            if value and not _is_json_shaped(value):
                url = accept_image(value, ctx)
                if url:
                    accepted.append(url)
        return self._prefer(accepted)

    def dynamic_image(self, doc: ParsedDocument, ctx: ProbeContext) -> Optional[str]:
        accepted = []
        for node in self._image_nodes(doc):
            raw = node_attr(node, "data-a-dynamic-image")
            if not raw:
                continue
            try:
                data = json.loads(raw)
            except ValueError:
                continue
            if isinstance(data, dict) and data:
                url = accept_image(next(iter(data)), ctx)
                if url:
                    accepted.append(url)
        return self._prefer(accepted)

    def embedded_image(self, doc: ParsedDocument, ctx: ProbeContext) -> Optional[str]:
        html = ctx.html or ""
        for pattern in self.image_patterns:
            for m in pattern.finditer(html):
                url = accept_image(_unescape_json_url(m.group(1)), ctx)
                if url:
                    return url
        return None

    def image_src(self, doc: ParsedDocument, ctx: ProbeContext) -> Optional[str]:
        accepted = []
        for node in self._image_nodes(doc):
            url = accept_image(node_attr(node, "src"), ctx)
            if url:
                accepted.append(url)
        return self._prefer(accepted)

    @property
    def image_probes(self) -> Sequence[Probe]:
        return (
            self.old_hires,
            self.dynamic_image,
            self.embedded_image,
            meta_image,
            self.image_src,
        )

    # ------------------------------------------------------------------
    # Price
    # ------------------------------------------------------------------

    def selector_price(self, doc: ParsedDocument, ctx: ProbeContext) -> Optional[float]:
        candidates = []
        for selector in self.price_selectors:
            raw = doc.text(selector)
            if raw:
                candidates.append(PriceCandidate(raw, TIER_SITE, site_specific=True))
        value = first_valid(candidates)
        if value is not None or not self.dollar_span_selector:
            return value

        return first_valid(
            PriceCandidate(raw, TIER_SITE, site_specific=True)
            for raw in (node_text(n) for n in doc.css(self.dollar_span_selector))
            if raw and "$" in raw
        )

    def embedded_price(self, doc: ParsedDocument, ctx: ProbeContext) -> Optional[float]:
        html = ctx.html or ""
        for pattern in self.price_patterns:
            m = pattern.search(html)
            if not m:
                continue
            value = PriceCandidate(m.group(1), TIER_SITE, site_specific=True).value
            if value is not None:
                return value
        return None

    @property
    def price_probes(self) -> Sequence[Probe]:
        return (self.selector_price, self.embedded_price)
