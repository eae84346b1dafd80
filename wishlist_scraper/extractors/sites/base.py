"""Site rule set contract + generic variant."""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from wishlist_scraper.core.logging import logger

from ..chain import Probe, run_chain
from ..document import ParsedDocument, ProbeContext
from ..image import GENERIC_IMAGE_PROBES
from ..price import build_price_chain


class SiteRules:
    """사이트 규칙 세트 (기본 = 범용)

    사이트 전용 구현은 ``matches``와 프로브 목록만 바꿉니다.
    - image_probes: 범용 이미지 체인 *앞에* 실행
    - price_probes: 가격 체인의 2번째 티어(meta 다음, JSON-LD 앞)로 실행
    사이트 체인이 아무것도 내지 못하면 범용 체인으로 자연스럽게 넘어갑니다.
    """

    name = "generic"

    def __init__(self, rules: Optional[Dict[str, Any]] = None) -> None:
        self.rules = rules or {}

    def matches(self, host: str) -> bool:
        hosts = self.rules.get("hosts") or {}
        if not host:
            return False
        if host in (hosts.get("exact") or []):
            return True
        return any(token in host for token in (hosts.get("contains") or []))

    @property
    def image_probes(self) -> Sequence[Probe]:
        return ()

    @property
    def price_probes(self) -> Sequence[Probe]:
        return ()

    def resolve_image(self, doc: ParsedDocument, ctx: ProbeContext) -> Optional[str]:
        image = run_chain(self.image_probes, doc, ctx, label=f"IMAGE:{self.name}")
        if image is None and self.image_probes:
            logger.debug(f"[IMAGE:{self.name}] Site chain empty, falling back to generic")
        if image is None:
            image = run_chain(GENERIC_IMAGE_PROBES, doc, ctx, label="IMAGE:generic")
        return image

    def resolve_price(self, doc: ParsedDocument, ctx: ProbeContext) -> Optional[float]:
        return run_chain(build_price_chain(self.price_probes), doc, ctx, label=f"PRICE:{self.name}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


GENERIC_RULES = SiteRules()
