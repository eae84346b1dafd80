"""Site rule sets - 호스트명으로 선택, 매칭 없으면 범용 규칙."""

from __future__ import annotations

from functools import lru_cache

from .amazon import AmazonRules
from .base import GENERIC_RULES, SiteRules
from .bestbuy import BestBuyRules


@lru_cache(maxsize=1)
def get_site_registry() -> tuple[SiteRules, ...]:
    """등록된 사이트 규칙 (순서 = 매칭 우선순위)"""
    return (AmazonRules(), BestBuyRules())


def select_rules(host: str) -> SiteRules:
    for rules in get_site_registry():
        if rules.matches(host):
            return rules
    return GENERIC_RULES


__all__ = [
    "AmazonRules",
    "BestBuyRules",
    "SiteRules",
    "GENERIC_RULES",
    "get_site_registry",
    "select_rules",
]
