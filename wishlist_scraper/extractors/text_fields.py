"""Title / Description 추출기."""

from __future__ import annotations

from typing import Optional

from wishlist_scraper.utils.text import clean_text

from .chain import run_chain
from .document import ParsedDocument, ProbeContext


def _meta(*selectors: str):
    """메타 태그 content를 읽는 프로브 생성 (셀렉터 순서 = 우선순위)"""

    def probe(doc: ParsedDocument, ctx: ProbeContext) -> Optional[str]:
        for selector in selectors:
            value = clean_text(doc.attr(selector, "content"))
            if value:
                return value
        return None

    probe.__name__ = f"meta({', '.join(selectors)})"
    return probe


def title_tag(doc: ParsedDocument, ctx: ProbeContext) -> Optional[str]:
    return clean_text(doc.text("title"))


TITLE_PROBES = (
    _meta('meta[property="og:title"]', 'meta[name="og:title"]'),
    _meta('meta[name="twitter:title"]', 'meta[name="title"]'),
    title_tag,
)

DESCRIPTION_PROBES = (
    _meta('meta[name="description"]'),
    _meta('meta[property="og:description"]', 'meta[name="og:description"]'),
    _meta('meta[name="twitter:description"]'),
)


def extract_title(doc: ParsedDocument, ctx: ProbeContext) -> Optional[str]:
    return run_chain(TITLE_PROBES, doc, ctx, label="TITLE")


def extract_description(doc: ParsedDocument, ctx: ProbeContext) -> Optional[str]:
    return run_chain(DESCRIPTION_PROBES, doc, ctx, label="DESCRIPTION")
