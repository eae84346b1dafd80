"""Probe chain runner.

필드별 폴백 체인은 독립 프로브 함수의 순서 있는 목록입니다.
프로브 시그니처: ``(ParsedDocument, ProbeContext) -> Optional[T]``
"""

from __future__ import annotations

from typing import Callable, Iterable, Optional, TypeVar

from wishlist_scraper.core.logging import logger

from .document import ParsedDocument, ProbeContext

T = TypeVar("T")

Probe = Callable[[ParsedDocument, ProbeContext], Optional[T]]


def probe_name(probe: Callable) -> str:
    return getattr(probe, "__name__", None) or type(probe).__name__


def run_chain(
    probes: Iterable[Probe],
    doc: ParsedDocument,
    ctx: ProbeContext,
    *,
    label: str = "CHAIN",
) -> Optional[T]:
    """프로브를 순서대로 실행해 처음으로 None이 아닌 값을 반환.

    프로브 내부 예외는 해당 프로브의 "값 없음"으로 취급합니다.
    """
    for probe in probes:
        try:
            value = probe(doc, ctx)
        except Exception as e:
            logger.debug(f"[{label}] Probe {probe_name(probe)} failed: {type(e).__name__}: {e}")
            continue
        if value is not None:
            logger.debug(f"[{label}] Probe {probe_name(probe)} matched")
            return value
    return None
