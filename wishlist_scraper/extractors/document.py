"""Parse Tree Builder - selectolax 기반 조회용 문서 래퍼.

깨진 마크업이나 지원하지 않는 셀렉터에서도 예외를 던지지 않고
빈 결과로 degrade 합니다 (브라우저의 관대한 파싱과 동일한 태도).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from selectolax.parser import HTMLParser, Node

from wishlist_scraper.core.logging import logger


class ParsedDocument:
    """읽기 전용 HTML 문서"""

    def __init__(self, tree: HTMLParser) -> None:
        self._tree = tree

    def css(self, selector: str) -> List[Node]:
        try:
            return self._tree.css(selector)
        except Exception as e:
            logger.debug(f"[DOC] Selector failed: {selector!r}: {type(e).__name__}: {e}")
            return []

    def css_first(self, selector: str) -> Optional[Node]:
        try:
            return self._tree.css_first(selector)
        except Exception as e:
            logger.debug(f"[DOC] Selector failed: {selector!r}: {type(e).__name__}: {e}")
            return None

    def attr(self, selector: str, *names: str) -> Optional[str]:
        """첫 매칭 요소에서 names 순서대로 비어 있지 않은 속성값 반환"""
        node = self.css_first(selector)
        if node is None:
            return None
        return node_attr(node, *names)

    def text(self, selector: str) -> Optional[str]:
        """첫 매칭 요소의 텍스트 (공백은 원문 그대로)"""
        node = self.css_first(selector)
        if node is None:
            return None
        return node_text(node)


def node_attr(node: Node, *names: str) -> Optional[str]:
    attributes = node.attributes or {}
    for name in names:
        value = attributes.get(name)
        if value and value.strip():
            return value
    return None


def node_text(node: Node) -> Optional[str]:
    try:
        return node.text(deep=True, separator="", strip=False) or None
    except Exception:
        return None


def build_document(html: Optional[str]) -> ParsedDocument:
    """HTML 문자열로 ParsedDocument 생성 (실패 시 빈 문서)"""
    try:
        return ParsedDocument(HTMLParser(html or ""))
    except Exception as e:
        logger.warning(f"[DOC] Failed to parse HTML, using empty tree: {type(e).__name__}: {e}")
        return ParsedDocument(HTMLParser(""))


@dataclass(frozen=True)
class ProbeContext:
    """프로브에 넘기는 요청 단위 컨텍스트

    Attributes:
        html: 원문 HTML (정규식 프로브용)
        base_url: 리다이렉트 이후 최종 URL (상대 URL 해석 기준)
        host: 소문자 호스트명 (사이트 규칙 선택용)
    """

    html: str
    base_url: str
    host: str
