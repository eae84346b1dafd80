"""Field extractors - 제목/설명/이미지/가격 폴백 체인.

공개 API는 이 파일에서만 export합니다.
"""

from .document import ParsedDocument, ProbeContext, build_document
from .chain import run_chain
from .text_fields import extract_title, extract_description
from .sites import SiteRules, select_rules

__all__ = [
    "ParsedDocument",
    "ProbeContext",
    "build_document",
    "run_chain",
    "extract_title",
    "extract_description",
    "SiteRules",
    "select_rules",
]
