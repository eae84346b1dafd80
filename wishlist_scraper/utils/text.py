"""텍스트 정리 헬퍼."""

from __future__ import annotations

import re
from typing import Optional


def clean_text(text: Optional[str]) -> Optional[str]:
    """연속 공백(줄바꿈 포함)을 공백 하나로 접고 양끝을 자릅니다.

    빈 결과는 None으로 돌려 "값 없음"과 구분하지 않습니다.
    """
    if not text:
        return None
    cleaned = re.sub(r"\s+", " ", text).strip()
    return cleaned or None
