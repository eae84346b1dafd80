"""Price normalization helpers."""

from __future__ import annotations

import math
import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Optional

_TWO_PLACES = Decimal("0.01")

# 숫자 바로 앞의 마이너스 부호 (통화 기호가 끼어 있어도 인정: "-$5", "$-5")
_NEGATIVE_PREFIX = re.compile(r"-\s*[$€£¥]?\s*$")


def normalize_price(value: Any) -> Optional[float]:
    """가격 텍스트(또는 숫자)를 소수 둘째 자리 float로 정규화.

    규칙:
    - 숫자/``.``/``,`` 이외 문자는 제거
    - 쉼표만 있고 점이 없으면 쉼표를 소수점으로 취급 ("29,99" → 29.99)
    - 그 외에는 쉼표를 천 단위 구분자로 보고 제거 ("$1,299.99" → 1299.99)
    - 유한하지 않거나 0 이하면 None (오류가 아니라 "값 없음")

    Examples:
        >>> normalize_price("$1,299.99")
        1299.99
        >>> normalize_price("1299,99")
        1299.99
        >>> normalize_price("-5") is None
        True
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        # 지수 표기 ("1e-05") 방지
        if isinstance(value, float) and not math.isfinite(value):
            return None
        text = format(Decimal(repr(value)), "f")
    else:
        text = str(value)
    if not text.strip():
        return None

    first_digit = re.search(r"\d", text)
    if not first_digit:
        return None
    if _NEGATIVE_PREFIX.search(text[: first_digit.start()]):
        return None

    cleaned = re.sub(r"[^0-9.,]", "", text)
    if "," in cleaned and "." not in cleaned:
        cleaned = cleaned.replace(",", ".")
    else:
        cleaned = cleaned.replace(",", "")

    try:
        number = float(cleaned)
    except ValueError:
        return None

    if not math.isfinite(number) or number <= 0:
        return None

    try:
        rounded = Decimal(cleaned).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return None

    result = float(rounded)
    # 0.004 같은 값은 반올림 후 0이 되므로 다시 거른다
    return result if result > 0 else None
