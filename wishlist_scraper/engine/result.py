"""Extraction Result - Standardized Result Format"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from wishlist_scraper.crawlers.result import FetchSource


@dataclass
class ExtractionResult:
    """추출 결과 표준 포맷

    모든 필드는 독립적으로 None일 수 있습니다.
    - price: 있으면 소수 둘째 자리로 반올림된 양수
    - image_url: 있으면 http(s) 절대 URL

    Attributes:
        title: 상품명
        description: 상품 설명
        image_url: 대표 이미지 URL
        price: 가격
        source: HTML을 공급한 페치 티어
    """

    title: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    price: Optional[float] = None
    source: Optional[FetchSource] = None

    @property
    def is_empty(self) -> bool:
        """모든 필드가 비었는지 (페치는 성공했어도 가능)"""
        return not any((self.title, self.description, self.image_url, self.price))

    def to_dict(self) -> Dict[str, Any]:
        """응답 계약(camelCase) 형태의 딕셔너리"""
        return {
            "title": self.title,
            "description": self.description,
            "imageUrl": self.image_url,
            "price": self.price,
            "source": self.source.value if self.source else None,
        }
