"""상품 메타데이터 스크래퍼 (위시리스트 초안 입력용)"""

__version__ = "1.0.0"
