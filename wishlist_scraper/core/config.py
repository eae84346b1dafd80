"""설정 관리 - 환경 변수 로드 및 검증"""
from pydantic_settings import BaseSettings
from pydantic import field_validator


class Settings(BaseSettings):
    """애플리케이션 설정"""

    # 직접(Direct) 요청
    scraper_user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    )
    scraper_accept_language: str = "en-US,en;q=0.9"
    scraper_http_impersonate: str = "chrome120"

    # 2단계(Direct → Rendering service) 타임아웃
    # - scraper_direct_timeout_s: 직접 요청 한 번의 상한
    # - scraper_render_timeout_s: 렌더링 서비스 요청 한 번의 상한
    scraper_direct_timeout_s: float = 5.0
    scraper_render_timeout_s: float = 10.0

    # 이보다 짧은 본문은 봇 차단/빈 셸 페이지로 간주
    scraper_min_html_length: int = 500

    # 렌더링 서비스 (ScraperAPI 호환). 키가 비어 있으면 렌더링 단계 비활성화
    scraper_api_key: str = ""
    scraper_api_url: str = "https://api.scraperapi.com/"

    # Best Buy 가격 후보 하한 (월 할부/플랜 금액 등 소액 오탐 배제)
    bestbuy_price_floor: float = 10.0

    # API
    api_title: str = "위시리스트 상품 스크래퍼"
    api_version: str = "1.0.0"
    api_description: str = "상품 URL에서 제목/설명/이미지/가격을 추출합니다."

    # 로깅
    log_level: str = "INFO"

    @field_validator("scraper_direct_timeout_s", "scraper_render_timeout_s")
    @classmethod
    def validate_timeouts(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("scraper timeouts must be positive")
        return v

    @field_validator("scraper_min_html_length")
    @classmethod
    def validate_min_html_length(cls, v: int) -> int:
        if v < 0:
            raise ValueError("scraper_min_html_length must be >= 0")
        return v

    @field_validator("bestbuy_price_floor")
    @classmethod
    def validate_price_floor(cls, v: float) -> float:
        if v < 0:
            raise ValueError("bestbuy_price_floor must be >= 0")
        return v

    @property
    def render_enabled(self) -> bool:
        return bool(self.scraper_api_key.strip())

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
