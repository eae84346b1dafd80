"""Pydantic 스키마 정의"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime


class ScrapeRequest(BaseModel):
    """상품 스크랩 요청

    url 형식/스킴 검증은 SecurityValidator가 담당합니다 (누락도 400으로 응답).
    """
    url: Optional[str] = Field(None, description="상품 페이지 URL (http/https)")


class ScrapeResponse(BaseModel):
    """상품 스크랩 응답 (초안 입력 폼에 그대로 채워짐)"""
    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = Field(None, description="상품명")
    description: Optional[str] = Field(None, description="상품 설명")
    image_url: Optional[str] = Field(None, alias="imageUrl", description="대표 이미지 절대 URL")
    price: Optional[float] = Field(None, gt=0, description="가격 (소수 둘째 자리)")
    source: Optional[str] = Field(None, description="HTML 출처: direct | scraper")


class ErrorResponse(BaseModel):
    """오류 응답"""
    error: str = Field(..., description="오류 메시지")


class HealthResponse(BaseModel):
    """헬스 체크 응답"""
    status: str
    timestamp: datetime
    version: str
    engine_version: str
    render_enabled: bool
