"""FastAPI 앱 팩토리"""
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager

from wishlist_scraper.core.config import settings
from wishlist_scraper.core.logging import logger
from wishlist_scraper.api import health_router, scrape_router
from wishlist_scraper.schemas.scrape_schema import ErrorResponse


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기"""
    logger.info(f"Starting application (render fallback: {'on' if settings.render_enabled else 'off'})")
    yield
    logger.info("Shutting down application...")


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """본문 누락/형식 오류는 422가 아니라 400 + {error}"""
    logger.warning(f"[API] Request validation failed: {request.url.path}")
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(error="Missing or invalid URL").model_dump(),
    )


def create_app() -> FastAPI:
    """
    FastAPI 앱 생성 (Factory Pattern)

    Returns:
        FastAPI 앱 인스턴스
    """
    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
        lifespan=lifespan
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # 라우터 등록
    app.include_router(health_router)
    app.include_router(scrape_router)

    return app

# 앱 인스턴스 생성 (uvicorn이 로드할 수 있도록)
app = create_app()
