"""HTTP 클라이언트 (curl_cffi)

- 요청마다 짧게 쓰고 닫는 AsyncSession을 엽니다.
- 세션 쿠키 저장소는 호출 하나에만 살아 있으므로, 한 사용자의 응답에서 받은
  Set-Cookie가 다른 사용자의 요청에 실려 나가지 않습니다.
- 프로세스 단위로 공유하는 것은 읽기 전용 설정(헤더, 지문)뿐입니다.
"""

from __future__ import annotations

from typing import Optional, Dict, Any

from curl_cffi.requests import AsyncSession

from wishlist_scraper.core.config import settings
from wishlist_scraper.core.logging import logger


class HttpClient:
    def __init__(self, impersonate: Optional[str] = None) -> None:
        self.impersonate = impersonate or settings.scraper_http_impersonate

    def default_headers(self) -> Dict[str, str]:
        return {
            "User-Agent": settings.scraper_user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,*/*;q=0.8",
            "Accept-Language": settings.scraper_accept_language,
        }

    async def get_text(
        self,
        url: str,
        *,
        timeout_s: float,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        follow_redirects: bool = True,
    ) -> Optional[tuple[int, str, str]]:
        """GET 후 (status, body, 최종 URL) 반환. 네트워크 오류는 None"""
        try:
            async with AsyncSession(
                impersonate=self.impersonate,
                headers=self.default_headers(),
                trust_env=False,
            ) as sess:
                resp = await sess.get(
                    url,
                    params=params,
                    headers=headers,
                    timeout=timeout_s,
                    allow_redirects=follow_redirects,
                )
                status = getattr(resp, "status_code", 0) or 0
                text = getattr(resp, "text", "") or ""
                final_url = str(getattr(resp, "url", "") or url)
                return status, text, final_url
        except Exception as e:
            logger.info(f"[HTTP_CLIENT] GET failed: {type(e).__name__}: {repr(e)}")
            return None


_http_client = HttpClient()


def get_http_client() -> HttpClient:
    return _http_client
