"""URL 검증 테스트"""
import pytest

from wishlist_scraper.core.exceptions import InvalidRequestException
from wishlist_scraper.core.security import SecurityValidator


class TestValidateUrl:
    """네트워크 호출 전 URL 검증"""

    def test_accepts_https(self):
        assert SecurityValidator.validate_url("https://www.amazon.com/dp/B0TEST") == "https://www.amazon.com/dp/B0TEST"

    def test_accepts_http_and_strips(self):
        assert SecurityValidator.validate_url("  http://example.com/item  ") == "http://example.com/item"

    @pytest.mark.parametrize(
        "url",
        [
            None,
            "",
            "   ",
            123,
            ["https://example.com"],
            "ftp://example.com/file",
            "javascript:alert(1)",
            "file:///etc/passwd",
            "example.com/item",
            "not a url",
            "http://",
            "https://example.com:notaport/x",
        ],
    )
    def test_rejects_invalid(self, url):
        with pytest.raises(InvalidRequestException) as exc_info:
            SecurityValidator.validate_url(url)
        assert exc_info.value.status_code == 400
        assert exc_info.value.error_code == "INVALID_REQUEST"

    def test_rejects_overlong_url(self):
        url = "https://example.com/" + "a" * SecurityValidator.MAX_URL_LENGTH
        with pytest.raises(InvalidRequestException):
            SecurityValidator.validate_url(url)

    def test_scheme_is_case_insensitive(self):
        assert SecurityValidator.validate_url("HTTPS://example.com/x") == "HTTPS://example.com/x"
