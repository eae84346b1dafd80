"""URL 해석 유틸 테스트"""
import pytest

from wishlist_scraper.utils.url_utils import get_hostname, is_tracking_pixel, resolve_url

BASE = "https://site.com/p"


class TestResolveUrl:
    """상대/프로토콜-상대 URL 해석"""

    def test_protocol_relative_gets_base_scheme(self):
        assert resolve_url("//img.example.com/a.jpg", BASE) == "https://img.example.com/a.jpg"

    def test_protocol_relative_keeps_http_base(self):
        assert resolve_url("//img.example.com/a.jpg", "http://site.com/p") == "http://img.example.com/a.jpg"

    def test_root_relative_gets_base_origin(self):
        assert resolve_url("/a.jpg", BASE) == "https://site.com/a.jpg"

    def test_absolute_passes_through(self):
        url = "https://cdn.other.com/x/y.png?w=600"
        assert resolve_url(url, BASE) == url

    def test_path_relative_joins_against_base(self):
        assert resolve_url("img/a.jpg", "https://site.com/p/item") == "https://site.com/p/img/a.jpg"

    def test_strips_surrounding_whitespace(self):
        assert resolve_url("  /a.jpg \n", BASE) == "https://site.com/a.jpg"

    @pytest.mark.parametrize(
        "candidate",
        [None, "", "   ", "data:image/png;base64,AAAA", "javascript:void(0)", "mailto:a@b.com"],
    )
    def test_non_http_results_are_rejected(self, candidate):
        assert resolve_url(candidate, BASE) is None


class TestGetHostname:
    def test_lowercases(self):
        assert get_hostname("https://www.Amazon.com/dp/B000") == "www.amazon.com"

    def test_drops_port(self):
        assert get_hostname("http://localhost:8000/x") == "localhost"

    @pytest.mark.parametrize("url", ["", "invalid", "/relative/path"])
    def test_missing_host(self, url):
        assert get_hostname(url) == ""


class TestTrackingPixel:
    @pytest.mark.parametrize(
        "url",
        [
            "https://www.facebook.com/tr?id=123&ev=PageView",
            "https://fls-na.amazon.com/1/batch/1/OP/ATVPDKIKX0DER",
            "https://cdn.example.com/img/spacer.gif",
            "https://example.com/Pixel.png",
            "https://t.example.com/pixel?id=42&ev=view",
        ],
    )
    def test_known_beacons(self, url):
        assert is_tracking_pixel(url) is True

    @pytest.mark.parametrize(
        "url",
        [
            "https://lh3.googleusercontent.com/store/pixel-8-pro-obsidian.jpg",
            "https://cdn.example.com/images/google-pixel-9.webp?w=600",
        ],
    )
    def test_product_named_pixel_is_kept(self, url):
        """상품명에 pixel이 들어가도 추적 픽셀이 아님"""
        assert is_tracking_pixel(url) is False

    def test_regular_image(self):
        assert is_tracking_pixel("https://m.media-amazon.com/images/I/71abc.jpg") is False

    def test_empty(self):
        assert is_tracking_pixel("") is False
