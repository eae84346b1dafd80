"""범용 이미지 체인 테스트"""

from wishlist_scraper.extractors.image import accept_image, first_large_img
from wishlist_scraper.extractors.sites import GENERIC_RULES


class TestGenericImageChain:
    """og/twitter 메타 → link[rel=image_src] → 충분히 큰 첫 <img>"""

    def test_og_image_resolved_against_base(self, parse_html):
        doc, ctx = parse_html(
            '<meta property="og:image" content="/media/shoe.jpg">',
            url="https://shop.example.com/p/1",
        )
        assert GENERIC_RULES.resolve_image(doc, ctx) == "https://shop.example.com/media/shoe.jpg"

    def test_protocol_relative_og_image(self, parse_html):
        doc, ctx = parse_html('<meta property="og:image" content="//cdn.example.com/a.jpg">')
        assert GENERIC_RULES.resolve_image(doc, ctx) == "https://cdn.example.com/a.jpg"

    def test_tracking_pixel_skipped_for_twitter_image(self, parse_html):
        doc, ctx = parse_html(
            '<meta property="og:image" content="https://www.facebook.com/tr?id=1">'
            '<meta name="twitter:image" content="https://cdn.example.com/real.jpg">'
        )
        assert GENERIC_RULES.resolve_image(doc, ctx) == "https://cdn.example.com/real.jpg"

    def test_link_image_src(self, parse_html):
        doc, ctx = parse_html('<link rel="image_src" href="/thumb/1.png">')
        assert GENERIC_RULES.resolve_image(doc, ctx) == "https://shop.example.com/thumb/1.png"

    def test_first_large_img_skips_small_and_pixels(self, parse_html):
        doc, ctx = parse_html(
            """
            <img src="/icons/cart.png" width="16" height="16">
            <img src="https://ads.example.com/pixel.gif">
            <img src="/img/product-main.jpg" width="600">
            <img src="/img/product-alt.jpg">
            """
        )
        assert GENERIC_RULES.resolve_image(doc, ctx) == "https://shop.example.com/img/product-main.jpg"

    def test_lazy_loaded_img_uses_data_src(self, parse_html):
        doc, ctx = parse_html(
            '<img src="data:image/gif;base64,R0lGODlhAQABAAAAACw=" data-src="/img/lazy.jpg">'
        )
        assert first_large_img(doc, ctx) == "https://shop.example.com/img/lazy.jpg"

    def test_no_candidates(self, parse_html):
        doc, ctx = parse_html("<p>text only</p>")
        assert GENERIC_RULES.resolve_image(doc, ctx) is None


class TestAcceptImage:
    def test_data_uri_rejected(self, parse_html):
        _, ctx = parse_html("")
        assert accept_image("data:image/png;base64,AAAA", ctx) is None

    def test_relative_resolved(self, parse_html):
        _, ctx = parse_html("", url="https://site.com/p")
        assert accept_image("/a.jpg", ctx) == "https://site.com/a.jpg"
