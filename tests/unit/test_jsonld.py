"""JSON-LD 가격 탐색 테스트"""

from wishlist_scraper.extractors.jsonld import find_price, iter_jsonld_blocks, jsonld_price


def _ld(payload: str) -> str:
    return f'<script type="application/ld+json">{payload}</script>'


class TestFindPrice:
    """파싱된 JSON 값에서 가격 경로 탐색"""

    def test_offers_price(self):
        assert find_price({"@type": "Product", "offers": {"price": "19.99"}}) == 19.99

    def test_offers_low_price(self):
        assert find_price({"offers": {"@type": "AggregateOffer", "lowPrice": 12, "highPrice": 30}}) == 12.0

    def test_offers_array_skips_invalid_entries(self):
        data = {"offers": [{"price": "0"}, {"price": "24.50"}]}
        assert find_price(data) == 24.5

    def test_price_specification(self):
        assert find_price({"offers": {"priceSpecification": {"price": "8.25"}}}) == 8.25

    def test_top_level_price(self):
        assert find_price({"price": 5}) == 5.0

    def test_graph_container(self):
        data = {
            "@context": "https://schema.org",
            "@graph": [
                {"@type": "BreadcrumbList", "itemListElement": [{"name": "Home"}]},
                {"@type": "Product", "offers": {"price": "64.00"}},
            ],
        }
        assert find_price(data) == 64.0

    def test_top_level_list(self):
        assert find_price([{"@type": "Organization"}, {"offers": {"price": "3.10"}}]) == 3.1

    def test_no_price(self):
        assert find_price({"@type": "Organization", "name": "Shop"}) is None
        assert find_price("not an object") is None


class TestJsonLdProbe:
    def test_basic_block(self, parse_html):
        doc, ctx = parse_html(_ld('{"offers":{"price":"19.99"}}'))
        assert jsonld_price(doc, ctx) == 19.99

    def test_malformed_block_is_skipped(self, parse_html):
        doc, ctx = parse_html(_ld('{"offers": {"price": ') + _ld('{"offers":{"price":"42.00"}}'))
        assert jsonld_price(doc, ctx) == 42.0

    def test_comment_wrapped_block(self, parse_html):
        doc, ctx = parse_html(_ld('<!-- {"offers":{"price":"7.77"}} -->'))
        assert jsonld_price(doc, ctx) == 7.77

    def test_first_block_with_price_wins(self, parse_html):
        doc, ctx = parse_html(
            _ld('{"@type":"WebSite","name":"x"}')
            + _ld('{"offers":{"price":"10.00"}}')
            + _ld('{"offers":{"price":"99.00"}}')
        )
        assert jsonld_price(doc, ctx) == 10.0

    def test_blocks_in_document_order(self, parse_html):
        doc, _ = parse_html(_ld('{"a":1}') + "<script>var x = 1;</script>" + _ld('[{"b":2}]'))
        assert list(iter_jsonld_blocks(doc)) == [{"a": 1}, [{"b": 2}]]
