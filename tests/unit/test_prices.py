"""가격 정규화 테스트"""
import pytest

from wishlist_scraper.utils.prices import normalize_price


class TestNormalizePrice:
    """normalize_price 규칙"""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("$1,299.99", 1299.99),
            ("29,99", 29.99),
            ("1299,99", 1299.99),
            ("USD 45", 45.0),
            (" $ 7.5 ", 7.5),
            ("1,234,567.89", 1234567.89),
        ],
    )
    def test_normalizes_display_strings(self, raw, expected):
        assert normalize_price(raw) == expected

    def test_rounds_half_up_to_two_places(self):
        """소수 셋째 자리 반올림 (HALF_UP)"""
        assert normalize_price("19.995") == 20.0
        assert normalize_price("19.994") == 19.99

    def test_accepts_numbers(self):
        assert normalize_price(19.99) == 19.99
        assert normalize_price(250) == 250.0

    @pytest.mark.parametrize("raw", ["-5", "-$5", "$-12.00", "- 3.50"])
    def test_negative_is_absent(self, raw):
        assert normalize_price(raw) is None

    @pytest.mark.parametrize("raw", [None, "", "   ", "free", "$", "0", "0.00", "0.004"])
    def test_empty_or_non_positive_is_absent(self, raw):
        assert normalize_price(raw) is None

    def test_malformed_number_is_absent(self):
        """점이 여러 개면 숫자로 해석 불가"""
        assert normalize_price("1.2.3") is None

    def test_bool_is_not_a_price(self):
        assert normalize_price(True) is None

    def test_hyphen_between_words_is_not_a_sign(self):
        """숫자 바로 앞이 아닌 하이픈은 음수 부호가 아님"""
        assert normalize_price("Sale - now $12.00") == 12.0
        assert normalize_price("Add-on $12.00") == 12.0

    def test_float_in_exponent_form(self):
        """JSON-LD 숫자 가격이 지수 표기로 바뀌어도 자릿수가 섞이지 않음"""
        assert normalize_price(1e-05) is None
        assert normalize_price(1e16) == 1e16
        assert normalize_price(2.5e3) == 2500.0

    def test_negative_and_non_finite_numbers(self):
        assert normalize_price(-5.0) is None
        assert normalize_price(float("inf")) is None
        assert normalize_price(float("nan")) is None
