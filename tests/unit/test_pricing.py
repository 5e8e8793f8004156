"""
Unit tests for currency parsing and discount amounts.
"""
import pytest

from shopassist.domain.errors import PriceParseError
from shopassist.domain.services.pricing import discount_amount, parse_price


class TestParsePrice:

    @pytest.mark.parametrize("text,expected", [
        ("$29.00", 29.0),
        ("₹999", 999.0),
        ("$1,299.99", 1299.99),
        ("  $ 5 ", 5.0),
        ("12", 12.0),
    ])
    def test_parses_currency_strings(self, text, expected):
        assert parse_price(text) == pytest.approx(expected)

    @pytest.mark.parametrize("text", ["", "free", "$", ".", "1.2.3", None])
    def test_rejects_non_numeric(self, text):
        with pytest.raises(PriceParseError):
            parse_price(text)

    def test_parse_error_is_a_value_error(self):
        assert issubclass(PriceParseError, ValueError)


class TestDiscountAmount:

    def test_positive_discount(self, make_product):
        p = make_product(price="$35.00", final_price="$29.99")
        assert discount_amount(p) == pytest.approx(5.01)

    def test_no_discount_when_equal(self, make_product):
        assert discount_amount(make_product(price="$10", final_price="$10")) is None

    def test_final_above_price_is_not_a_discount(self, make_product):
        assert discount_amount(make_product(price="$10", final_price="$12")) is None

    def test_unparseable_prices_are_skipped(self, make_product):
        assert discount_amount(make_product(price="call us", final_price="$5")) is None
        assert discount_amount(make_product(price="$5", final_price="n/a")) is None

    def test_missing_final_price_defaults_to_price(self, make_product):
        p = make_product(final_price=None)
        assert p.final_price == p.price
        assert discount_amount(p) is None
