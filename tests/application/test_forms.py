"""Unit tests for form parsing."""

from decimal import Decimal

import pytest

from shopadmin.application import forms
from shopadmin.domain.exceptions import ValidationError


class TestParsePrice:

    def test_decimal_string(self):
        assert forms.parse_price("19.99") == Decimal("19.99")

    def test_number(self):
        assert forms.parse_price(5) == Decimal("5")

    @pytest.mark.parametrize("raw", ["", "   ", "abc", None, "NaN"])
    def test_unparsable_defaults_to_zero(self, raw):
        assert forms.parse_price(raw) == Decimal("0")

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="Price cannot be negative"):
            forms.parse_price("-2")


class TestParseStockLevel:

    def test_integer_string(self):
        assert forms.parse_stock_level(" 12 ") == 12

    def test_decimal_is_truncated(self):
        assert forms.parse_stock_level("3.7") == 3

    @pytest.mark.parametrize("raw", ["", "twelve", None])
    def test_unparsable_defaults_to_zero(self, raw):
        assert forms.parse_stock_level(raw) == 0

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="Stock level cannot be negative"):
            forms.parse_stock_level("-1")


class TestForms:

    def test_product_form(self):
        form = forms.product_form("Tea", "4.5", "x", "Green tea", image="  ")
        assert form.price == Decimal("4.5")
        assert form.stock_level == 0
        assert form.image is None

    def test_shop_form_passes_logo_reference_through(self):
        form = forms.shop_form("A", "B", logo=" https://cdn.example/logo.png ")
        assert form.logo == "https://cdn.example/logo.png"

    def test_omitted_numbers_stay_unset(self):
        form = forms.product_form("Tea", None, None, "Green tea")
        assert form.price is None
        assert form.stock_level is None
