"""
Tests for Product and Catalogue.
"""

import pytest

from acme import Money, PricingError, PricingErrorKind
from acme.catalogue import Catalogue, Product


class TestProduct:
    def test_equality_is_structural(self):
        assert Product("R01", "Red Widget", Money(3295)) == Product(
            "R01", "Red Widget", Money(3295)
        )
        assert Product("R01", "Red Widget", Money(3295)) != Product(
            "R01", "Red Widget", Money(3296)
        )
        assert Product("R01", "Red Widget", Money(3295)) != Product(
            "R01", "Crimson Widget", Money(3295)
        )

    def test_is_immutable(self, red):
        with pytest.raises(AttributeError):
            red.code = "X01"  # type: ignore[misc]

    @pytest.mark.parametrize("code", ["", None, 42])
    def test_code_must_be_non_empty_string(self, code):
        with pytest.raises(PricingError) as exc_info:
            Product(code, "Nameless", Money(100))  # type: ignore[arg-type]
        assert exc_info.value.kind is PricingErrorKind.INVALID_CONFIG

    def test_price_must_be_money(self):
        with pytest.raises(PricingError) as exc_info:
            Product("R01", "Red Widget", 32.95)  # type: ignore[arg-type]
        assert exc_info.value.kind is PricingErrorKind.INVALID_PRICE

    def test_create_returns_result(self, unwrap_ok, unwrap_err):
        product = unwrap_ok(Product.create("B01", "Blue Widget", Money(795)))
        assert product.code == "B01"

        error = unwrap_err(Product.create("", "Blue Widget", Money(795)))
        assert error.kind is PricingErrorKind.INVALID_CONFIG


class TestCatalogue:
    def test_find(self, catalogue, red, unwrap_ok):
        assert unwrap_ok(catalogue.find("R01")) == red

    def test_find_unknown(self, catalogue, unwrap_err):
        error = unwrap_err(catalogue.find("ZZZ"))
        assert error.kind is PricingErrorKind.UNKNOWN_PRODUCT
        assert "ZZZ" in error.message

    def test_exists(self, catalogue):
        assert catalogue.exists("G01")
        assert not catalogue.exists("ZZZ")
        assert "B01" in catalogue
        assert "ZZZ" not in catalogue

    def test_all(self, catalogue, red, green, blue):
        assert set(catalogue.all()) == {red, green, blue}
        assert len(catalogue) == 3

    def test_duplicate_code_last_wins(self, red, unwrap_ok):
        repriced = Product("R01", "Red Widget", Money(2995))
        catalogue = Catalogue.build([red, repriced])

        assert len(catalogue) == 1
        assert unwrap_ok(catalogue.find("R01")) == repriced

    def test_empty(self, unwrap_err):
        catalogue = Catalogue([])
        assert catalogue.all() == ()
        assert unwrap_err(catalogue.find("R01")).kind is PricingErrorKind.UNKNOWN_PRODUCT

    def test_source_list_changes_do_not_leak(self, red, green):
        products = [red]
        catalogue = Catalogue(products)
        products.append(green)

        assert not catalogue.exists("G01")
