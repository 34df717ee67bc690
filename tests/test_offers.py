"""
Tests for offers.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal

import pytest

from acme import Money
from acme.catalogue import Product
from acme.offers import BuyOneGetOneHalfPrice, Offer, offer_name


class TestBuyOneGetOneHalfPrice:
    @pytest.mark.parametrize(
        ("count", "discount"),
        [
            (0, Money(0)),
            (1, Money(0)),
            (2, Money(1648)),
            (3, Money(1648)),
            (4, Money(3296)),
            (5, Money(3296)),
        ],
    )
    def test_discount_per_pair(self, red, count, discount):
        offer = BuyOneGetOneHalfPrice("R01")
        assert offer.apply([red] * count) == discount

    def test_rounds_once_per_item_then_multiplies(self, red):
        # 32.95 * 0.5 = 16.475 -> 16.48, three pairs -> 49.44 (not 49.43)
        assert BuyOneGetOneHalfPrice("R01").apply([red] * 6) == Money(4944)

    def test_ignores_other_products(self, red, green, blue):
        offer = BuyOneGetOneHalfPrice("R01")
        assert offer.apply([green, green, blue, blue]) == Money.zero()
        assert offer.apply([blue, red, green, red]) == Money(1648)

    def test_uses_price_of_first_match(self):
        first = Product("R01", "Red Widget", Money(1000))
        later = Product("R01", "Red Widget", Money(3000))
        assert BuyOneGetOneHalfPrice("R01").apply([first, later]) == Money(500)

    @pytest.mark.parametrize(
        ("rate", "discount"),
        [
            (0, Money(0)),
            (0.0, Money(0)),
            (Decimal("1.0"), Money(3295)),
            (0.25, Money(824)),
            (Decimal("-0.5"), Money(-1648)),
            (Decimal("1.5"), Money(4943)),
        ],
    )
    def test_rate_passes_through(self, red, rate, discount):
        assert BuyOneGetOneHalfPrice("R01", rate).apply([red, red]) == discount

    def test_is_pure(self, red):
        offer = BuyOneGetOneHalfPrice("R01")
        items = [red, red, red]

        assert offer.apply(items) == offer.apply(items)
        assert items == [red, red, red]

    def test_name(self):
        assert "R01" in BuyOneGetOneHalfPrice("R01").name


@dataclass(frozen=True, slots=True)
class FlatOff:
    product_code: str
    amount: Money

    @property
    def name(self) -> str:
        return f"{self.amount} off {self.product_code}"

    def apply(self, items: Sequence[Product]) -> Money:
        hits = sum(1 for item in items if item.code == self.product_code)
        return self.amount * hits


def test_custom_offer_satisfies_protocol(green):
    offer: Offer = FlatOff("G01", Money(100))
    assert offer.apply([green, green]) == Money(200)


def test_offer_name_falls_back_to_class_name():
    class Bare:
        def apply(self, items):
            return Money.zero()

    assert offer_name(Bare()) == "Bare"
    assert offer_name(BuyOneGetOneHalfPrice("R01")) == BuyOneGetOneHalfPrice("R01").name
