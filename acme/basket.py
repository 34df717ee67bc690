"""
Basket — accumulates items and prices the checkout.

    basket = Basket(catalogue, delivery_rules, offers=[O.BuyOneGetOneHalfPrice("R01")])
    basket.add("R01")
    basket.add("R01")
    basket.total()  # Money(5437)

Catalogue, delivery rules and offers are injected; the basket never
mutates them. A basket is not thread-safe: callers sharing one between
threads must serialize add() themselves.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from acme._types import Result, Ok, Error, PricingError
from acme.money import Money, sum_money
from acme.catalogue import Catalogue, Product
from acme.delivery import DeliveryRules
from acme.offers import Offer, offer_name

logger = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════════════════
# Breakdown
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class BasketTotal:
    """Priced basket: every figure that goes into the total."""

    subtotal: Money
    discount: Money
    delivery: Money
    total: Money

    @property
    def discounted_subtotal(self) -> Money:
        return self.subtotal - self.discount


# ═══════════════════════════════════════════════════════════════════════════════
# Basket
# ═══════════════════════════════════════════════════════════════════════════════


class Basket:
    """Shopping basket priced against a catalogue, delivery rules and offers."""

    def __init__(
        self,
        catalogue: Catalogue,
        delivery_rules: DeliveryRules,
        offers: Iterable[Offer] = (),
    ) -> None:
        self._catalogue = catalogue
        self._delivery_rules = delivery_rules
        self._offers = tuple(offers)
        self._items: list[Product] = []

    @property
    def items(self) -> tuple[Product, ...]:
        """Items in the order they were added."""
        return tuple(self._items)

    @property
    def offers(self) -> tuple[Offer, ...]:
        return self._offers

    def add(self, code: str) -> Result[Product, PricingError]:
        """
        Add one unit of `code`.

        An unknown code returns the catalogue's UNKNOWN_PRODUCT error and
        leaves the basket unchanged.
        """
        match self._catalogue.find(code):
            case Ok(product):
                self._items.append(product)
                logger.debug("Basket: added %s (%s)", product.code, product.price)
                return Ok(product)
            case Error(e):
                logger.debug("Basket: rejected %s: %s", code, e.message)
                return Error(e)

    # ─── Pricing ────────────────────────────────────────────────────────────

    def subtotal(self) -> Money:
        return sum_money(item.price for item in self._items)

    def discount(self) -> Money:
        """Sum of every offer's discount, each computed independently."""
        total = Money.zero()
        for offer in self._offers:
            amount = offer.apply(self._items)
            if amount != Money.zero():
                logger.debug("Basket: offer %s applied %s", offer_name(offer), amount)
            total = total + amount
        return total

    def breakdown(self) -> BasketTotal:
        """
        Price the basket.

        The discounted subtotal is not clamped at zero and is the key for
        the delivery tier lookup.
        """
        subtotal = self.subtotal()
        discount = self.discount()
        discounted = subtotal - discount
        delivery = self._delivery_rules.calculate(discounted)
        return BasketTotal(
            subtotal=subtotal,
            discount=discount,
            delivery=delivery,
            total=discounted + delivery,
        )

    def delivery(self) -> Money:
        return self.breakdown().delivery

    def total(self) -> Money:
        return self.breakdown().total

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        codes = ", ".join(item.code for item in self._items)
        return f"Basket([{codes}])"


__all__ = ("Basket", "BasketTotal")
