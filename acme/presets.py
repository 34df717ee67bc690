"""
Presets — the Acme Widget Co reference shop.

Three widgets, a three-step delivery schedule and buy-one-get-one-half-price
on red widgets.
"""

from __future__ import annotations

from acme._types import Ok, Error
from acme.money import Money
from acme.catalogue import Catalogue, Product
from acme.delivery import DeliveryRules, delivery
from acme.offers import BuyOneGetOneHalfPrice, Offer
from acme.basket import Basket

RED_WIDGET = "R01"
GREEN_WIDGET = "G01"
BLUE_WIDGET = "B01"


def acme_products() -> tuple[Product, ...]:
    return (
        Product(RED_WIDGET, "Red Widget", Money(3295)),
        Product(GREEN_WIDGET, "Green Widget", Money(2495)),
        Product(BLUE_WIDGET, "Blue Widget", Money(795)),
    )


def acme_catalogue() -> Catalogue:
    return Catalogue(acme_products())


def acme_delivery_rules() -> DeliveryRules:
    """Under $50: $4.95. Under $90: $2.95. Otherwise free."""
    result = (
        delivery()
        .below(Money(5000), Money(495))
        .below(Money(9000), Money(295))
        .otherwise(Money.zero())
        .build()
    )
    match result:
        case Ok(rules):
            return rules
        case Error(e):
            raise e


def acme_offers() -> tuple[Offer, ...]:
    return (BuyOneGetOneHalfPrice(RED_WIDGET),)


def acme_basket() -> Basket:
    """Fresh empty basket wired to the reference shop."""
    return Basket(acme_catalogue(), acme_delivery_rules(), acme_offers())


__all__ = (
    "RED_WIDGET",
    "GREEN_WIDGET",
    "BLUE_WIDGET",
    "acme_products",
    "acme_catalogue",
    "acme_delivery_rules",
    "acme_offers",
    "acme_basket",
)
