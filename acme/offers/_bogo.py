"""
Buy one, get one at a discount.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal

from acme.money import Money, Scalar
from acme.catalogue import Product


@dataclass(frozen=True, slots=True)
class BuyOneGetOneHalfPrice:
    """
    Every second unit of `product_code` is discounted by `rate`.

    The per-item discount is rounded to the cent once and then multiplied
    by the number of pairs, so $32.95 at 0.5 gives $16.48 per pair. An odd
    unit left over gets no discount. `rate` is not range-checked.
    """

    product_code: str
    rate: Scalar = Decimal("0.5")

    @property
    def name(self) -> str:
        return f"BOGO {self.product_code} @ {self.rate}"

    def apply(self, items: Sequence[Product]) -> Money:
        matching = [item for item in items if item.code == self.product_code]
        pairs = len(matching) // 2
        if pairs == 0:
            return Money.zero()

        discount_per_item = matching[0].price * self.rate
        return discount_per_item * pairs


__all__ = ("BuyOneGetOneHalfPrice",)
