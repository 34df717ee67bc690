"""
Delivery rules — tiered delivery charge lookup.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from acme.money import Money
from acme.delivery._types import Tier

logger = logging.getLogger(__name__)


class DeliveryRules:
    """
    Ordered delivery schedule.

    Tiers are scanned in the order given; the first matching tier wins.
    The schedule should end in a catch-all tier. Without one a large
    subtotal matches nothing and the charge is zero, which is a
    configuration error: it is logged, and delivery().build() rejects it.
    """

    __slots__ = ("_tiers",)

    def __init__(self, tiers: Iterable[Tier]) -> None:
        self._tiers = tuple(tiers)

    @property
    def tiers(self) -> tuple[Tier, ...]:
        return self._tiers

    @property
    def has_catch_all(self) -> bool:
        return bool(self._tiers) and self._tiers[-1].is_catch_all

    def calculate(self, subtotal: Money) -> Money:
        """Delivery charge for a (discounted) subtotal."""
        for index, tier in enumerate(self._tiers):
            if tier.matches(subtotal):
                logger.debug(
                    "Delivery: tier %d matched %s, charge %s", index, subtotal, tier.charge
                )
                return tier.charge
        logger.warning(
            "Delivery: no tier matched %s; schedule has no catch-all tier", subtotal
        )
        return Money.zero()

    def __repr__(self) -> str:
        return f"DeliveryRules({list(self._tiers)!r})"


__all__ = ("DeliveryRules",)
