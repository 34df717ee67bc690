"""
Offer types.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from acme.money import Money
from acme.catalogue import Product

# ═══════════════════════════════════════════════════════════════════════════════
# Offer Protocol — Users Implement This
# ═══════════════════════════════════════════════════════════════════════════════


class Offer(Protocol):
    """
    Promotional offer protocol.

    An offer is a pure function of the basket items: it keeps no basket
    state and returns the same discount for the same items. Only apply()
    is required; a `name` attribute, when present, is used in logs.

    Example:
        @dataclass(frozen=True, slots=True)
        class FlatOff:
            product_code: str
            amount: Money

            def apply(self, items: Sequence[Product]) -> Money:
                hits = sum(1 for i in items if i.code == self.product_code)
                return self.amount * hits
    """

    def apply(self, items: Sequence[Product]) -> Money:
        """Discount for these items. Money.zero() when nothing qualifies."""
        ...


def offer_name(offer: Offer) -> str:
    """Offer's `name` if it has one, else its class name."""
    return str(getattr(offer, "name", type(offer).__name__))


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("Offer", "offer_name")
