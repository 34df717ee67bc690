"""
Catalogue types — the product value object.
"""

from __future__ import annotations

from dataclasses import dataclass

from acme._types import Result, Ok, Error, PricingError, PricingErrorKind
from acme.money import Money

# ═══════════════════════════════════════════════════════════════════════════════
# Product — Immutable Value Object
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Product:
    """
    A product on sale.

    Two products are equal iff code, name and price are all equal.
    Construction raises PricingError (INVALID_CONFIG / INVALID_PRICE);
    use Product.create() to get a Result instead.
    """

    code: str
    name: str
    price: Money

    def __post_init__(self) -> None:
        if not isinstance(self.code, str) or not self.code:
            raise PricingError(
                PricingErrorKind.INVALID_CONFIG,
                "Product code must be a non-empty string",
            )
        if not isinstance(self.price, Money):
            raise PricingError(
                PricingErrorKind.INVALID_PRICE,
                f"Product {self.code} price must be Money, "
                f"got {type(self.price).__name__}",
            )

    @classmethod
    def create(cls, code: str, name: str, price: Money) -> Result[Product, PricingError]:
        """Validating constructor that reports failure as Error."""
        try:
            return Ok(cls(code, name, price))
        except PricingError as e:
            return Error(e)


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("Product",)
