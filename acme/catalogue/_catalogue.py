"""
Catalogue — code → Product lookup, built once.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from types import MappingProxyType

from acme._types import Result, Ok, Error, PricingError, PricingErrorKind
from acme.catalogue._types import Product

logger = logging.getLogger(__name__)


class Catalogue:
    """
    Immutable product lookup table.

    Duplicate codes overwrite earlier entries (last one wins).

    Example:
        catalogue = Catalogue([red_widget, green_widget])

        match catalogue.find("R01"):
            case Ok(product):
                ...
            case Error(e):
                ...
    """

    __slots__ = ("_products",)

    def __init__(self, products: Iterable[Product]) -> None:
        index: dict[str, Product] = {}
        for product in products:
            if product.code in index:
                logger.debug("Catalogue: %s overwritten by later entry", product.code)
            index[product.code] = product
        self._products = MappingProxyType(index)

    @classmethod
    def build(cls, products: Iterable[Product]) -> Catalogue:
        return cls(products)

    def find(self, code: str) -> Result[Product, PricingError]:
        """Look up a product. Unknown codes are UNKNOWN_PRODUCT errors."""
        product = self._products.get(code)
        if product is None:
            return Error(
                PricingError(
                    PricingErrorKind.UNKNOWN_PRODUCT,
                    f"Unknown product code: {code}",
                )
            )
        return Ok(product)

    def all(self) -> tuple[Product, ...]:
        return tuple(self._products.values())

    def exists(self, code: str) -> bool:
        return code in self._products

    def __contains__(self, code: object) -> bool:
        return code in self._products

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products.values())

    def __len__(self) -> int:
        return len(self._products)

    def __repr__(self) -> str:
        return f"Catalogue({', '.join(self._products)})"


__all__ = ("Catalogue",)
