"""
Catalogue — products and the code lookup table.

    from acme import catalogue as K

    red = K.Product("R01", "Red Widget", Money(3295))
    catalogue = K.Catalogue([red])
"""

from __future__ import annotations

from acme.catalogue._types import Product
from acme.catalogue._catalogue import Catalogue

__all__ = (
    "Product",
    "Catalogue",
)
