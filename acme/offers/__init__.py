"""
Offers — pluggable discount strategies.

    from acme import offers as O

    bogo = O.BuyOneGetOneHalfPrice("R01")
    discount = bogo.apply(items)
"""

from __future__ import annotations

from acme.offers._types import Offer, offer_name
from acme.offers._bogo import BuyOneGetOneHalfPrice

__all__ = (
    "Offer",
    "offer_name",
    "BuyOneGetOneHalfPrice",
)
