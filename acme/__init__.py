"""
acme — basket pricing for Acme Widget Co.

    from acme import catalogue as K   # Products and lookup
    from acme import delivery as D    # Tiered delivery charges
    from acme import offers as O      # Discount strategies
"""

import logging

from acme import catalogue
from acme import delivery
from acme import offers
from acme._types import (
    Result,
    Ok,
    Error,
    PricingError,
    PricingErrorKind,
    PricingResult,
)
from acme.money import Money, Ordering, sum_money
from acme.basket import Basket, BasketTotal

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = (
    "catalogue",
    "delivery",
    "offers",
    "Result",
    "Ok",
    "Error",
    "PricingError",
    "PricingErrorKind",
    "PricingResult",
    "Money",
    "Ordering",
    "sum_money",
    "Basket",
    "BasketTotal",
)
