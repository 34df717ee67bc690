"""
Delivery — tiered delivery charges.

    from acme import delivery as D

    rules = D.delivery().below(Money(5000), Money(495)).otherwise(Money.zero()).build()
"""

from __future__ import annotations

from acme.delivery._types import Tier
from acme.delivery._rules import DeliveryRules
from acme.delivery._builder import DeliveryBuilder, delivery

__all__ = (
    "Tier",
    "DeliveryRules",
    "DeliveryBuilder",
    "delivery",
)
