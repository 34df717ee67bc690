"""
Delivery builder — fluent API.
"""

from __future__ import annotations

from dataclasses import dataclass

from acme._types import Result, Ok, Error, PricingError, PricingErrorKind
from acme.money import Money
from acme.delivery._types import Tier
from acme.delivery._rules import DeliveryRules

# ═══════════════════════════════════════════════════════════════════════════════
# Delivery Builder
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(slots=True, frozen=True)
class DeliveryBuilder:
    """
    Fluent delivery schedule builder.

    Every step returns a new builder. build() checks that the schedule
    ends in exactly one catch-all tier.

    Example:
        rules = (
            D.delivery()
            .below(Money(5000), Money(495))
            .below(Money(9000), Money(295))
            .otherwise(Money.zero())
            .build()
        )
    """

    _tiers: tuple[Tier, ...]

    def below(self, threshold: Money, charge: Money) -> DeliveryBuilder:
        """Charge `charge` for subtotals strictly below `threshold`."""
        return DeliveryBuilder(_tiers=(*self._tiers, Tier(charge, threshold)))

    def otherwise(self, charge: Money) -> DeliveryBuilder:
        """Catch-all charge for everything the earlier tiers did not match."""
        return DeliveryBuilder(_tiers=(*self._tiers, Tier(charge)))

    def build(self) -> Result[DeliveryRules, PricingError]:
        """Build the schedule, validating the catch-all invariant."""
        if not self._tiers or not self._tiers[-1].is_catch_all:
            return Error(
                PricingError(
                    PricingErrorKind.INVALID_CONFIG,
                    "Delivery schedule must end with a catch-all tier",
                )
            )
        if any(t.is_catch_all for t in self._tiers[:-1]):
            return Error(
                PricingError(
                    PricingErrorKind.INVALID_CONFIG,
                    "Only the last delivery tier may be a catch-all",
                )
            )
        return Ok(DeliveryRules(self._tiers))


# ═══════════════════════════════════════════════════════════════════════════════
# delivery() — Entry Point
# ═══════════════════════════════════════════════════════════════════════════════


def delivery() -> DeliveryBuilder:
    """Start an empty delivery schedule: delivery().below(...).otherwise(...)"""
    return DeliveryBuilder(_tiers=())


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("DeliveryBuilder", "delivery")
