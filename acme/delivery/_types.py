"""
Delivery types.
"""

from __future__ import annotations

from dataclasses import dataclass

from acme.money import Money

# ═══════════════════════════════════════════════════════════════════════════════
# Tier — One Step of the Schedule
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Tier:
    """
    Delivery tier.

    Matches a subtotal strictly below `threshold`; a tier without a
    threshold is a catch-all and matches everything.
    """

    charge: Money
    threshold: Money | None = None

    @property
    def is_catch_all(self) -> bool:
        return self.threshold is None

    def matches(self, subtotal: Money) -> bool:
        return self.threshold is None or subtotal < self.threshold


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("Tier",)
