"""
Core types for acme.

Re-exports from kungfu + the pricing error taxonomy.
"""

from __future__ import annotations

from enum import Enum, auto

# Re-export from kungfu
from kungfu import Result, Ok, Error

# ═══════════════════════════════════════════════════════════════════════════════
# Error Taxonomy
# ═══════════════════════════════════════════════════════════════════════════════


class PricingErrorKind(Enum):
    """Kinds of pricing errors."""

    INVALID_AMOUNT = auto()  # Money parsing got a malformed decimal
    DIVISION_BY_ZERO = auto()  # Money divided by a zero scalar
    UNKNOWN_PRODUCT = auto()  # Code not present in the catalogue
    INVALID_CONFIG = auto()  # Product or delivery schedule misconfigured
    INVALID_PRICE = auto()  # Product price is not Money


class PricingError(Exception):
    """
    Pricing operation error.

    Returned inside Error(...) by fallible operations, raised only where a
    constructor cannot return a Result (dataclass __post_init__).
    """

    def __init__(self, kind: PricingErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __repr__(self) -> str:
        return f"PricingError({self.kind.name}, {self.message!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PricingError):
            return NotImplemented
        return self.kind == other.kind and self.message == other.message

    def __hash__(self) -> int:
        return hash((self.kind, self.message))


type PricingResult[T] = Result[T, PricingError]
"""Result of a fallible pricing operation."""

# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    # Re-exports from kungfu
    "Result",
    "Ok",
    "Error",
    # Errors
    "PricingErrorKind",
    "PricingError",
    "PricingResult",
)
