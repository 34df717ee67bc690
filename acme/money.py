"""
Money — exact fixed-point currency amounts.

Amounts are integer minor units (cents). Anything that can produce a
fractional cent goes through Decimal and rounds half away from zero.

    from acme.money import Money

    price = Money.from_decimal("32.95")   # Ok(Money(3295))
    half = Money(3295) * 0.5              # Money(1648)
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, getcontext, localcontext
from enum import Enum

from acme._types import Result, Ok, Error, PricingError, PricingErrorKind

type Scalar = int | float | Decimal

_CENTS_PER_UNIT = 100
_WHOLE = Decimal(1)


# ═══════════════════════════════════════════════════════════════════════════════
# Ordering
# ═══════════════════════════════════════════════════════════════════════════════


class Ordering(Enum):
    """Outcome of Money.compare."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


# ═══════════════════════════════════════════════════════════════════════════════
# Decimal Helpers
# ═══════════════════════════════════════════════════════════════════════════════


def _to_decimal(value: Scalar | str) -> Decimal:
    """Exact decimal for a scalar. Floats go through their shortest repr."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise TypeError("bool is not a monetary scalar")
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, (float, str)):
        return Decimal(str(value).strip())
    raise TypeError(f"unsupported scalar type: {type(value).__name__}")


def _precision(*operands: Decimal) -> int:
    """Significant digits that hold any product or quotient of the operands."""
    digits = 0
    for operand in operands:
        _, coefficient, exponent = operand.as_tuple()
        digits += len(coefficient) + abs(exponent)
    return max(getcontext().prec, digits + 4)


def _round_cents(value: Decimal) -> int:
    # ROUND_HALF_UP rounds ties away from zero on the magnitude: 1647.5 -> 1648,
    # -1647.5 -> -1648.
    return int(value.quantize(_WHOLE, rounding=ROUND_HALF_UP))


def _multiply_cents(a: Decimal, b: Decimal) -> int:
    with localcontext() as ctx:
        ctx.prec = _precision(a, b)
        return _round_cents(a * b)


def _divide_cents(a: Decimal, b: Decimal) -> int:
    with localcontext() as ctx:
        ctx.prec = _precision(a, b)
        return _round_cents(a / b)


# ═══════════════════════════════════════════════════════════════════════════════
# Money
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True, order=True)
class Money:
    """
    Immutable amount of money in cents.

    Equality, hashing and ordering are all by cents.
    """

    cents: int

    def __post_init__(self) -> None:
        if isinstance(self.cents, bool) or not isinstance(self.cents, int):
            raise TypeError(f"cents must be int, got {type(self.cents).__name__}")

    # ─── Constructors ───────────────────────────────────────────────────────

    @classmethod
    def from_decimal(cls, amount: str | Scalar) -> Result[Money, PricingError]:
        """
        Parse a decimal amount ("32.95", 32.95, Decimal("32.95")).

        Rounds to the nearest cent. Malformed or non-finite input is an
        INVALID_AMOUNT error.
        """
        try:
            value = _to_decimal(amount)
            if not value.is_finite():
                return Error(
                    PricingError(
                        PricingErrorKind.INVALID_AMOUNT,
                        f"Amount is not finite: {amount!r}",
                    )
                )
            return Ok(cls(_multiply_cents(value, Decimal(_CENTS_PER_UNIT))))
        except (InvalidOperation, TypeError, ValueError):
            return Error(
                PricingError(
                    PricingErrorKind.INVALID_AMOUNT,
                    f"Invalid amount: {amount!r}",
                )
            )

    @classmethod
    def zero(cls) -> Money:
        return _ZERO

    # ─── Arithmetic ─────────────────────────────────────────────────────────

    def add(self, other: Money) -> Money:
        return Money(self.cents + other.cents)

    def subtract(self, other: Money) -> Money:
        return Money(self.cents - other.cents)

    def multiply(self, scalar: Scalar) -> Money:
        """Multiply by a finite scalar, rounding to the nearest cent."""
        factor = _to_decimal(scalar)
        if not factor.is_finite():
            raise ValueError(f"scalar is not finite: {scalar!r}")
        return Money(_multiply_cents(Decimal(self.cents), factor))

    def divide(self, scalar: Scalar) -> Result[Money, PricingError]:
        """Divide by a finite scalar, rounding to the nearest cent."""
        divisor = _to_decimal(scalar)
        if not divisor.is_finite():
            return Error(
                PricingError(
                    PricingErrorKind.INVALID_AMOUNT,
                    f"Divisor is not finite: {scalar!r}",
                )
            )
        if divisor == 0:
            return Error(
                PricingError(
                    PricingErrorKind.DIVISION_BY_ZERO,
                    f"Cannot divide {self.format()} by zero",
                )
            )
        return Ok(Money(_divide_cents(Decimal(self.cents), divisor)))

    def __add__(self, other: object) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: object) -> Money:
        if isinstance(other, bool) or not isinstance(other, (int, float, Decimal)):
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __neg__(self) -> Money:
        return Money(-self.cents)

    # ─── Comparison ─────────────────────────────────────────────────────────

    def compare(self, other: Money) -> Ordering:
        if self.cents < other.cents:
            return Ordering.LESS
        if self.cents > other.cents:
            return Ordering.GREATER
        return Ordering.EQUAL

    @property
    def is_negative(self) -> bool:
        return self.cents < 0

    # ─── Formatting ─────────────────────────────────────────────────────────

    def format(self) -> str:
        """Render as $D.CC, or -$D.CC for negative amounts."""
        sign = "-" if self.cents < 0 else ""
        units, cents = divmod(abs(self.cents), _CENTS_PER_UNIT)
        return f"{sign}${units}.{cents:02d}"

    def __str__(self) -> str:
        return self.format()


_ZERO = Money(0)


def sum_money(amounts: Iterable[Money]) -> Money:
    """Sum amounts, Money.zero() for an empty iterable."""
    total = Money.zero()
    for amount in amounts:
        total = total + amount
    return total


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("Money", "Ordering", "Scalar", "sum_money")
