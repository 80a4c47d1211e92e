"""Conversion between decimal currency amounts and integer cents"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Union

from payplan_gateway.domain.exceptions import ValidationError

CENT = Decimal("0.01")

Amount = Union[Decimal, int, str]


def round_half_up_cents(value: Decimal) -> int:
    """Round a (possibly fractional) number of cents to whole cents, half-up"""
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def to_cents(value: Amount, field: str = "amount") -> int:
    """
    Convert a currency amount to integer cents (round-half-up at 2 places).

    Floats are converted through str() so 0.1 becomes Decimal("0.1") rather
    than its binary approximation.

    Example:
        to_cents("8750.005") -> 875001

    Raises:
        ValidationError: Value is not a finite amount representable in cents
    """
    if isinstance(value, float):
        value = str(value)
    try:
        return round_half_up_cents(Decimal(value) * 100)
    except (InvalidOperation, ValueError, OverflowError) as e:
        raise ValidationError(field, "Amount is not a valid currency value") from e


def from_cents(cents: int) -> Decimal:
    """Convert integer cents to a Decimal with exactly two fraction digits"""
    return (Decimal(cents) / 100).quantize(CENT)
