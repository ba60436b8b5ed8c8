"""
Money Utilities - Safe Decimal operations for prices.

Avoids float precision issues when summing cart totals.
"""
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Union

# Default precision for money operations (2 decimal places)
MONEY_PRECISION = Decimal("0.01")


def to_decimal(value: Union[str, int, float, Decimal, None]) -> Decimal:
    """
    Convert any value to Decimal safely.

    Args:
        value: Value to convert (str, int, float, Decimal, or None)

    Returns:
        Decimal representation of the value, or Decimal("0") if None/invalid
    """
    if value is None:
        return Decimal("0")

    if isinstance(value, Decimal):
        return value

    try:
        # Floats go through str() so 10.99 stays 10.99
        if isinstance(value, float):
            return Decimal(str(value))
        return Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return Decimal("0")


def round_money(value: Union[str, int, float, Decimal]) -> Decimal:
    """Round a monetary value to cents."""
    return to_decimal(value).quantize(MONEY_PRECISION, rounding=ROUND_HALF_UP)


def multiply(a: Union[str, int, float, Decimal], b: Union[str, int, float, Decimal]) -> Decimal:
    """Multiply two values as Decimals."""
    return to_decimal(a) * to_decimal(b)


def to_float(value: Union[str, int, float, Decimal]) -> float:
    """
    Convert to float for JSON serialization.

    Only use at the boundary; keep Decimal for calculations.
    """
    return float(round_money(value))
