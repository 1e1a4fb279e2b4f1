"""
Amount Handling Module

Single-currency amount helpers. Every balance and amount is a Decimal;
floats are converted through their string form so 0.1 stays 0.1.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, getcontext
from typing import Union
import re

getcontext().prec = 28

AmountLike = Union[Decimal, int, float, str]

ZERO = Decimal('0')


def decimal_from_string(value: str) -> Decimal:
    """
    Safely convert string to Decimal, handling common formats

    Args:
        value: String representation of number, may carry a currency symbol

    Returns:
        Decimal value

    Raises:
        ValueError: If string cannot be converted to valid Decimal
    """
    if not value or not isinstance(value, str):
        raise ValueError("Value must be a non-empty string")

    # Strip currency symbols and whitespace
    clean_value = re.sub(r'[^\d.,\-+]', '', value.strip())

    if ',' in clean_value and '.' in clean_value:
        # Comma is a thousands separator
        clean_value = clean_value.replace(',', '')
    elif ',' in clean_value and clean_value.count(',') == 1:
        whole, fraction = clean_value.split(',')
        if len(fraction) <= 2:
            clean_value = f"{whole}.{fraction}"
        else:
            clean_value = whole + fraction
    else:
        clean_value = clean_value.replace(',', '')

    try:
        return Decimal(clean_value)
    except InvalidOperation:
        raise ValueError(f"Cannot convert '{value}' to Decimal")


def to_decimal(value: AmountLike) -> Decimal:
    """Coerce an amount argument to Decimal"""
    if isinstance(value, bool):
        raise ValueError("Amount must be numeric, not bool")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float)):
        result = Decimal(str(value))
    elif isinstance(value, str):
        result = decimal_from_string(value)
    else:
        raise ValueError(f"Cannot convert {type(value).__name__} to Decimal")

    if not result.is_finite():
        raise ValueError(f"Amount must be finite, got {value!r}")
    return result


def round_amount(value: Decimal, precision: int = 2) -> Decimal:
    """
    Round a Decimal to the given number of places

    Args:
        value: Decimal to round
        precision: Number of decimal places

    Returns:
        Rounded Decimal (half-up)
    """
    return value.quantize(Decimal('0.1') ** precision, rounding=ROUND_HALF_UP)


def format_amount(value: Decimal, symbol: str = "₹", precision: int = 2) -> str:
    """Format for display, e.g. ₹7,000.00"""
    rounded = round_amount(value, precision)
    if rounded.is_zero():
        rounded = abs(rounded)
    elif rounded < ZERO:
        return f"-{symbol}{-rounded:,.{precision}f}"
    return f"{symbol}{rounded:,.{precision}f}"
