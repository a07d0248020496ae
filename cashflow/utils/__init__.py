"""
Common numeric utilities shared by the budget core and the formatters
"""
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from cashflow.exceptions import InvalidInput

__all__ = ['to_decimal', 'round_half_up', 'json_number']


def to_decimal(value, field='value'):
    """Convert an int/float/str/Decimal amount to Decimal.

    Floats go through ``str`` so that 0.1 becomes Decimal('0.1') and not its
    binary expansion. Booleans are rejected even though they are ints.
    """
    if isinstance(value, bool) or value is None:
        raise InvalidInput(f'{field} must be a number', field=field)
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value))
        except (InvalidOperation, ValueError, TypeError):
            raise InvalidInput(f'{field} must be a number', field=field)
    if not result.is_finite():
        raise InvalidInput(f'{field} must be a finite number', field=field)
    return result


def round_half_up(value):
    """Round to the nearest integer, halves away from zero (2.5 -> 3)."""
    return int(to_decimal(value).quantize(Decimal('1'), rounding=ROUND_HALF_UP))


def json_number(value):
    """Decimal amount as a JSON number: int when whole, float otherwise"""
    value = to_decimal(value)
    if value == value.to_integral_value():
        return int(value)
    return float(value)
