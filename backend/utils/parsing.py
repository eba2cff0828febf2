import math
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

PRICE_QUANTUM = Decimal("0.01")
# NUMERIC(10, 2)
MAX_PRICE = Decimal("99999999.99")
# 32-bit INT column
MAX_QUANTITY = 2 ** 31 - 1


def is_missing(value) -> bool:
    """True for None and for strings that are empty once stripped."""
    if value is None:
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return False


def _to_decimal(value) -> Decimal:
    # bool is an int subclass; true/false are not numbers here
    if isinstance(value, bool):
        raise ValueError(f"not a number: {value!r}")
    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, (int, float, str)):
        try:
            number = Decimal(str(value).strip())
        except InvalidOperation:
            raise ValueError(f"not a number: {value!r}")
    else:
        raise ValueError(f"not a number: {value!r}")
    if not number.is_finite():
        raise ValueError(f"not a finite number: {value!r}")
    return number


def parse_price(value) -> Decimal:
    """
    Parse a price given as a number or numeric string.

    Returns a non-negative Decimal rounded half-up to two fraction digits.
    Raises ValueError for anything else, including values too large for the
    price column.
    """
    number = _to_decimal(value)
    # Range first: quantize fails outright on very large exponents
    if number < 0 or number > MAX_PRICE:
        raise ValueError(f"price out of range: {value!r}")
    price = number.quantize(PRICE_QUANTUM, rounding=ROUND_HALF_UP)
    if price > MAX_PRICE:
        raise ValueError(f"price out of range: {value!r}")
    return price


def parse_quantity(value) -> int:
    """
    Parse a stock quantity given as an integer, integral float or numeric string.

    "12", 12 and 12.0 are all accepted; 12.5 is not.
    """
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"not a finite number: {value!r}")
    if isinstance(value, int) and not isinstance(value, bool):
        number = value
    else:
        number = _to_decimal(value)
    # Bounded before int() so "1e1000000" never becomes a million-digit int
    if number < 0 or number > MAX_QUANTITY:
        raise ValueError(f"quantity out of range: {value!r}")
    if isinstance(number, Decimal):
        if number != number.to_integral_value():
            raise ValueError(f"not a whole number: {value!r}")
        number = int(number)
    return number
