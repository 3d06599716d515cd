"""Exact decimal helpers for balances and amounts."""

from decimal import Decimal, Inexact, InvalidOperation, localcontext

from src.models.exceptions import InvalidAmountError


def to_decimal(value: Decimal | str | int | float) -> Decimal:
    """
    Coerce a value into an exact, finite Decimal.

    Floats are converted through their shortest string form, so 1000.12345
    becomes Decimal("1000.12345") rather than its binary expansion.

    Args:
        value: A Decimal, a numeric string, an int or a float

    Returns:
        The equivalent Decimal

    Raises:
        TypeError: If the value is not a supported numeric type
        InvalidAmountError: If the value is not a finite number
    """
    if isinstance(value, bool):
        raise TypeError("Booleans are not valid amounts")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, float):
        result = Decimal(str(value))
    elif isinstance(value, (str, int)):
        try:
            result = Decimal(value)
        except InvalidOperation:
            raise InvalidAmountError(f"Not a decimal amount: {value!r}") from None
    else:
        raise TypeError(f"Unsupported amount type: {type(value).__name__}")

    if not result.is_finite():
        raise InvalidAmountError(f"Amount must be finite, got {value!r}")
    return result


def exact_sum(a: Decimal, b: Decimal) -> Decimal:
    """
    Add two finite Decimals without rounding.

    The sum is computed in a local context wide enough to hold every digit
    of the result, so the ambient 28-digit precision never applies.

    Raises:
        decimal.Inexact: If the result would still need rounding
    """
    exponent = min(a.as_tuple().exponent, b.as_tuple().exponent)
    magnitude = max(a.adjusted(), b.adjusted())
    with localcontext() as ctx:
        ctx.prec = magnitude - exponent + 2
        ctx.traps[Inexact] = True
        return a + b
