from __future__ import annotations

# Non-mutating arithmetic on `Currency`. Every function returns a new instance and leaves its operands untouched.

from atto_currency.domain.monetary.codec import ATTO_MULTIPLIER
from atto_currency.domain.monetary.currency import Currency, euclidean_divmod, truncated_quotient


def add(a: Currency, b: Currency) -> Currency:
    """Return a + b."""
    _check_operands(a, b, "add")
    return Currency.from_units(a.units + b.units)


def sub(a: Currency, b: Currency) -> Currency:
    """Return a - b."""
    _check_operands(a, b, "sub")
    return Currency.from_units(a.units - b.units)


def mul(a: Currency, b: Currency) -> Currency:
    """Return the product of the atto units of $a and $b (not rescaled)."""
    _check_operands(a, b, "mul")
    return Currency.from_units(a.units * b.units)


def div(a: Currency, b: Currency) -> Currency:
    """Return the quotient of the atto units of $a and $b, truncated toward zero.

    Raises:
        ZeroDivisionError: If $b is zero.
    """
    _check_operands(a, b, "div")
    return Currency.from_units(truncated_quotient(a.units, b.units))


def div_mod(a: Currency, b: Currency) -> tuple[Currency, Currency]:
    """Euclidean division of $a by $b.

    Returns:
        tuple[Currency, Currency]: Quotient q and remainder r with `a == b * q + r` and `0 <= r < |b|`
        (all in atto units).

    Raises:
        ZeroDivisionError: If $b is zero.
    """
    _check_operands(a, b, "div_mod")
    quotient, remainder = euclidean_divmod(a.units, b.units)
    return Currency.from_units(quotient), Currency.from_units(remainder)


def inv(a: Currency) -> Currency:
    """Return 1 / $a as `10**18 // a.units`, truncated toward zero.

    This is integer division of the scale multiplier, not a rounded reciprocal: inverting any
    amount above one atto unit loses precision.

    Raises:
        ZeroDivisionError: If $a is zero.
    """
    # Raise: $a must be a Currency
    if not isinstance(a, Currency):
        raise TypeError(f"Cannot call `inv` because $a must be a Currency, but provided value is: {a!r}")
    return Currency.from_units(truncated_quotient(ATTO_MULTIPLIER, a.units))


def eq(a: Currency, b: Currency) -> bool:
    """Return True if a == b."""
    _check_operands(a, b, "eq")
    return a.units == b.units


def cmp(a: Currency, b: Currency) -> int:
    """Return -1, 0 or +1 when a < b, a == b or a > b respectively."""
    _check_operands(a, b, "cmp")
    return (a.units > b.units) - (a.units < b.units)


def _check_operands(a, b, function_name: str) -> None:
    # Raise: both operands must be Currency instances
    if not isinstance(a, Currency):
        raise TypeError(f"Cannot call `{function_name}` because $a must be a Currency, but provided value is: {a!r}")
    if not isinstance(b, Currency):
        raise TypeError(f"Cannot call `{function_name}` because $b must be a Currency, but provided value is: {b!r}")
