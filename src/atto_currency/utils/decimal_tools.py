from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import TypeAlias

from atto_currency.domain.monetary.codec import ATTO_EXPONENT, ATTO_MULTIPLIER
from atto_currency.domain.monetary.currency import Currency

# Scalars accepted by `from_decimal_like`
DecimalLike: TypeAlias = Decimal | int | str | float


def to_decimal(amount: Currency) -> Decimal:
    """Return $amount as an exact `Decimal` with 18 fraction digits."""
    # Raise: $amount must be a Currency
    if not isinstance(amount, Currency):
        raise TypeError(f"$amount must be a Currency, but provided value is: {amount!r}")

    sign, digits, exponent = Decimal(amount.units).as_tuple()
    return Decimal((sign, digits, exponent - ATTO_EXPONENT))


def from_decimal_like(value: DecimalLike) -> Currency:
    """Build a `Currency` from a Decimal-like scalar.

    Fraction digits beyond 18 are truncated, as when parsing strings. Strings go straight to the
    decimal parser; other values are formatted positionally first, so `Decimal("1E+3")` and `1e-7`
    are accepted.

    Args:
        value: Input value as `DecimalLike`.

    Raises:
        TypeError: If $value is a bool.
        ValueError: If $value is NaN or infinite, or cannot be converted to `Decimal`.
    """
    if isinstance(value, bool):
        raise TypeError(f"$value must be Decimal-like, but provided value is: {value!r}")

    if isinstance(value, str):
        return Currency.from_str(value)

    if isinstance(value, int):
        return Currency.from_units(value * ATTO_MULTIPLIER)

    # Raise: $value must be convertible to Decimal
    try:
        # Floats go through their shortest str form, so 0.1 stays 0.1 instead of its binary expansion
        decimal_value = value if isinstance(value, Decimal) else Decimal(str(value))
    except (ValueError, TypeError, InvalidOperation) as e:
        raise ValueError(f"Cannot call `from_decimal_like` because $value ({value}) cannot be converted to Decimal") from e

    # Raise: NaN and infinities have no atto-unit representation
    if not decimal_value.is_finite():
        raise ValueError(f"Cannot call `from_decimal_like` because $value ({value}) is not finite")

    return Currency.from_str(format(decimal_value, "f"))
