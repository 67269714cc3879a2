from __future__ import annotations

# Conversion between decimal strings and integer atto units (1 unit == 10**18 atto units).
# Output is always truncated, never rounded.

import logging
import re
from decimal import Decimal
from typing import Final

from atto_currency.domain.monetary.errors import DecimalParseError, ParseErrorReason

logger = logging.getLogger(__name__)

# region Constants

# Number of decimal digits between one currency unit and one atto unit
ATTO_EXPONENT: Final[int] = 18

# Multiplier from whole units to atto units
ATTO_MULTIPLIER: Final[int] = 10**ATTO_EXPONENT

ZERO_UNITS: Final[int] = 0

# Left padding for values smaller than one whole unit
_ZERO_PADDING: Final[str] = "0" * ATTO_EXPONENT

_INTEGER_PART_PATTERN: Final[re.Pattern[str]] = re.compile(r"([+-]?)([0-9]+)")
_FRACTION_PART_PATTERN: Final[re.Pattern[str]] = re.compile(r"[0-9]*")

# endregion

# region Parse


def parse_atto_units(text: str) -> int:
    """Parse decimal string $text into a signed count of atto units.

    The integer part may carry one leading '+' or '-' and leading zeros. The fraction part is
    truncated (never rounded) to 18 digits. A leading '-' negates the whole value, so "-0.5"
    parses to minus half a unit. An empty string parses to zero.

    Args:
        text: Decimal literal such as "123.456", "-0.5", "007" or ".25".

    Returns:
        Value of $text multiplied by 10**18.

    Raises:
        TypeError: If $text is not a string.
        DecimalParseError: If $text has more than one '.', or either part contains anything but digits.
    """
    # Raise: only strings can be parsed
    if not isinstance(text, str):
        raise TypeError(f"$text must be a string, but provided value is: {text!r}")

    if not text:
        return ZERO_UNITS

    parts = text.split(".")
    if len(parts) > 2:
        raise DecimalParseError(text, ParseErrorReason.MALFORMED_DECIMAL)

    integer_part = parts[0]
    fraction_part = parts[1] if len(parts) == 2 else ""

    negative, whole_units = _parse_integer_part(text, integer_part)
    fraction_units = _parse_fraction_part(text, fraction_part)

    magnitude = whole_units * ATTO_MULTIPLIER + fraction_units
    return -magnitude if negative else magnitude


def _parse_integer_part(text: str, integer_part: str) -> tuple[bool, int]:
    # Empty integer part (".5", or no digits at all) contributes zero
    if not integer_part:
        return False, ZERO_UNITS

    match = _INTEGER_PART_PATTERN.fullmatch(integer_part)
    if match is None:
        raise DecimalParseError(text, ParseErrorReason.INVALID_DECIMAL)

    sign, digits = match.groups()
    digits = digits.lstrip("0")
    # Decimal has no digit limit on int conversion
    whole_units = int(Decimal(digits)) if digits else ZERO_UNITS
    return sign == "-", whole_units


def _parse_fraction_part(text: str, fraction_part: str) -> int:
    if len(fraction_part) > ATTO_EXPONENT:
        logger.debug(f"Truncated fraction of $text '{text}' from {len(fraction_part)} to {ATTO_EXPONENT} digits")
        fraction_part = fraction_part[:ATTO_EXPONENT]

    # Trailing zeros do not change the value
    fraction_part = fraction_part.rstrip("0")

    if _FRACTION_PART_PATTERN.fullmatch(fraction_part) is None:
        raise DecimalParseError(text, ParseErrorReason.INVALID_FRACTION)

    # Width before stripping leading zeros decides how far the digits are shifted
    width = len(fraction_part)
    digits = fraction_part.lstrip("0")
    if not digits:
        return ZERO_UNITS

    fraction_units = int(digits)
    shift = ATTO_EXPONENT - width
    if shift > 0:
        fraction_units *= 10**shift
    return fraction_units


# endregion

# region Format


def clamp_precision(precision: int) -> int:
    """Return $precision, or 18 when it is outside 1..18."""
    if precision > ATTO_EXPONENT or precision <= 0:
        return ATTO_EXPONENT
    return precision


def format_atto_units(units: int, precision: int = ATTO_EXPONENT) -> str:
    """Render $units atto units as "<whole>.<fraction>".

    The fraction is truncated to $precision digits (no rounding). $precision outside 1..18 is
    treated as 18. Negative values carry the sign on the whole-unit part: -5 * 10**17 renders
    as "-0.5" followed by zeros.

    Args:
        units: Signed count of atto units.
        precision: Number of fraction digits to keep.

    Returns:
        Decimal string with exactly $precision fraction digits after clamping.
    """
    # Raise: $units must be an integer count
    if not isinstance(units, int) or isinstance(units, bool):
        raise TypeError(f"$units must be an int, but provided value is: {units!r}")

    precision = clamp_precision(precision)

    # Decimal has no digit limit on str conversion
    digits = str(Decimal(abs(units)))
    if len(digits) <= ATTO_EXPONENT:
        whole = "0"
        fraction = _ZERO_PADDING[: ATTO_EXPONENT - len(digits)] + digits
    else:
        split_at = len(digits) - ATTO_EXPONENT
        whole, fraction = digits[:split_at], digits[split_at:]

    if units < ZERO_UNITS:
        whole = "-" + whole

    return f"{whole}.{fraction[:precision]}"


# endregion
