"""Monetary domain package.

Contains the `Currency` value type, which stores exact amounts as integer atto units
(10**-18 of one unit), together with its decimal-string codec and free-function arithmetic.
"""

from atto_currency.domain.monetary.codec import ATTO_EXPONENT, ATTO_MULTIPLIER, format_atto_units, parse_atto_units
from atto_currency.domain.monetary.currency import Currency
from atto_currency.domain.monetary.errors import DecimalParseError, ParseErrorReason

__all__ = [
    "ATTO_EXPONENT",
    "ATTO_MULTIPLIER",
    "Currency",
    "DecimalParseError",
    "ParseErrorReason",
    "format_atto_units",
    "parse_atto_units",
]
