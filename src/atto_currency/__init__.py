__version__ = "0.1.0"

from atto_currency.domain.monetary.currency import Currency
from atto_currency.domain.monetary.errors import DecimalParseError, ParseErrorReason

__all__ = ["Currency", "DecimalParseError", "ParseErrorReason"]
