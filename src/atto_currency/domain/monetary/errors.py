from __future__ import annotations

from enum import Enum


class ParseErrorReason(Enum):
    """Why a decimal string could not be converted into atto units."""

    MALFORMED_DECIMAL = "malformed decimal"
    INVALID_DECIMAL = "invalid decimal"
    INVALID_FRACTION = "invalid fraction"


class DecimalParseError(ValueError):
    """Raised when a decimal string cannot be parsed into a `Currency`.

    Attributes:
        text (str): The offending input, exactly as received.
        reason (ParseErrorReason): Which part of the input was rejected.
    """

    def __init__(self, text: str, reason: ParseErrorReason):
        self.text = text
        self.reason = reason
        super().__init__(f"Cannot parse $text '{text}' because it is a {reason.value}")

    def __reduce__(self):
        return self.__class__, (self.text, self.reason)
