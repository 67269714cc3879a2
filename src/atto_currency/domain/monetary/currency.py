from __future__ import annotations

from atto_currency.domain.monetary.codec import ATTO_EXPONENT, ZERO_UNITS, format_atto_units, parse_atto_units


class Currency:
    """Exact monetary amount stored as an integer count of atto units (10**-18 of one unit).

    All arithmetic is plain integer arithmetic on $units. String conversion uses the full
    18-digit precision by default and truncates (never rounds) when a lower precision is asked for.

    Named arithmetic methods (`add`, `sub`, `mul`, `div`, `divmod`) mutate this instance and return
    it, so calls can be chained. Use `atto_currency.domain.monetary.operations` (or the `+` and `-`
    operators) to get a new value instead. Because instances are mutable, they are not hashable.

    `mul` and `div` work on raw atto units, exactly like the underlying integers: multiplying two
    amounts does not rescale the product back to 18 digits.
    """

    __slots__ = ("_units",)

    # region Init

    def __init__(self):
        """Create a zero amount."""
        self._units: int = ZERO_UNITS

    @classmethod
    def zero(cls) -> Currency:
        """Return a new zero amount."""
        return cls()

    @classmethod
    def from_units(cls, units: int) -> Currency:
        """Wrap an existing count of atto units.

        Args:
            units (int): Signed count of atto units.

        Raises:
            TypeError: If $units is not an int.
        """
        # Raise: only integer counts are valid atto units
        if not isinstance(units, int) or isinstance(units, bool):
            raise TypeError(f"$units must be an int, but provided value is: {units!r}")

        result = cls()
        result._units = units
        return result

    @classmethod
    def from_str(cls, text: str) -> Currency:
        """Parse a decimal literal such as "123.456" or "-0.5".

        Args:
            text (str): Decimal literal; an empty string means zero.

        Returns:
            Currency: Parsed amount. Fraction digits beyond 18 are dropped.

        Raises:
            DecimalParseError: If $text is not a valid decimal literal.
        """
        return cls.from_units(parse_atto_units(text))

    @classmethod
    def from_json_bytes(cls, data: bytes | str) -> Currency:
        """Build an amount from a bare decimal literal produced by `marshal_json`."""
        return cls().unmarshal_json(data)

    # endregion

    # region Properties

    @property
    def units(self) -> int:
        """Get the signed count of atto units."""
        return self._units

    # endregion

    # region Formatting

    def to_str_fixed(self, precision: int) -> str:
        """Render with $precision fraction digits, truncating the rest.

        Args:
            precision (int): Fraction digits to keep. Values above 18 or below 1 mean 18.

        Returns:
            str: Decimal literal like "123.45".
        """
        return format_atto_units(self._units, precision)

    def __str__(self) -> str:
        """Return the full 18-digit decimal literal."""
        return format_atto_units(self._units, ATTO_EXPONENT)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self}')"

    # endregion

    # region Structured serialization

    def marshal_json(self) -> bytes:
        """Return this amount as a bare (unquoted) decimal literal, ready to embed in a JSON document."""
        return str(self).encode("ascii")

    def unmarshal_json(self, data: bytes | str) -> Currency:
        """Overwrite this amount with the bare decimal literal in $data.

        On failure this amount stays unchanged.

        Args:
            data (bytes | str): Literal as produced by `marshal_json`.

        Returns:
            Currency: This instance.

        Raises:
            TypeError: If $data is neither bytes nor str.
            DecimalParseError: If $data is not a valid decimal literal.
        """
        if isinstance(data, (bytes, bytearray)):
            text = bytes(data).decode("ascii", errors="replace")
        elif isinstance(data, str):
            text = data
        else:
            raise TypeError(f"$data must be bytes or str, but provided value is: {data!r}")

        self._units = parse_atto_units(text)
        return self

    # endregion

    # region In-place arithmetic

    def add(self, other: Currency) -> Currency:
        """Add $other to this amount in place and return self."""
        self._units += _require_currency(other, "add")._units
        return self

    def sub(self, other: Currency) -> Currency:
        """Subtract $other from this amount in place and return self."""
        self._units -= _require_currency(other, "sub")._units
        return self

    def mul(self, other: Currency) -> Currency:
        """Multiply the atto units of this amount by those of $other in place and return self."""
        self._units *= _require_currency(other, "mul")._units
        return self

    def div(self, other: Currency) -> Currency:
        """Divide this amount by $other in place, truncating toward zero, and return self.

        Raises:
            ZeroDivisionError: If $other is zero.
        """
        self._units = truncated_quotient(self._units, _require_currency(other, "div")._units)
        return self

    def divmod(self, other: Currency) -> tuple[Currency, Currency]:
        """Euclidean division in place: this amount becomes the quotient.

        The quotient q and remainder r satisfy `self == other * q + r` with `0 <= r < |other|`.

        Returns:
            tuple[Currency, Currency]: This instance (now the quotient) and a new remainder.

        Raises:
            ZeroDivisionError: If $other is zero.
        """
        quotient, remainder = euclidean_divmod(self._units, _require_currency(other, "divmod")._units)
        self._units = quotient
        return self, Currency.from_units(remainder)

    # endregion

    # region Comparison

    def is_zero(self) -> bool:
        """Return True if this amount is exactly zero."""
        return self._units == ZERO_UNITS

    def eq(self, other: Currency) -> bool:
        """Return True if this amount equals $other."""
        return self._units == _require_currency(other, "eq")._units

    def cmp(self, other: Currency) -> int:
        """Return -1, 0 or +1 when this amount is less than, equal to or greater than $other."""
        other_units = _require_currency(other, "cmp")._units
        return (self._units > other_units) - (self._units < other_units)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Currency):
            return NotImplemented
        return self._units == other._units

    def __lt__(self, other) -> bool:
        if not isinstance(other, Currency):
            return NotImplemented
        return self._units < other._units

    def __le__(self, other) -> bool:
        if not isinstance(other, Currency):
            return NotImplemented
        return self._units <= other._units

    def __gt__(self, other) -> bool:
        if not isinstance(other, Currency):
            return NotImplemented
        return self._units > other._units

    def __ge__(self, other) -> bool:
        if not isinstance(other, Currency):
            return NotImplemented
        return self._units >= other._units

    # Mutable value type
    __hash__ = None

    # endregion

    # region Operators

    def __add__(self, other):
        """Return a new amount equal to self + $other."""
        if not isinstance(other, Currency):
            return NotImplemented
        return Currency.from_units(self._units + other._units)

    def __sub__(self, other):
        """Return a new amount equal to self - $other."""
        if not isinstance(other, Currency):
            return NotImplemented
        return Currency.from_units(self._units - other._units)

    def __neg__(self) -> Currency:
        return Currency.from_units(-self._units)

    def __pos__(self) -> Currency:
        return Currency.from_units(self._units)

    def __abs__(self) -> Currency:
        return Currency.from_units(abs(self._units))

    # endregion


def truncated_quotient(dividend: int, divisor: int) -> int:
    """Integer quotient of $dividend / $divisor, truncated toward zero.

    Raises:
        ZeroDivisionError: If $divisor is zero.
    """
    # Raise: division by zero is never silently turned into a value
    if divisor == ZERO_UNITS:
        raise ZeroDivisionError("Cannot divide `Currency` by zero")

    quotient = abs(dividend) // abs(divisor)
    return -quotient if (dividend < 0) != (divisor < 0) else quotient


def euclidean_divmod(dividend: int, divisor: int) -> tuple[int, int]:
    """Euclidean division: returns (q, r) with `dividend == divisor * q + r` and `0 <= r < |divisor|`.

    Raises:
        ZeroDivisionError: If $divisor is zero.
    """
    # Raise: division by zero is never silently turned into a value
    if divisor == ZERO_UNITS:
        raise ZeroDivisionError("Cannot divide `Currency` by zero")

    quotient, remainder = divmod(dividend, divisor)
    # Python floors, so a negative divisor leaves a negative remainder
    if remainder < 0:
        remainder -= divisor
        quotient += 1
    return quotient, remainder


def _require_currency(value, method_name: str) -> Currency:
    # Raise: named arithmetic only accepts Currency operands
    if not isinstance(value, Currency):
        raise TypeError(f"Cannot call `Currency.{method_name}` because $other must be a Currency, but provided value is: {value!r}")
    return value
