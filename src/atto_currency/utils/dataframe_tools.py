from __future__ import annotations

# Column-wise conversion between decimal strings and `Currency` objects in pandas data.

import logging

import pandas as pd

from atto_currency.domain.monetary.codec import ATTO_EXPONENT
from atto_currency.domain.monetary.currency import Currency
from atto_currency.domain.monetary.errors import DecimalParseError

logger = logging.getLogger(__name__)


def parse_currency_column(series: pd.Series) -> pd.Series:
    """Parse a column of decimal strings into `Currency` objects.

    - Cells must be `str` (e.g. read from CSV with `dtype=str`); numbers are rejected because floats have
      already lost precision by the time they reach this function.
    - The index and name of $series are preserved; the result has dtype `object`.

    Args:
        series (pd.Series): Column with one decimal literal per row.

    Returns:
        pd.Series: Column of `Currency` objects.

    Raises:
        ValueError: If $series is not a Series, or a cell is missing or not a string.
        DecimalParseError: If a cell is not a valid decimal literal.
    """
    # Check: $series must be a pandas Series
    if not isinstance(series, pd.Series):
        raise ValueError(f"Expected a pandas Series, but received {type(series).__name__}.")

    values = []
    for label, cell in series.items():
        # Raise: every cell must hold a decimal string
        if not isinstance(cell, str):
            raise ValueError(f"Cannot call `parse_currency_column` because cell at row {label!r} of column '{series.name}' is not a string: {cell!r}")
        try:
            values.append(Currency.from_str(cell))
        except DecimalParseError:
            logger.debug(f"Rejected cell at row {label!r} of column '{series.name}': {cell!r}")
            raise

    logger.debug(f"Parsed {len(values)} Currency value(s) from column '{series.name}'")
    return pd.Series(values, index=series.index, name=series.name, dtype=object)


def format_currency_column(series: pd.Series, precision: int = ATTO_EXPONENT) -> pd.Series:
    """Render a column of `Currency` objects as decimal strings truncated to $precision digits.

    Args:
        series (pd.Series): Column of `Currency` objects.
        precision (int): Fraction digits to keep; values outside 1..18 mean 18.

    Returns:
        pd.Series: Column of strings with the same index and name.

    Raises:
        ValueError: If $series is not a Series or a cell is not a `Currency`.
    """
    # Check: $series must be a pandas Series
    if not isinstance(series, pd.Series):
        raise ValueError(f"Expected a pandas Series, but received {type(series).__name__}.")

    rendered = []
    for label, cell in series.items():
        # Raise: every cell must hold a Currency
        if not isinstance(cell, Currency):
            raise ValueError(f"Cannot call `format_currency_column` because cell at row {label!r} of column '{series.name}' is not a Currency: {cell!r}")
        rendered.append(cell.to_str_fixed(precision))

    logger.debug(f"Formatted {len(rendered)} Currency value(s) in column '{series.name}' with $precision={precision}")
    return pd.Series(rendered, index=series.index, name=series.name, dtype=object)
