from __future__ import annotations

# JSON documents with `Currency` fields written as bare decimal literals, e.g. {"price": 12.500000000000000000}.

import json
import logging
from typing import Any

from atto_currency.domain.monetary.currency import Currency

logger = logging.getLogger(__name__)


def json_dumps(obj: Any) -> str:
    """Serialize $obj to JSON, writing every `Currency` as a bare decimal literal.

    Supports dicts, lists, tuples and any scalar accepted by `json.dumps`. Dict keys follow `json.dumps`:
    int, float, bool and None keys are written as their JSON text inside quotes (`True` -> "true").

    Args:
        obj: Value to serialize.

    Returns:
        str: Compact JSON text.

    Raises:
        TypeError: If $obj contains a dict key that is not str, int, float, bool or None, or a value `json`
            cannot serialize.
    """
    if isinstance(obj, Currency):
        return obj.marshal_json().decode("ascii")

    if isinstance(obj, dict):
        items = []
        for key, value in obj.items():
            items.append(f"{json.dumps(_json_key(key))}:{json_dumps(value)}")
        return "{" + ",".join(items) + "}"

    if isinstance(obj, (list, tuple)):
        return "[" + ",".join(json_dumps(item) for item in obj) + "]"

    return json.dumps(obj)


def json_loads(text: str | bytes, **kwargs) -> Any:
    """Parse JSON $text, turning every number with a fraction part into a `Currency`.

    Integers stay `int`. `marshal_json` always writes a '.', so documents produced by `json_dumps`
    read back into equal values. Exponent literals such as `1e5` are not decimal literals and raise.

    Args:
        text: JSON document.
        **kwargs: Passed through to `json.loads` (except $parse_float).

    Raises:
        TypeError: If $parse_float is passed.
        DecimalParseError: If a fractional number cannot be parsed as a decimal literal.
        json.JSONDecodeError: If $text is not valid JSON.
    """
    # Raise: $parse_float is reserved for Currency parsing
    if "parse_float" in kwargs:
        raise TypeError("Cannot call `json_loads` because $parse_float is set internally and cannot be overridden")

    result = json.loads(text, parse_float=Currency.from_str, **kwargs)
    logger.debug(f"Loaded JSON document of {len(text)} characters with Currency literals")
    return result


def _json_key(key) -> str:
    if isinstance(key, str):
        return key

    # Raise: JSON object keys must be str, int, float, bool or None
    if key is not None and not isinstance(key, (int, float)):
        raise TypeError(f"Cannot call `json_dumps` because dict key {key!r} is not str, int, float, bool or None")

    # bool and None become "true" / "false" / "null"; numbers use their JSON text
    return json.dumps(key)
