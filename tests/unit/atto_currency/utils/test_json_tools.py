import json

import pytest

from atto_currency.domain.monetary.currency import Currency
from atto_currency.domain.monetary.errors import DecimalParseError
from atto_currency.utils.json_tools import json_dumps, json_loads


def test_json_dumps_writes_bare_literals():
    document = {"price": Currency.from_str("12.5"), "qty": 3, "tags": ["a", Currency.from_str("-0.25")], "note": None}

    assert json_dumps(document) == '{"price":12.500000000000000000,"qty":3,"tags":["a",-0.250000000000000000],"note":null}'


def test_json_dumps_output_is_valid_json():
    text = json_dumps([Currency.from_str("1"), (Currency.zero(),)])
    assert json.loads(text) == [1.0, [0.0]]


def test_json_round_trip():
    document = {"balance": Currency.from_str("123.0005430123"), "count": 2, "nested": {"fee": Currency.from_units(1)}}

    restored = json_loads(json_dumps(document))

    assert restored["balance"].eq(document["balance"])
    assert restored["nested"]["fee"].units == 1
    assert restored["count"] == 2
    assert isinstance(restored["count"], int)


def test_json_loads_accepts_bytes():
    assert json_loads(b"[0.5]")[0].to_str_fixed(1) == "0.5"


def test_json_loads_rejects_exponent_literals():
    with pytest.raises(DecimalParseError):
        json_loads('{"x": 1.5e3}')


def test_json_loads_rejects_parse_float_override():
    with pytest.raises(TypeError):
        json_loads("1.0", parse_float=float)


def test_json_dumps_coerces_scalar_keys_like_json():
    document = {1: Currency.zero(), 2.5: 1, False: 2, None: 3}

    assert json_dumps(document) == '{"1":0.000000000000000000,"2.5":1,"false":2,"null":3}'
    assert json_dumps({1: 1, 2.5: 1, False: 2, None: 3}) == json.dumps({1: 1, 2.5: 1, False: 2, None: 3}, separators=(",", ":"))


def test_json_dumps_rejects_unsupported_keys():
    with pytest.raises(TypeError):
        json_dumps({(1, 2): Currency.zero()})
