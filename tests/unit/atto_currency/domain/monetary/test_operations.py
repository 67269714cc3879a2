import pytest

from atto_currency.domain.monetary.codec import ATTO_MULTIPLIER
from atto_currency.domain.monetary.currency import Currency
from atto_currency.domain.monetary import operations as ops


def test_free_functions_leave_operands_untouched():
    a = Currency.from_str("10.5")
    b = Currency.from_str("0.25")

    assert ops.add(a, b).to_str_fixed(2) == "10.75"
    assert ops.sub(a, b).to_str_fixed(2) == "10.25"
    assert ops.mul(a, b).units == a.units * b.units
    assert ops.div(a, b).units == 42

    assert str(a) == "10.500000000000000000"
    assert str(b) == "0.250000000000000000"


@pytest.mark.parametrize("text", ["0", "1", "-1.5", "123456789.000000000000000001", "-0.000000000000000001"])
def test_sub_from_zero_cancels_addition(text):
    a = Currency.from_str(text)
    assert ops.add(a, ops.sub(Currency.zero(), a)).is_zero()


def test_div_mod_returns_new_euclidean_pair():
    a = Currency.from_units(-7)
    b = Currency.from_units(2)

    q, r = ops.div_mod(a, b)

    assert (q.units, r.units) == (-4, 1)
    assert a.units == -7
    assert b.units * q.units + r.units == a.units


@pytest.mark.parametrize(
    "units, expected_units",
    [
        (4, 25 * 10**16),
        (-3, -333333333333333333),
        (5 * 10**17, 2),
        (ATTO_MULTIPLIER, 1),
        (2 * ATTO_MULTIPLIER, 0),
    ],
)
def test_inv_divides_multiplier_with_truncation(units, expected_units):
    assert ops.inv(Currency.from_units(units)).units == expected_units


@pytest.mark.parametrize("call", [lambda z: ops.div(Currency.from_str("1"), z), lambda z: ops.div_mod(Currency.from_str("1"), z), lambda z: ops.inv(z)])
def test_division_by_zero_raises(call):
    with pytest.raises(ZeroDivisionError):
        call(Currency.zero())


def test_eq_and_cmp():
    a = Currency.from_str("1.1")
    b = Currency.from_str("1.10")
    c = Currency.from_str("1.2")

    assert ops.eq(a, b)
    assert not ops.eq(a, c)
    assert ops.cmp(a, c) == -1
    assert ops.cmp(c, a) == 1
    assert ops.cmp(a, b) == 0


def test_free_functions_reject_other_types():
    with pytest.raises(TypeError):
        ops.add(Currency.zero(), 1)
    with pytest.raises(TypeError):
        ops.cmp("1", Currency.zero())
    with pytest.raises(TypeError):
        ops.inv(1)
