import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from cpalgos.bigint import BigInt

big = st.integers(min_value=-(10**40), max_value=10**40)


@given(big)
def test_str_matches_python(n):
    assert str(BigInt(n)) == str(n)


@given(big)
def test_parse_round_trip(n):
    assert BigInt(str(n)) == BigInt(n)


@given(big, big)
def test_add_sub_mul_match_python(a, b):
    x, y = BigInt(a), BigInt(b)
    assert x + y == BigInt(a + b)
    assert x - y == BigInt(a - b)
    assert x * y == BigInt(a * b)


@settings(max_examples=50)
@given(big, big.filter(lambda v: v != 0))
def test_division_invariants(a, b):
    x, y = BigInt(a), BigInt(b)
    q, r = x // y, x % y
    assert q * y + r == x
    assert abs(r) < abs(y)
    assert r == 0 or (r < 0) == (a < 0)


def test_division_truncates_toward_zero():
    assert BigInt(-7) // BigInt(2) == BigInt(-3)
    assert BigInt(-7) % BigInt(2) == BigInt(-1)


@given(big, big)
def test_ordering_matches_python(a, b):
    assert (BigInt(a) < BigInt(b)) == (a < b)
    assert (BigInt(a) >= BigInt(b)) == (a >= b)
    assert (BigInt(a) == BigInt(b)) == (a == b)


def test_negative_zero_normalises():
    assert BigInt("-0") == BigInt(0)
    assert str(BigInt("-0")) == "0"


def test_leading_zeros_dropped():
    assert str(BigInt("000123")) == "123"


def test_limb_padding():
    assert str(BigInt("1000000001")) == "1000000001"
    assert str(BigInt("-1000000000000000000")) == "-1000000000000000000"


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        BigInt(5) // BigInt(0)
    with pytest.raises(ZeroDivisionError):
        BigInt(5) % 0


def test_to_int_limits():
    assert BigInt(2**63 - 1).to_int() == 2**63 - 1
    assert BigInt(-(2**63 - 1)).to_int() == -(2**63 - 1)
    with pytest.raises(OverflowError):
        BigInt(str(2**63)).to_int()


@pytest.mark.parametrize("text", ["", "-", "12a", "1.5", "+3"])
def test_invalid_text(text):
    with pytest.raises(ValueError):
        BigInt(text)


def test_hash_consistent_with_equality():
    assert len({BigInt(5), BigInt("5"), BigInt(-5)}) == 2


def test_abs_and_neg():
    assert abs(BigInt(-12345678901234)) == BigInt(12345678901234)
    assert -BigInt(7) == BigInt(-7)