"""Arbitrary-precision signed integers stored as base 10**9 limbs."""

from __future__ import annotations

from functools import total_ordering
from itertools import zip_longest

BASE = 1_000_000_000
WIDTH = 9
_INT64_MAX = 2**63 - 1
_DIGITS = frozenset("0123456789")


def _int_to_limbs(magnitude: int) -> list[int]:
    limbs = []
    while magnitude:
        magnitude, limb = divmod(magnitude, BASE)
        limbs.append(limb)
    return limbs or [0]


def _parse(text: str) -> tuple[list[int], bool]:
    negative = text.startswith("-")
    digits = text[1:] if negative else text
    if not digits or not set(digits) <= _DIGITS:
        raise ValueError(f"invalid integer literal: {text!r}")
    limbs = [
        int(digits[max(0, end - WIDTH):end])
        for end in range(len(digits), 0, -WIDTH)
    ]
    return limbs, negative


def _compare_magnitudes(a: list[int], b: list[int]) -> int:
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    for x, y in zip(reversed(a), reversed(b)):
        if x != y:
            return -1 if x < y else 1
    return 0


def _add_magnitudes(a: list[int], b: list[int]) -> list[int]:
    result = []
    carry = 0
    for x, y in zip_longest(a, b, fillvalue=0):
        carry, limb = divmod(x + y + carry, BASE)
        result.append(limb)
    if carry:
        result.append(carry)
    return result


def _sub_magnitudes(a: list[int], b: list[int]) -> list[int]:
    """Return |a| - |b|, assuming |a| >= |b|."""
    result = []
    borrow = 0
    for x, y in zip_longest(a, b, fillvalue=0):
        limb = x - y - borrow
        borrow = limb < 0
        if borrow:
            limb += BASE
        result.append(limb)
    return result


def _mul_magnitudes(a: list[int], b: list[int]) -> list[int]:
    result = [0] * (len(a) + len(b))
    for i, x in enumerate(a):
        carry = 0
        for j, y in enumerate(b):
            carry, result[i + j] = divmod(result[i + j] + x * y + carry, BASE)
        k = i + len(b)
        while carry:
            carry, result[k] = divmod(result[k] + carry, BASE)
            k += 1
    return result


@total_ordering
class BigInt:
    """A signed big integer; division truncates toward zero."""

    __slots__ = ("_limbs", "_negative")

    def __init__(self, value=0):
        if isinstance(value, BigInt):
            limbs, negative = list(value._limbs), value._negative
        elif isinstance(value, int):
            negative = value < 0
            limbs = _int_to_limbs(abs(value))
        elif isinstance(value, str):
            limbs, negative = _parse(value)
        else:
            raise TypeError(f"cannot build BigInt from {type(value).__name__}")
        self._limbs = limbs
        self._negative = negative
        self._trim()

    @classmethod
    def _make(cls, limbs: list[int], negative: bool) -> BigInt:
        obj = cls.__new__(cls)
        obj._limbs = limbs or [0]
        obj._negative = negative
        obj._trim()
        return obj

    def _trim(self) -> None:
        while len(self._limbs) > 1 and self._limbs[-1] == 0:
            self._limbs.pop()
        if self._limbs == [0]:
            self._negative = False

    @staticmethod
    def _coerce(other) -> BigInt | None:
        if isinstance(other, BigInt):
            return other
        if isinstance(other, int):
            return BigInt(other)
        return None

    def _is_zero(self) -> bool:
        return self._limbs == [0]

    def __neg__(self) -> BigInt:
        return BigInt._make(list(self._limbs), not self._negative)

    def __abs__(self) -> BigInt:
        return BigInt._make(list(self._limbs), False)

    def __add__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        if self._negative == other._negative:
            return BigInt._make(_add_magnitudes(self._limbs, other._limbs), self._negative)
        if _compare_magnitudes(self._limbs, other._limbs) < 0:
            return BigInt._make(_sub_magnitudes(other._limbs, self._limbs), other._negative)
        return BigInt._make(_sub_magnitudes(self._limbs, other._limbs), self._negative)

    __radd__ = __add__

    def __sub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self + (-other)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other - self

    def __mul__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return BigInt._make(
            _mul_magnitudes(self._limbs, other._limbs),
            self._negative != other._negative,
        )

    __rmul__ = __mul__

    def _divmod(self, other: BigInt) -> tuple[BigInt, BigInt]:
        if other._is_zero():
            raise ZeroDivisionError("division by zero")
        divisor = abs(other)
        remainder = BigInt(0)
        quotient = [0] * len(self._limbs)
        for i in reversed(range(len(self._limbs))):
            remainder = BigInt._make([self._limbs[i], *remainder._limbs], False)
            lo, hi, best = 0, BASE - 1, 0
            while lo <= hi:
                mid = (lo + hi) // 2
                if divisor * mid <= remainder:
                    best = mid
                    lo = mid + 1
                else:
                    hi = mid - 1
            quotient[i] = best
            remainder = remainder - divisor * best
        return (
            BigInt._make(quotient, self._negative != other._negative),
            BigInt._make(list(remainder._limbs), self._negative),
        )

    def __floordiv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._divmod(other)[0]

    def __mod__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._divmod(other)[1]

    def __divmod__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._divmod(other)

    def __lt__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        if self._negative != other._negative:
            return self._negative
        order = _compare_magnitudes(self._limbs, other._limbs)
        return order > 0 if self._negative else order < 0

    def __eq__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._negative == other._negative and self._limbs == other._limbs

    def __hash__(self):
        return hash(int(str(self)))

    def __str__(self):
        head = str(self._limbs[-1])
        tail = "".join(f"{limb:0{WIDTH}d}" for limb in reversed(self._limbs[:-1]))
        return ("-" if self._negative else "") + head + tail

    def __repr__(self):
        return f"BigInt('{self}')"

    def to_int(self) -> int:
        """Convert to a signed 64-bit range integer, raising OverflowError beyond it."""
        result = 0
        for limb in reversed(self._limbs):
            if result > (_INT64_MAX - limb) // BASE:
                raise OverflowError("value does not fit in 64 bits")
            result = result * BASE + limb
        return -result if self._negative else result