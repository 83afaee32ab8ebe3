"""Unsigned fixed-width decimal integers with wrap-around arithmetic."""

from __future__ import annotations

from functools import total_ordering

WIDTH = 105
MODULUS = 10**WIDTH
_DIGITS = frozenset("0123456789")


@total_ordering
class FixedDecimal:
    """A non-negative integer of WIDTH decimal digits; arithmetic wraps modulo 10**WIDTH."""

    __slots__ = ("_value",)

    def __init__(self, value=0):
        if isinstance(value, FixedDecimal):
            self._value = value._value
        elif isinstance(value, int):
            if value < 0:
                raise ValueError("FixedDecimal cannot hold a negative value")
            self._value = value % MODULUS
        elif isinstance(value, str):
            if not value or not set(value) <= _DIGITS:
                raise ValueError(f"invalid decimal text: {value!r}")
            if len(value) > WIDTH:
                raise ValueError(f"more than {WIDTH} digits")
            self._value = int(value)
        else:
            raise TypeError(f"cannot build FixedDecimal from {type(value).__name__}")

    @staticmethod
    def _coerce(other) -> FixedDecimal | None:
        if isinstance(other, FixedDecimal):
            return other
        if isinstance(other, int):
            return FixedDecimal(other)
        return None

    @property
    def digits(self) -> tuple[int, ...]:
        """All WIDTH digits, least significant first."""
        return tuple(int(c) for c in reversed(str(self._value).zfill(WIDTH)))

    def __add__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return FixedDecimal(self._value + other._value)

    __radd__ = __add__

    def __sub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return FixedDecimal((self._value - other._value) % MODULUS)

    def __mul__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return FixedDecimal(self._value * other._value)

    __rmul__ = __mul__

    def __floordiv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        if other._value == 0:
            raise ZeroDivisionError("division by zero")
        return FixedDecimal(self._value // other._value)

    def __mod__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        if other._value == 0:
            raise ZeroDivisionError("modulo by zero")
        return FixedDecimal(self._value % other._value)

    def __lshift__(self, places):
        if places < 0:
            raise ValueError("negative shift count")
        return FixedDecimal(self._value * 10**places)

    def __rshift__(self, places):
        if places < 0:
            raise ValueError("negative shift count")
        return FixedDecimal(self._value // 10**places)

    def suffix(self, width) -> FixedDecimal:
        """Keep only the lowest `width` digits."""
        if width < 0:
            raise ValueError("negative width")
        return FixedDecimal(self._value % 10**width)

    def __eq__(self, other):
        if isinstance(other, FixedDecimal):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    def __lt__(self, other):
        if isinstance(other, FixedDecimal):
            return self._value < other._value
        if isinstance(other, int):
            return self._value < other
        return NotImplemented

    def __hash__(self):
        return hash(self._value)

    def __int__(self):
        return self._value

    def __str__(self):
        return str(self._value)

    def __repr__(self):
        return f"FixedDecimal('{self._value}')"