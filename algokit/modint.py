"""Integers modulo a fixed modulus."""

from __future__ import annotations

from functools import total_ordering

MOD = 10**9 + 7


@total_ordering
class ModInt:
    """An integer reduced into [0, mod), with arithmetic modulo mod."""

    __slots__ = ("value", "mod")

    def __init__(self, value: int = 0, mod: int = MOD) -> None:
        if mod <= 0:
            raise ValueError("modulus must be positive")
        self.mod = mod
        self.value = int(value) % mod

    def _coerce(self, other):
        if isinstance(other, ModInt):
            if other.mod != self.mod:
                raise ValueError("operands have different moduli")
            return other.value
        if isinstance(other, int):
            return other % self.mod
        return NotImplemented

    def _make(self, value: int) -> ModInt:
        return ModInt(value, self.mod)

    def __add__(self, other):
        v = self._coerce(other)
        if v is NotImplemented:
            return v
        return self._make(self.value + v)

    __radd__ = __add__

    def __sub__(self, other):
        v = self._coerce(other)
        if v is NotImplemented:
            return v
        return self._make(self.value - v)

    def __rsub__(self, other):
        v = self._coerce(other)
        if v is NotImplemented:
            return v
        return self._make(v - self.value)

    def __mul__(self, other):
        v = self._coerce(other)
        if v is NotImplemented:
            return v
        return self._make(self.value * v)

    __rmul__ = __mul__

    def __truediv__(self, other):
        v = self._coerce(other)
        if v is NotImplemented:
            return v
        return self * self._make(v).inverse()

    def __rtruediv__(self, other):
        v = self._coerce(other)
        if v is NotImplemented:
            return v
        return self._make(v) * self.inverse()

    def __neg__(self) -> ModInt:
        return self._make(-self.value)

    def __pos__(self) -> ModInt:
        return self

    def __pow__(self, exponent: int) -> ModInt:
        if not isinstance(exponent, int):
            return NotImplemented
        return self.pow(exponent)

    def inverse(self) -> ModInt:
        """Multiplicative inverse; ZeroDivisionError if none exists."""
        try:
            return self._make(pow(self.value, -1, self.mod))
        except ValueError:
            raise ZeroDivisionError(
                f"{self.value} is not invertible modulo {self.mod}"
            ) from None

    def pow(self, exponent: int) -> ModInt:
        """Raise to an integer power; negative powers use the inverse."""
        if exponent < 0:
            return self.inverse().pow(-exponent)
        return self._make(pow(self.value, exponent, self.mod))

    def __eq__(self, other) -> bool:
        v = self._coerce(other)
        if v is NotImplemented:
            return NotImplemented
        return self.value == v

    def __lt__(self, other) -> bool:
        v = self._coerce(other)
        if v is NotImplemented:
            return NotImplemented
        return self.value < v

    def __hash__(self) -> int:
        return hash(self.value)

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"ModInt({self.value}, mod={self.mod})"