# FreeModule: Free modules over generic rings (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""Prime fields GF(p), backed by ``galois``.

Field instances are cached per characteristic, so ``GF(7) is GF(7)``.
Elements are thin :class:`RingElem` adapters around ``galois`` field
scalars; all field arithmetic happens in ``galois``.
"""

import threading
from numbers import Rational

import galois

from rings.base import Ring, RingElem


class FiniteFieldElem(RingElem):
    """Element of a prime field.

    Attributes:
        value (galois.FieldArray): 0-d array holding the field scalar.
    """

    __slots__ = ("_field", "value")

    def __init__(self, field: "FiniteField", value):
        self._field = field
        self.value = value

    def parent(self) -> "FiniteField":
        return self._field

    def _operand(self, other):
        """``galois`` scalar for ``other`` in this field, or None."""
        if isinstance(other, FiniteFieldElem):
            if other._field != self._field:
                raise TypeError(
                    f"Cannot combine elements of {self._field} and {other._field}"
                )
            return other.value
        if isinstance(other, Rational):
            return self._field(other).value
        return None

    def __add__(self, other):
        v = self._operand(other)
        if v is None:
            return NotImplemented
        return FiniteFieldElem(self._field, self.value + v)

    __radd__ = __add__

    def __sub__(self, other):
        v = self._operand(other)
        if v is None:
            return NotImplemented
        return FiniteFieldElem(self._field, self.value - v)

    def __rsub__(self, other):
        v = self._operand(other)
        if v is None:
            return NotImplemented
        return FiniteFieldElem(self._field, v - self.value)

    def __mul__(self, other):
        v = self._operand(other)
        if v is None:
            return NotImplemented
        return FiniteFieldElem(self._field, self.value * v)

    __rmul__ = __mul__

    def __neg__(self):
        return FiniteFieldElem(self._field, -self.value)

    def inverse(self) -> "FiniteFieldElem":
        if int(self.value) == 0:
            raise ZeroDivisionError(f"0 is not invertible in {self._field}")
        return FiniteFieldElem(self._field, self.value ** -1)

    def __truediv__(self, other):
        v = self._operand(other)
        if v is None:
            return NotImplemented
        return self * FiniteFieldElem(self._field, v).inverse()

    def __int__(self):
        return int(self.value)

    def __eq__(self, other):
        # Plain ints are not field elements; comparing them would break hashing
        if isinstance(other, FiniteFieldElem):
            return self._field == other._field and int(self.value) == int(other.value)
        return NotImplemented

    def __hash__(self):
        return hash((self._field.p, int(self.value)))

    def __repr__(self):
        return str(int(self.value))


class FiniteField(Ring):
    """The prime field of order ``p``.

    Attributes:
        p (int): Characteristic.
        gf (type): The ``galois.GF(p)`` array class doing the arithmetic.
    """

    is_field = True
    _INSTANCES = {}
    _LOCK = threading.Lock()

    def __new__(cls, p: int):
        if isinstance(p, bool) or not isinstance(p, int) or p < 2 or not galois.is_prime(p):
            raise ValueError(f"Order must be a prime, got {p!r}")
        with cls._LOCK:
            field = cls._INSTANCES.get(p)
            if field is None:
                field = super().__new__(cls)
                field.p = p
                field.gf = galois.GF(p)
                cls._INSTANCES[p] = field
        return field

    def _lift(self, n: int):
        # galois only accepts representatives in [0, p)
        return self.gf(n % self.p)

    def zero(self) -> FiniteFieldElem:
        return FiniteFieldElem(self, self.gf(0))

    def one(self) -> FiniteFieldElem:
        return FiniteFieldElem(self, self.gf(1))

    def __call__(self, x) -> FiniteFieldElem:
        if isinstance(x, FiniteFieldElem):
            if x.parent() != self:
                raise TypeError(f"Cannot coerce an element of {x.parent()} into {self}")
            return x
        if isinstance(x, int):
            return FiniteFieldElem(self, self._lift(x))
        if isinstance(x, Rational):
            den = self._lift(x.denominator)
            if int(den) == 0:
                raise ValueError(f"Denominator of {x} is not invertible in {self}")
            return FiniteFieldElem(self, self._lift(x.numerator) / den)
        raise TypeError(f"Cannot coerce {type(x).__name__} into {self}")

    def contains(self, x) -> bool:
        return isinstance(x, FiniteFieldElem) and x.parent() == self

    def _key(self) -> tuple:
        return (self.p,)

    def compact(self) -> str:
        return f"Finite field F_{self.p}"

    def __getnewargs__(self):
        return (self.p,)


def GF(p: int) -> FiniteField:
    """Return the prime field of order ``p``."""
    return FiniteField(p)
