# FreeModule: Free modules over generic rings (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""The integers and the rationals, backed by ``int`` and ``Fraction``."""

from fractions import Fraction
from numbers import Rational

from rings.base import Ring


class IntegerRing(Ring):
    """The ring of integers. Elements are plain Python ``int``."""

    def zero(self) -> int:
        return 0

    def one(self) -> int:
        return 1

    def __call__(self, x) -> int:
        if isinstance(x, int):
            return int(x)
        if isinstance(x, Rational):
            if x.denominator != 1:
                raise ValueError(f"{x} is not an integer")
            return int(x.numerator)
        raise TypeError(f"Cannot coerce {type(x).__name__} into {self}")

    def contains(self, x) -> bool:
        return isinstance(x, int) and not isinstance(x, bool)

    def _key(self) -> tuple:
        return ()

    def compact(self) -> str:
        return "Integers"


class RationalField(Ring):
    """The field of rationals. Elements are :class:`fractions.Fraction`."""

    is_field = True

    def zero(self) -> Fraction:
        return Fraction(0)

    def one(self) -> Fraction:
        return Fraction(1)

    def __call__(self, x) -> Fraction:
        if isinstance(x, Rational):
            return Fraction(x.numerator, x.denominator)
        raise TypeError(f"Cannot coerce {type(x).__name__} into {self}")

    def contains(self, x) -> bool:
        return isinstance(x, Fraction)

    def _key(self) -> tuple:
        return ()

    def compact(self) -> str:
        return "Rationals"


ZZ = IntegerRing()
QQ = RationalField()
