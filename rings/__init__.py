# FreeModule: Free modules over generic rings (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""Base rings and the row-matrix storage used by free modules.

Provides the abstract ring interface, the integers, the rationals, prime
fields, real Clifford algebras (noncommutative) and dense matrices.
"""

from .base import Ring, RingElem, is_untyped_scalar
from .integers import IntegerRing, RationalField, ZZ, QQ
from .finite_field import FiniteField, FiniteFieldElem, GF
from .clifford import CliffordAlgebra, CliffordElem
from .matrix import Matrix, matrix

__all__ = [
    # interface
    "Ring",
    "RingElem",
    "is_untyped_scalar",
    # commutative rings
    "IntegerRing",
    "RationalField",
    "ZZ",
    "QQ",
    "FiniteField",
    "FiniteFieldElem",
    "GF",
    # noncommutative
    "CliffordAlgebra",
    "CliffordElem",
    # storage
    "Matrix",
    "matrix",
]
