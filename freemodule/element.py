# FreeModule: Free modules over generic rings (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""Elements of a free module.

An element is a ``1 x rank`` row matrix over the base ring together with a
back-reference to the module it belongs to. Elements are immutable: every
operation returns a new element built through the module's entry point.
"""

from rings.base import RingElem, is_untyped_scalar
from rings.matrix import Matrix
from freemodule.validation import check_parent, check_scalar


class FreeModuleElem:
    """Row vector tagged with its parent module.

    Allows natural mathematical syntax like a + b, -a, c * a, a * c.

    Do not instantiate directly; call the parent module instead, which
    validates the rank.
    """

    __slots__ = ("_parent", "_v")

    def __init__(self, parent, v: Matrix):
        self._parent = parent
        self._v = v

    def parent(self):
        """The module this element belongs to."""
        return self._parent

    def base_ring(self):
        return self._parent.base_ring()

    def matrix(self) -> Matrix:
        """The backing ``1 x rank`` row matrix."""
        return self._v

    @property
    def coordinates(self) -> tuple:
        return self._v.entries()

    def __len__(self) -> int:
        return self._v.ncols()

    def __getitem__(self, i):
        """Coordinate ``i`` (0-based)."""
        return self._v[0, i]

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def __neg__(self):
        return self._parent(-self._v)

    def __add__(self, other):
        if not isinstance(other, FreeModuleElem):
            return NotImplemented
        check_parent(self, other)
        return self._parent(self._v + other._v)

    def __sub__(self, other):
        if not isinstance(other, FreeModuleElem):
            return NotImplemented
        check_parent(self, other)
        return self._parent(self._v - other._v)

    def _scale(self, c, left: bool):
        if isinstance(c, RingElem):
            check_scalar(self, c)
        elif is_untyped_scalar(c):
            c = self.base_ring()(c)
        else:
            return NotImplemented
        v = self._v.left_scale(c) if left else self._v.right_scale(c)
        return self._parent(v)

    def __mul__(self, c):
        """Right scalar multiplication: every coordinate becomes ``a_i * c``."""
        return self._scale(c, left=False)

    def __rmul__(self, c):
        """Left scalar multiplication: every coordinate becomes ``c * a_i``."""
        return self._scale(c, left=True)

    def __eq__(self, other):
        if not isinstance(other, FreeModuleElem):
            return NotImplemented
        check_parent(self, other)
        return self._v == other._v

    __hash__ = None

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def describe(self) -> str:
        """``(c1, ..., cn)`` with each coordinate in the ring's compact form."""
        R = self.base_ring()
        return "(" + ", ".join(R.render(x) for x in self.coordinates) + ")"

    def __repr__(self):
        return self.describe()
