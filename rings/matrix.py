# FreeModule: Free modules over generic rings (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""Dense matrices over an arbitrary base ring.

Entries live in a 2-D ``numpy`` object array so any ring element type can be
stored. Arithmetic is elementwise and always returns a new matrix; scalar
products keep the operand order for noncommutative rings.
"""

from typing import Sequence

import numpy as np

from rings.base import Ring


def _map(fn, data: np.ndarray) -> np.ndarray:
    out = np.empty(data.shape, dtype=object)
    for idx, x in np.ndenumerate(data):
        out[idx] = fn(x)
    return out


class Matrix:
    """Matrix over a base ring.

    Attributes:
        data (np.ndarray): Object array of shape [nrows, ncols].
    """

    __slots__ = ("_ring", "data")

    def __init__(self, ring: Ring, data: np.ndarray):
        self._ring = ring
        self.data = data

    def base_ring(self) -> Ring:
        return self._ring

    def nrows(self) -> int:
        return self.data.shape[0]

    def ncols(self) -> int:
        return self.data.shape[1]

    @property
    def shape(self) -> tuple:
        return self.data.shape

    def __getitem__(self, key):
        i, j = key
        return self.data[i, j]

    def entries(self) -> tuple:
        """Entries in row-major order."""
        return tuple(self.data.flat)

    def _check_shape(self, other: "Matrix", op: str) -> None:
        if self.shape != other.shape:
            raise ValueError(
                f"Cannot {op} matrices of shape {self.shape} and {other.shape}"
            )

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_shape(other, "add")
        return Matrix(self._ring, self.data + other.data)

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_shape(other, "subtract")
        return Matrix(self._ring, self.data - other.data)

    def __neg__(self):
        return Matrix(self._ring, _map(lambda x: -x, self.data))

    def left_scale(self, c) -> "Matrix":
        """``c * a_ij`` for every entry."""
        return Matrix(self._ring, _map(lambda x: c * x, self.data))

    def right_scale(self, c) -> "Matrix":
        """``a_ij * c`` for every entry."""
        return Matrix(self._ring, _map(lambda x: x * c, self.data))

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return all(bool(x == y) for x, y in zip(self.data.flat, other.data.flat))

    __hash__ = None

    def __repr__(self):
        rows = [
            "[" + " ".join(self._ring.render(x) for x in row) + "]"
            for row in self.data
        ]
        return "\n".join(rows) if rows else "[]"


def matrix(ring: Ring, nrows: int, ncols: int, entries: Sequence) -> Matrix:
    """Build an ``nrows x ncols`` matrix over ``ring`` from row-major entries.

    Each entry is coerced with ``ring(...)``.

    Raises:
        ValueError: The number of entries does not match the shape.
    """
    entries = list(entries)
    if len(entries) != nrows * ncols:
        raise ValueError(
            f"Expected {nrows * ncols} entries for a {nrows}x{ncols} matrix, "
            f"got {len(entries)}"
        )
    data = np.empty((nrows, ncols), dtype=object)
    for k, x in enumerate(entries):
        data[divmod(k, ncols)] = ring(x)
    return Matrix(ring, data)
