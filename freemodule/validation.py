# FreeModule: Free modules over generic rings (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""Input validation for free modules.

Every check raises on failure; nothing here returns a status flag.
"""

from rings.base import RingElem
from rings.matrix import Matrix
from freemodule.errors import (
    DimensionMismatch,
    IncompatibleParent,
    IncompatibleScalar,
    IndexOutOfRange,
)


def check_rank(rank) -> None:
    """Rank must be a non-negative ``int``."""
    if isinstance(rank, bool) or not isinstance(rank, int):
        raise TypeError(f"rank must be an int, got {type(rank).__name__}")
    if rank < 0:
        raise ValueError(f"rank must be non-negative, got {rank}")


def check_coordinates(module, coords) -> None:
    """A coordinate list must have exactly ``rank`` entries."""
    if len(coords) != module.rank():
        raise DimensionMismatch(
            module.rank(), len(coords), "Number of elements does not equal rank"
        )


def check_row_matrix(module, m: Matrix) -> None:
    """A backing matrix must be ``1 x rank`` over the module's base ring."""
    if m.ncols() != module.rank():
        raise DimensionMismatch(
            module.rank(), m.ncols(), "Number of elements does not equal rank"
        )
    if m.nrows() != 1:
        raise DimensionMismatch(1, m.nrows(), "Matrix should have single row")
    if m.base_ring() != module.base_ring():
        raise TypeError(
            f"Matrix over {m.base_ring()} cannot back a module over {module.base_ring()}"
        )


def check_parent(a, b) -> None:
    """Both elements must share the same module instance."""
    if a.parent() != b.parent():
        raise IncompatibleParent(a.parent(), b.parent())


def check_scalar(element, c) -> None:
    """A ring-typed scalar must belong to the element's base ring."""
    if isinstance(c, RingElem) and c.parent() != element.base_ring():
        raise IncompatibleScalar(c.parent(), element.base_ring())


def check_generator_index(module, i) -> None:
    if isinstance(i, bool) or not isinstance(i, int) or not 1 <= i <= module.rank():
        raise IndexOutOfRange(i, module.rank())
