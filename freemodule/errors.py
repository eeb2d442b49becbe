# FreeModule: Free modules over generic rings (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""Exceptions raised by free modules and their elements."""


class FreeModuleError(Exception):
    """Base class for free module errors."""
    pass


class DimensionMismatch(FreeModuleError, ValueError):
    """Coordinates or a row matrix do not match the rank of the module."""

    def __init__(self, expected, got, details: str = ""):
        self.expected = expected
        self.got = got
        msg = f"Expected {expected}, got {got}"
        if details:
            msg = f"{details}: {msg}"
        super().__init__(msg)


class IncompatibleParent(FreeModuleError, TypeError):
    """Two elements combined or compared belong to different modules."""

    def __init__(self, left, right):
        self.left = left
        self.right = right
        super().__init__(f"Incompatible free modules: {left} and {right}")


class IncompatibleScalar(FreeModuleError, TypeError):
    """A ring-typed scalar lives in a ring other than the base ring."""

    def __init__(self, scalar_ring, base_ring):
        self.scalar_ring = scalar_ring
        self.base_ring = base_ring
        super().__init__(
            f"Incompatible scalar: element of {scalar_ring} acting on a module over {base_ring}"
        )


class IndexOutOfRange(FreeModuleError, IndexError):
    """A generator index outside ``[1, rank]``."""

    def __init__(self, index, rank: int):
        self.index = index
        self.rank = rank
        super().__init__(f"Generator index must be in [1, {rank}], got {index}")
