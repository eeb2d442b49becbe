# FreeModule: Free modules over generic rings (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""Free modules ``R^n`` over an arbitrary, possibly noncommutative, ring.

Over a field the module is reported as a vector space and additionally
exposes :meth:`FreeModule.dimension`.
"""

from typing import List, Optional

from log import get_logger
from rings.base import Ring
from rings.matrix import Matrix, matrix
from freemodule.cache import MODULE_CACHE, ParentCache
from freemodule.element import FreeModuleElem
from freemodule.errors import IncompatibleParent
from freemodule.validation import (
    check_coordinates,
    check_generator_index,
    check_rank,
    check_row_matrix,
)

logger = get_logger(__name__)


class FreeModule:
    """Free module of fixed rank over a base ring.

    Acts as the factory for its elements: call the module with a coordinate
    sequence or a ``1 x rank`` row matrix.

    With ``cached=True`` (the default) equal ``(ring, rank)`` pairs return the
    same instance, so ``FreeModule(ZZ, 3) is FreeModule(ZZ, 3)``. Elements of
    distinct instances never mix, even when ring and rank agree.

    Args:
        base_ring (Ring): Coefficient ring.
        rank (int): Number of coordinates, non-negative.
        cached (bool, optional): Reuse the instance registered for
            ``(base_ring, rank)``. Defaults to True.
        cache (ParentCache, optional): Registry to use when cached. Defaults
            to the process-wide ``MODULE_CACHE``.
    """

    element_class = FreeModuleElem

    def __new__(cls, base_ring: Ring, rank: int, cached: bool = True,
                cache: Optional[ParentCache] = None):
        if not isinstance(base_ring, Ring):
            raise TypeError(f"base_ring must be a Ring, got {type(base_ring).__name__}")
        check_rank(rank)
        if not cached:
            return cls._allocate(base_ring, rank)
        registry = MODULE_CACHE if cache is None else cache
        return registry.get_or_create(
            (base_ring, rank), lambda: cls._allocate(base_ring, rank)
        )

    @classmethod
    def _allocate(cls, base_ring: Ring, rank: int) -> "FreeModule":
        M = super().__new__(cls)
        M._base_ring = base_ring
        M._rank = rank
        logger.debug("Allocated %s", M.describe())
        return M

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def rank(self) -> int:
        return self._rank

    def base_ring(self) -> Ring:
        return self._base_ring

    def generator_count(self) -> int:
        """Number of standard generators; always the rank."""
        return self._rank

    ngens = generator_count

    def is_vector_space(self) -> bool:
        return self._base_ring.is_field

    def dimension(self) -> int:
        """Dimension of the vector space.

        Raises:
            TypeError: The base ring is not a field; use :meth:`rank`.
        """
        if not self.is_vector_space():
            raise TypeError(
                f"dimension is only defined over a field, not {self._base_ring}; use rank()"
            )
        return self._rank

    dim = dimension

    def is_exact(self) -> bool:
        return self._base_ring.is_exact

    def is_domain(self) -> bool:
        return self._base_ring.is_domain

    # ------------------------------------------------------------------
    # Generators
    # ------------------------------------------------------------------

    def generator(self, i: int) -> FreeModuleElem:
        """The i-th standard basis element, ``1 <= i <= rank``.

        Raises:
            IndexOutOfRange: ``i`` is outside ``[1, rank]``.
        """
        check_generator_index(self, i)
        R = self._base_ring
        return self([R.one() if j == i else R.zero() for j in range(1, self._rank + 1)])

    gen = generator

    def generators(self) -> List[FreeModuleElem]:
        return [self.generator(i) for i in range(1, self._rank + 1)]

    gens = generators

    def zero(self) -> FreeModuleElem:
        R = self._base_ring
        return self([R.zero()] * self._rank)

    # ------------------------------------------------------------------
    # Element construction
    # ------------------------------------------------------------------

    def __call__(self, x) -> FreeModuleElem:
        """Build an element from a coordinate sequence or a row matrix.

        A row matrix is wrapped as is; a sequence is coerced entry by entry
        into the base ring.

        Raises:
            DimensionMismatch: The length is not the rank, or the matrix is
                not ``1 x rank``.
            IncompatibleParent: ``x`` is an element of another module.
        """
        if isinstance(x, FreeModuleElem):
            if x.parent() != self:
                raise IncompatibleParent(self, x.parent())
            return x
        if isinstance(x, Matrix):
            check_row_matrix(self, x)
            return self.element_class(self, x)
        coords = list(x)
        check_coordinates(self, coords)
        v = matrix(self._base_ring, 1, len(coords), coords)
        return self.element_class(self, v)

    make = __call__

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def describe(self) -> str:
        R = self._base_ring
        if self.is_vector_space():
            return f"Vector space of dimension {self._rank} over {R.compact()}"
        return f"Free module of rank {self._rank} over {R.compact()}"

    def __repr__(self):
        return self.describe()
