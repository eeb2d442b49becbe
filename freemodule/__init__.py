# FreeModule: Free modules over generic rings (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""Free modules over generic rings.

Provides the module descriptor, its elements, the descriptor cache and the
error types raised on rank, parent and scalar mismatches.
"""

from .errors import (
    FreeModuleError,
    DimensionMismatch,
    IncompatibleParent,
    IncompatibleScalar,
    IndexOutOfRange,
)
from .cache import ParentCache, MODULE_CACHE
from .element import FreeModuleElem
from .module import FreeModule

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "FreeModule",
    "FreeModuleElem",
    "ParentCache",
    "MODULE_CACHE",
    # errors
    "FreeModuleError",
    "DimensionMismatch",
    "IncompatibleParent",
    "IncompatibleScalar",
    "IndexOutOfRange",
]
