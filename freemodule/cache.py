# FreeModule: Free modules over generic rings (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""Thread-safe registry of parent objects.

Maps a structural key such as ``(ring, rank)`` to the single parent instance
created for it. Entries live until :meth:`ParentCache.clear` is called.
"""

import threading
from typing import Any, Callable, Hashable

from log import get_logger

logger = get_logger(__name__)


class ParentCache:
    """Get-or-create registry guarded by a lock.

    Attributes:
        name (str): Label used in log messages.
    """

    def __init__(self, name: str = "parents"):
        self.name = name
        self._entries = {}
        self._lock = threading.Lock()

    def get_or_create(self, key: Hashable, factory: Callable[[], Any]) -> Any:
        """Return the instance for ``key``, building it with ``factory`` once.

        The factory runs under the lock, so racing callers always receive the
        same instance.
        """
        with self._lock:
            try:
                return self._entries[key]
            except KeyError:
                pass
            obj = factory()
            self._entries[key] = obj
            logger.debug("%s: cached new entry for %r", self.name, key)
            return obj

    def __contains__(self, key) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def clear(self) -> None:
        with self._lock:
            n = len(self._entries)
            self._entries.clear()
        logger.debug("%s: cleared %d entries", self.name, n)


MODULE_CACHE = ParentCache("free modules")
