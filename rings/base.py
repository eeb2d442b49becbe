# FreeModule: Free modules over generic rings (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""Abstract ring interface.

A :class:`Ring` is a parent object: it knows its identities, how to coerce
plain Python numbers into itself and how to render its elements compactly.
Ring elements are either plain Python numbers (``int``, ``Fraction``) or
subclasses of :class:`RingElem`, which know their parent.
"""

from abc import ABC, abstractmethod
from numbers import Rational


class RingElem(ABC):
    """Marker base for elements that are tied to a specific ring instance."""

    __slots__ = ()

    @abstractmethod
    def parent(self) -> "Ring":
        """The ring this element belongs to."""


def is_untyped_scalar(x) -> bool:
    """True for plain integers and rationals not bound to a ring instance."""
    return isinstance(x, Rational) and not isinstance(x, RingElem)


class Ring(ABC):
    """Parent object of a (possibly noncommutative) ring.

    Attributes:
        is_field (bool): Every non-zero element is invertible.
        is_commutative (bool): Multiplication commutes.
        is_exact (bool): Arithmetic is exact (no rounding).
        is_domain (bool): No zero divisors.
    """

    is_field = False
    is_commutative = True
    is_exact = True
    is_domain = True

    @abstractmethod
    def zero(self):
        """Additive identity."""

    @abstractmethod
    def one(self):
        """Multiplicative identity."""

    @abstractmethod
    def __call__(self, x):
        """Coerce ``x`` into this ring.

        Raises:
            TypeError: ``x`` has a type the ring cannot coerce.
            ValueError: ``x`` has no image in the ring.
        """

    @abstractmethod
    def contains(self, x) -> bool:
        """Whether ``x`` is already an element of this ring."""

    @abstractmethod
    def _key(self) -> tuple:
        """Structural identity used for ``==`` and ``hash``."""

    @abstractmethod
    def compact(self) -> str:
        """Compact textual rendering of the ring itself."""

    def render(self, x) -> str:
        """Compact textual rendering of one element."""
        return str(x)

    def __eq__(self, other):
        if not isinstance(other, Ring):
            return NotImplemented
        return type(self) is type(other) and self._key() == other._key()

    def __hash__(self):
        return hash((type(self).__name__,) + self._key())

    def __str__(self):
        return self.compact()

    def __repr__(self):
        return self.compact()
