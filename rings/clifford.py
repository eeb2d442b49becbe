# FreeModule: Free modules over generic rings (C) 2026 Eunkyum Kim
# Licensed under the Apache License, Version 2.0 | "Unbending" Paradigm

"""Real Clifford algebras as noncommutative base rings.

Elements wrap a float64 coefficient tensor over the ``2^n`` basis blades and
multiply with the geometric product, so ``e1 * e2 == -(e2 * e1)``.
"""

import math
from numbers import Rational, Real

import torch

from log import get_logger
from rings.base import Ring, RingElem

logger = get_logger(__name__)


class CliffordElem(RingElem):
    """Object-oriented wrapper for a single multivector.

    Allows natural mathematical syntax like A * B, A + B, -A.

    Attributes:
        algebra (CliffordAlgebra): The underlying algebra.
        tensor (torch.Tensor): The coefficient tensor [Dim].
    """

    __slots__ = ("algebra", "tensor")

    def __init__(self, algebra: "CliffordAlgebra", tensor: torch.Tensor):
        self.algebra = algebra
        self.tensor = tensor

    def parent(self) -> "CliffordAlgebra":
        return self.algebra

    def _operand(self, other):
        """Coefficient tensor of ``other`` in this algebra, or None."""
        if isinstance(other, CliffordElem):
            if other.algebra != self.algebra:
                raise TypeError(
                    f"Cannot combine elements of {self.algebra} and {other.algebra}"
                )
            return other.tensor
        if isinstance(other, Real):
            return self.algebra(other).tensor
        return None

    def __add__(self, other):
        t = self._operand(other)
        if t is None:
            return NotImplemented
        return CliffordElem(self.algebra, self.tensor + t)

    __radd__ = __add__

    def __sub__(self, other):
        t = self._operand(other)
        if t is None:
            return NotImplemented
        return CliffordElem(self.algebra, self.tensor - t)

    def __rsub__(self, other):
        t = self._operand(other)
        if t is None:
            return NotImplemented
        return CliffordElem(self.algebra, t - self.tensor)

    def __neg__(self):
        return CliffordElem(self.algebra, -self.tensor)

    def __mul__(self, other):
        """Geometric Product (A * B)."""
        if isinstance(other, CliffordElem):
            self._operand(other)
            res = self.algebra.geometric_product(self.tensor, other.tensor)
            return CliffordElem(self.algebra, res)
        if isinstance(other, Real):
            return CliffordElem(self.algebra, self.tensor * float(other))
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return CliffordElem(self.algebra, float(other) * self.tensor)
        return NotImplemented

    def __eq__(self, other):
        if isinstance(other, CliffordElem):
            return self.algebra == other.algebra and torch.equal(self.tensor, other.tensor)
        if isinstance(other, Real):
            return torch.equal(self.tensor, self.algebra(other).tensor)
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return self.algebra.render(self)


def _format_coeff(c: float) -> str:
    if math.isfinite(c) and c == int(c):
        return str(int(c))
    return f"{c:g}"


class CliffordAlgebra(Ring):
    """Real Clifford algebra ``Cl(p, q, r)``.

    Noncommutative for ``n >= 2``. The Cayley table is generated once per
    signature and shared by every instance.

    Attributes:
        p (int): Positive signature dimensions.
        q (int): Negative signature dimensions.
        r (int): Degenerate (null) dimensions.
        n (int): Total dimensions (p + q + r).
        dim (int): Total basis elements (2^n).
        device (str): Computation device.
    """

    is_exact = False
    is_domain = False
    _CACHED_TABLES = {}

    def __init__(self, p: int, q: int = 0, r: int = 0, device='cpu'):
        """Initialize the algebra and cache the Cayley table.

        Args:
            p (int): Positive dimensions (+1).
            q (int, optional): Negative dimensions (-1). Defaults to 0.
            r (int, optional): Degenerate dimensions (0). Defaults to 0.
            device (str, optional): Device holding the coefficients. Defaults to 'cpu'.
        """
        if min(p, q, r) < 0:
            raise ValueError(f"Signature must be non-negative, got ({p}, {q}, {r})")
        if p + q + r > 12:
            raise ValueError(f"p + q + r must be <= 12, got {p + q + r}")

        self.p, self.q, self.r = p, q, r
        self.n = p + q + r
        self.dim = 2 ** self.n
        self.device = device
        self.is_commutative = self.n < 2
        self.is_field = self.n == 0
        self.is_domain = self.n == 0

        cache_key = (p, q, r, str(device))
        if cache_key not in CliffordAlgebra._CACHED_TABLES:
            logger.debug("Generating Cayley table for %s", self.compact())
            CliffordAlgebra._CACHED_TABLES[cache_key] = self._generate_cayley_table()

        (
            self.cayley_indices,
            self.cayley_signs,
            self.gp_signs,
        ) = CliffordAlgebra._CACHED_TABLES[cache_key]

    def _generate_cayley_table(self):
        """Precompute the Cayley table and product signs."""
        indices = torch.arange(self.dim, device=self.device)

        # Result index = A XOR B
        cayley_indices = indices.unsqueeze(0) ^ indices.unsqueeze(1)
        cayley_signs = self._compute_signs(indices)
        gp_signs = torch.gather(cayley_signs, 1, cayley_indices)

        return cayley_indices, cayley_signs, gp_signs

    def _compute_signs(self, indices: torch.Tensor) -> torch.Tensor:
        """Compute the sign matrix from commutation parity and metric signature.

        Handles three signature types:
        - Positive (i < p): e_i^2 = +1
        - Negative (p <= i < p+q): e_i^2 = -1
        - Null (i >= p+q): e_i^2 = 0

        Args:
            indices (torch.Tensor): Basis indices.

        Returns:
            torch.Tensor: Sign matrix [Dim, Dim].
        """
        A = indices.unsqueeze(1)
        B = indices.unsqueeze(0)

        # Commutation sign: swaps needed to reorder the basis vectors of A B
        swap_counts = torch.zeros((self.dim, self.dim), dtype=torch.long, device=self.device)
        for i in range(self.n):
            a_i = (A >> i) & 1
            b_lower = B & ((1 << i) - 1)
            b_lower_cnt = torch.zeros_like(B)
            temp_b = b_lower
            for _ in range(self.n):
                b_lower_cnt += (temp_b & 1)
                temp_b = temp_b >> 1
            swap_counts += a_i * b_lower_cnt

        commutator_sign = (-1) ** swap_counts

        intersection = A & B

        q_mask = 0
        for i in range(self.p, self.p + self.q):
            q_mask |= (1 << i)
        neg_intersection = intersection & q_mask
        neg_cnt = torch.zeros_like(neg_intersection)
        temp_neg = neg_intersection
        for _ in range(self.n):
            neg_cnt += (temp_neg & 1)
            temp_neg = temp_neg >> 1

        metric_sign = (-1) ** neg_cnt

        # A squared null basis vector kills the whole product
        if self.r > 0:
            r_mask = 0
            for i in range(self.p + self.q, self.n):
                r_mask |= (1 << i)
            has_null = ((intersection & r_mask) != 0).to(metric_sign.dtype)
            metric_sign = metric_sign * (1 - has_null)

        return (commutator_sign * metric_sign).to(dtype=torch.float64)

    def geometric_product(self, A: torch.Tensor, B: torch.Tensor) -> torch.Tensor:
        """Computes the Geometric Product.

        Args:
            A (torch.Tensor): Left operand [..., Dim].
            B (torch.Tensor): Right operand [..., Dim].

        Returns:
            torch.Tensor: The product AB [..., Dim].
        """
        # result[..., k] = sum_i A[..., i] * B[..., cayley[i,k]] * signs[i,k]
        B_gathered = B[..., self.cayley_indices]
        return (A.unsqueeze(-1) * B_gathered * self.gp_signs).sum(dim=-2)

    # ------------------------------------------------------------------
    # Ring interface
    # ------------------------------------------------------------------

    def _scalar(self, value: float) -> CliffordElem:
        t = torch.zeros(self.dim, dtype=torch.float64, device=self.device)
        t[0] = value
        return CliffordElem(self, t)

    def zero(self) -> CliffordElem:
        return self._scalar(0.0)

    def one(self) -> CliffordElem:
        return self._scalar(1.0)

    def gen(self, i: int) -> CliffordElem:
        """Basis vector ``e_i`` for ``1 <= i <= n``."""
        if not 1 <= i <= self.n:
            raise IndexError(f"Generator index must be in [1, {self.n}], got {i}")
        t = torch.zeros(self.dim, dtype=torch.float64, device=self.device)
        t[1 << (i - 1)] = 1.0
        return CliffordElem(self, t)

    def gens(self) -> list:
        return [self.gen(i) for i in range(1, self.n + 1)]

    def __call__(self, x) -> CliffordElem:
        if isinstance(x, CliffordElem):
            if x.algebra != self:
                raise TypeError(f"Cannot coerce an element of {x.algebra} into {self}")
            return x
        if isinstance(x, Real):
            return self._scalar(float(x))
        if isinstance(x, (torch.Tensor, list, tuple)):
            t = torch.as_tensor(x, dtype=torch.float64, device=self.device)
            if t.shape != (self.dim,):
                raise ValueError(
                    f"Expected {self.dim} coefficients, got shape {tuple(t.shape)}"
                )
            return CliffordElem(self, t.clone())
        raise TypeError(f"Cannot coerce {type(x).__name__} into {self}")

    def contains(self, x) -> bool:
        return isinstance(x, CliffordElem) and x.algebra == self

    def _key(self) -> tuple:
        return (self.p, self.q, self.r, str(self.device))

    def compact(self) -> str:
        if self.r:
            return f"Cl({self.p},{self.q},{self.r})"
        return f"Cl({self.p},{self.q})"

    def blade_name(self, index: int) -> str:
        """Name of the basis blade at ``index``, e.g. ``e13``; ``""`` for the scalar."""
        bits = [str(i + 1) for i in range(self.n) if index & (1 << i)]
        if not bits:
            return ""
        sep = "_" if self.n >= 10 else ""
        return "e" + sep.join(bits)

    def render(self, x: CliffordElem) -> str:
        terms = []
        for index, c in enumerate(x.tensor.tolist()):
            if c == 0:
                continue
            blade = self.blade_name(index)
            mag = abs(c)
            if not blade:
                body = _format_coeff(mag)
            elif mag == 1:
                body = blade
            else:
                body = f"{_format_coeff(mag)}*{blade}"
            terms.append((c < 0, body))
        if not terms:
            return "0"
        neg, body = terms[0]
        out = f"-{body}" if neg else body
        for neg, body in terms[1:]:
            out += f" - {body}" if neg else f" + {body}"
        return out
