# -*- coding: utf-8 -*-
"""matroids/dual.py - The dual matroid M*."""

from ..base import Matroid
from ..subset import popcount


class Dual(Matroid):
    """
    M* on the same ground set: rank*(S) = |S| + rank(E \\ S) - rank(E).

    The bases of M* are the complements of the bases of M.
    """

    def __init__(self, matroid: Matroid):
        super().__init__(matroid.ground_set)
        self.matroid = matroid

    @property
    def k(self) -> int:
        return self.matroid.n - self.matroid.k

    def _rank(self, mask: int) -> int:
        m = self.matroid
        return popcount(mask) + m._rank(m._full_mask & ~mask) - m.k

    def _is_independent(self, mask: int) -> bool:
        # S is coindependent iff E \ S spans M
        m = self.matroid
        return m._rank(m._full_mask & ~mask) == m.k

    def dual(self) -> Matroid:
        return self.matroid

    def __repr__(self) -> str:
        return f"Dual({self.matroid!r})"


__all__ = ['Dual']
