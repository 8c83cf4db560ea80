# -*- coding: utf-8 -*-
"""matroids/uniform.py - The uniform matroid U(k, n)."""

from ..base import Matroid
from ..errors import InvalidInput
from ..subset import popcount


class UniformMatroid(Matroid):
    """U(k, n): every subset of at most k of the n elements is independent."""

    def __init__(self, k: int, n: int, ground_set=None):
        if n < 0 or k < 0 or k > n:
            raise InvalidInput(f"U(k, n) needs 0 <= k <= n, got k={k}, n={n}")
        super().__init__(ground_set if ground_set is not None else n)
        if self.n != n:
            raise InvalidInput(f"Ground set has {self.n} elements, expected {n}")
        self._k = k

    @property
    def k(self) -> int:
        return self._k

    def _rank(self, mask: int) -> int:
        return min(popcount(mask), self._k)

    def _is_independent(self, mask: int) -> bool:
        return popcount(mask) <= self._k

    def is_uniform(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"U({self._k}, {self.n})"


__all__ = ['UniformMatroid']
