# -*- coding: utf-8 -*-
"""
matroids/elongate.py - Elongation of a matroid.

The l-th elongation raises the rank by l: rank'(S) = |S| if nullity(S) <= l,
else rank(S) + l. See section 2.5 of doi:10.1016/j.disc.2015.10.005.
"""

from ..base import Matroid
from ..errors import InvalidInput
from ..subset import popcount


class Elongation(Matroid):
    """Elongation of `matroid` by `elongation` (0 <= l <= n - k)."""

    def __init__(self, matroid: Matroid, elongation: int):
        if elongation < 0 or elongation > matroid.corank:
            raise InvalidInput(
                f"Elongation must lie in 0..{matroid.corank}, got {elongation}")
        super().__init__(matroid.ground_set)
        self.matroid = matroid
        self.elongation = elongation

    @property
    def k(self) -> int:
        return self.matroid.k + self.elongation

    def _rank(self, mask: int) -> int:
        r = self.matroid._rank(mask)
        size = popcount(mask)
        if size - r > self.elongation:
            return r + self.elongation
        return size

    def _is_independent(self, mask: int) -> bool:
        return self.matroid._nullity(mask) <= self.elongation

    def __repr__(self) -> str:
        return f"Elongation({self.matroid!r}, {self.elongation})"


__all__ = ['Elongation']
