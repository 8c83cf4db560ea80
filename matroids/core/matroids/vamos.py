# -*- coding: utf-8 -*-
"""
matroids/vamos.py - The Vámos matroid V8.

Rank 4 on 8 elements: every set of at most 3 elements is independent,
every set of 5 or more is dependent, and exactly five 4-sets are dependent.
It is the smallest matroid that is not representable over any field.
"""

from ..base import Matroid
from ..subset import mask_of, popcount

# Dependent 4-sets (the non-spanning circuits)
VAMOS_CIRCUITS = frozenset(mask_of(c) for c in (
    (0, 3, 4, 5),
    (0, 3, 6, 7),
    (0, 1, 2, 3),
    (1, 2, 6, 7),
    (1, 2, 4, 5),
))


class Vamos(Matroid):

    def __init__(self):
        super().__init__(8)

    @property
    def k(self) -> int:
        return 4

    def _is_independent(self, mask: int) -> bool:
        size = popcount(mask)
        if size < 4:
            return True
        if size > 4:
            return False
        return mask not in VAMOS_CIRCUITS

    def _rank(self, mask: int) -> int:
        size = popcount(mask)
        if size < 4:
            return size
        if size == 4:
            return 3 if mask in VAMOS_CIRCUITS else 4
        # Any 5-set contains an independent 4-set
        return 4

    def is_uniform(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "Vamos()"


__all__ = ['Vamos', 'VAMOS_CIRCUITS']
