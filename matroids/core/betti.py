# -*- coding: utf-8 -*-
"""
betti.py - Graded Betti numbers of a matroid.

These are the Betti numbers of the Stanley-Reisner ring of the
independence complex. By Hochster's formula only cycles σ (unions of
circuits) contribute, with

    β(σ) = (-1)^(r(σ)+1) · χ(M|σ),    χ = Σ_i (-1)^(i+1) f_i

where f_i counts independent subsets of σ of size i. β(σ) is added to
b_{i,j} with i = nullity(σ) and j = |σ|.
"""

from typing import Dict, List, Tuple, TYPE_CHECKING

import numpy as np

from .subset import SubsetsOfSize, extend_mask, popcount

if TYPE_CHECKING:
    from .base import Matroid


def betti_of_subset(matroid: 'Matroid', mask: int) -> int:
    """β(σ) for a single subset; zero unless σ is a cycle."""
    if not matroid._is_cycle(mask):
        return 0
    r = matroid._rank(mask)
    size = popcount(mask)
    euler = 0
    for i in range(r + 1):
        count = sum(
            1 for selection in SubsetsOfSize(size, i).masks()
            if matroid._is_independent(extend_mask(selection, mask))
        )
        euler += count if i % 2 else -count
    return euler if r % 2 else -euler


class BettiNumbers:
    """
    Table of non-zero Betti numbers b_{i,j}.

    Computed by one pass over all 2^n subsets, so practical for small
    ground sets only.
    """

    def __init__(self, matroid: 'Matroid'):
        self.n = matroid.n
        self.corank = matroid.n - matroid.k
        table: Dict[Tuple[int, int], int] = {(0, 0): 1}
        for size in range(1, self.n + 1):
            for mask in SubsetsOfSize(self.n, size).masks():
                b = betti_of_subset(matroid, mask)
                if b == 0:
                    continue
                key = (matroid._nullity(mask), size)
                table[key] = table.get(key, 0) + b
        self._table = table

    def betti(self, i: int, j: int) -> int:
        """b_{i,j} (zero when absent)."""
        return self._table.get((i, j), 0)

    def betti_numbers(self) -> List[Tuple[int, int, int]]:
        """Non-zero (i, j, b_{i,j}) sorted by i then j."""
        return sorted((i, j, b) for (i, j), b in self._table.items() if b != 0)

    def as_array(self) -> np.ndarray:
        """Dense (corank+1) x (n+1) integer table."""
        table = np.zeros((self.corank + 1, self.n + 1), dtype=np.int64)
        for (i, j), b in self._table.items():
            table[i, j] = b
        return table

    def to_latex(self) -> str:
        """Free resolution 0 ← S/I ← S ← S(-j)^b ... ← 0."""
        parts = ["0 \\leftarrow S / I"]
        previous = -1
        for i, j, b in self.betti_numbers():
            parts.append(" \\leftarrow " if i != previous else " \\oplus ")
            previous = i
            term = "S"
            if j != 0:
                term += f"(-{j})"
            if b != 1:
                term += f"^{{{b}}}"
            parts.append(term)
        parts.append(" \\leftarrow 0")
        return "".join(parts)

    def __str__(self) -> str:
        return self.to_latex()

    def __repr__(self) -> str:
        return f"BettiNumbers({self.betti_numbers()})"


__all__ = ['BettiNumbers', 'betti_of_subset']
