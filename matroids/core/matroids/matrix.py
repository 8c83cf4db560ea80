# -*- coding: utf-8 -*-
"""
matroids/matrix.py - Column matroid of a matrix.

Element j is column j; a set of columns is independent iff the columns are
linearly independent. Over GF(p) the rank is computed by Gaussian
elimination mod p, over the reals (p=None) by numpy's SVD-based rank.
"""

from typing import Optional, Sequence

import numpy as np

from ..base import Matroid
from ..errors import InvalidInput
from ..subset import iter_members, popcount


def _is_prime(p: int) -> bool:
    if p < 2:
        return False
    d = 2
    while d * d <= p:
        if p % d == 0:
            return False
        d += 1
    return True


def rank_mod_p(A: np.ndarray, p: int) -> int:
    """Rank of an integer matrix over GF(p) (row reduction, vectorized per pivot)."""
    A = np.array(A, dtype=np.int64) % p
    rows, cols = A.shape
    r = 0
    for j in range(cols):
        if r == rows:
            break
        nonzero = np.flatnonzero(A[r:, j])
        if len(nonzero) == 0:
            continue
        pivot = r + nonzero[0]
        if pivot != r:
            A[[r, pivot]] = A[[pivot, r]]
        inv = pow(int(A[r, j]), p - 2, p)
        A[r] = (A[r] * inv) % p
        # Clear column j below the pivot row
        factors = A[r + 1:, j].copy()
        A[r + 1:] = (A[r + 1:] - np.outer(factors, A[r])) % p
        r += 1
    return r


class MatrixMatroid(Matroid):
    """
    Matroid of the columns of `matrix`.

    Args:
        matrix: 2D array-like, one column per element
        p: prime field characteristic, or None for real entries
        labels: optional ground-set labels (defaults to 0..cols-1)
    """

    def __init__(self, matrix, p: Optional[int] = 2, labels: Sequence = None):
        A = np.asarray(matrix)
        if A.ndim != 2:
            raise InvalidInput(f"Expected a 2D matrix, got shape {A.shape}")
        if p is not None:
            if not _is_prime(p):
                raise InvalidInput(f"Field characteristic must be prime, got {p}")
            if not np.issubdtype(A.dtype, np.integer):
                if not np.all(np.equal(np.mod(A, 1), 0)):
                    raise InvalidInput("Entries of a matrix over GF(p) must be integers")
            A = A.astype(np.int64) % p
        else:
            A = A.astype(float)
        super().__init__(labels if labels is not None else A.shape[1])
        if self.n != A.shape[1]:
            raise InvalidInput(f"{self.n} labels for {A.shape[1]} columns")
        self.matrix = A
        self.p = p

    def _rank(self, mask: int) -> int:
        if mask == 0 or self.matrix.shape[0] == 0:
            return 0
        columns = self.matrix[:, list(iter_members(mask))]
        if self.p is None:
            return int(np.linalg.matrix_rank(columns))
        return rank_mod_p(columns, self.p)

    def _is_independent(self, mask: int) -> bool:
        return self._rank(mask) == popcount(mask)

    def __repr__(self) -> str:
        field = "R" if self.p is None else f"GF({self.p})"
        rows, cols = self.matrix.shape
        return f"MatrixMatroid({rows}x{cols} over {field})"


__all__ = ['MatrixMatroid', 'rank_mod_p']
