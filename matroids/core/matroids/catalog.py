# -*- coding: utf-8 -*-
"""
matroids/catalog.py - Named example matroids.

matroid_1 / matroid_2 are M and N of example 6.2 in "A generalization of
weight polynomials to matroids" (doi:10.1016/j.disc.2015.10.005): not
isomorphic, yet with the same Betti numbers.
"""

from ..subset import Subset, SubsetsOfSize, mask_of
from .bases import BasesMatroid
from .matrix import MatrixMatroid

# Bases are listed 1-based, as printed in the paper
_MATROID_1_BASES = [
    [1, 3, 4, 6, 7], [1, 2, 3, 6, 8], [1, 2, 3, 4, 8], [1, 2, 3, 5, 8],
    [1, 2, 5, 6, 8], [1, 2, 3, 4, 7], [1, 2, 3, 5, 7], [1, 2, 5, 6, 7],
    [1, 3, 4, 5, 7], [1, 3, 4, 6, 8], [1, 2, 4, 6, 8], [1, 2, 4, 6, 7],
    [1, 3, 4, 5, 8], [1, 2, 4, 5, 7], [1, 4, 5, 6, 7], [1, 2, 3, 6, 7],
    [1, 3, 5, 6, 7], [1, 4, 5, 6, 8], [1, 3, 5, 6, 8], [1, 2, 4, 5, 8],
]

_MATROID_2_BASES = [
    [1, 3, 4, 6, 7], [1, 2, 3, 4, 8], [1, 2, 3, 5, 8], [1, 2, 5, 6, 8],
    [1, 2, 3, 4, 7], [1, 2, 3, 5, 7], [1, 2, 5, 6, 7], [1, 3, 4, 5, 7],
    [1, 3, 4, 6, 8], [1, 2, 4, 6, 8], [1, 2, 4, 6, 7], [1, 3, 4, 5, 8],
    [1, 2, 4, 5, 7], [1, 3, 4, 5, 6], [1, 2, 4, 5, 6], [1, 3, 5, 6, 7],
    [1, 2, 3, 5, 6], [1, 2, 3, 4, 6], [1, 3, 5, 6, 8], [1, 2, 4, 5, 8],
]

# Generator matrix of the binary Hamming code Ham(7, 4)
HAMMING_7_4 = [
    [1, 0, 0, 0, 0, 1, 1],
    [0, 1, 0, 0, 1, 0, 1],
    [0, 0, 1, 0, 1, 1, 0],
    [0, 0, 0, 1, 1, 1, 1],
]

# Parity-check matrix of Ham(7, 4); its column matroid is the dual of the above
HAMMING_7_4_PARITY = [
    [0, 1, 1, 1, 1, 0, 0],
    [1, 0, 1, 1, 0, 1, 0],
    [1, 1, 0, 1, 0, 0, 1],
]


def _zero_based(bases):
    return [[i - 1 for i in basis] for basis in bases]


def matroid_1() -> BasesMatroid:
    """M of example 6.2: rank 5 on 8 elements, 20 bases."""
    return BasesMatroid(8, _zero_based(_MATROID_1_BASES))


def matroid_2() -> BasesMatroid:
    """N of example 6.2: rank 5 on 8 elements, 20 bases."""
    return BasesMatroid(8, _zero_based(_MATROID_2_BASES))


def non_fast_matroid() -> BasesMatroid:
    """
    Graphic matroid of a triangle with every edge doubled.

    Rank 2, nullity 4. Edges 2i and 2i+1 are parallel, so a pair of edges
    is a basis unless it is one of those parallel classes.
    """
    parallel = [mask_of((2 * i, 2 * i + 1)) for i in range(3)]
    bases = [m for m in SubsetsOfSize(6, 2).masks() if m not in parallel]
    return BasesMatroid(6, [Subset(m) for m in bases])


def hamming_7_4() -> MatrixMatroid:
    """Binary column matroid of the Ham(7, 4) generator matrix (rank 4 on 7 elements)."""
    return MatrixMatroid(HAMMING_7_4, p=2)


def hamming_7_4_parity() -> MatrixMatroid:
    """Binary column matroid of the Ham(7, 4) parity-check matrix (rank 3 on 7 elements)."""
    return MatrixMatroid(HAMMING_7_4_PARITY, p=2)


__all__ = [
    'matroid_1', 'matroid_2', 'non_fast_matroid', 'hamming_7_4',
    'hamming_7_4_parity', 'HAMMING_7_4', 'HAMMING_7_4_PARITY',
]
