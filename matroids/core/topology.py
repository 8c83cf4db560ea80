#!/usr/bin/env python3
"""Connectivity analysis: partition a matroid into its connected components."""

import numpy as np
from typing import List, TYPE_CHECKING

from scipy.sparse import csr_matrix
from scipy.sparse.csgraph import connected_components

from .subset import Subset

if TYPE_CHECKING:
    from .base import Matroid


def get_adjacency_matrix(matroid: 'Matroid') -> csr_matrix:
    """
    A[e, f] = 1 iff e ≠ f lie on a common circuit.

    Being on a common circuit is an equivalence relation (together with
    e = f), so connected components of this graph are the matroid components.
    """
    n = matroid.n
    rows, cols = [], []
    for circuit in matroid.circuits():
        members = circuit.to_list()
        for a in members:
            for b in members:
                if a != b:
                    rows.append(a)
                    cols.append(b)
    data = np.ones(len(rows), dtype=int)
    A = csr_matrix((data, (rows, cols)), shape=(n, n))
    A.data[:] = 1  # Binarize
    return A


def get_component_labels(matroid: 'Matroid') -> np.ndarray:
    """Component label for each element."""
    if matroid.n == 0:
        return np.array([], dtype=int)
    if matroid.n == 1:
        return np.array([0], dtype=int)
    _, labels = connected_components(get_adjacency_matrix(matroid), directed=False)
    return labels


def partition_by_connectivity(matroid: 'Matroid') -> List[Subset]:
    """Connected components, ordered by their smallest element."""
    labels = get_component_labels(matroid)
    if len(labels) == 0:
        return []
    components = [Subset.from_indices(np.flatnonzero(labels == c).tolist())
                  for c in range(labels.max() + 1)]
    return sorted(components, key=lambda s: next(iter(s)))


__all__ = ['get_adjacency_matrix', 'get_component_labels', 'partition_by_connectivity']
