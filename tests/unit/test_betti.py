# -*- coding: utf-8 -*-
"""
Unit Tests: Betti numbers and connectivity

Covers:
- Graded Betti numbers of uniform and catalogue matroids
- Dense table and free-resolution rendering
- Connected components via the circuit graph
"""

import numpy as np
import pytest

from matroids.core.betti import BettiNumbers, betti_of_subset
from matroids.core.matroids import (
    CircuitsMatroid, UniformMatroid, Vamos, hamming_7_4, matroid_1, matroid_2,
)
from matroids.core.subset import Subset
from matroids.core.topology import get_adjacency_matrix, partition_by_connectivity


# ============================================================
# BETTI NUMBERS
# ============================================================

class TestBettiNumbers:

    def test_u12(self):
        m = UniformMatroid(1, 2)
        assert m.betti_number(1, 2) == 1
        assert m.betti().betti_numbers() == [(0, 0, 1), (1, 2, 1)]

    def test_u24(self):
        betti = UniformMatroid(2, 4).betti()
        assert betti.betti_numbers() == [(0, 0, 1), (1, 3, 4), (2, 4, 3)]
        assert betti.betti(1, 3) == 4
        assert betti.betti(1, 4) == 0

    def test_subset_contributions(self):
        m = UniformMatroid(2, 4)
        assert m.betti_num(Subset.of(0, 1, 2)) == 1
        assert m.betti_num(Subset.full(4)) == 3
        assert betti_of_subset(m, Subset.of(0, 1).mask) == 0

    def test_example_matroids_share_betti_numbers(self):
        expected = [(0, 0, 1), (1, 2, 1), (1, 4, 5), (2, 5, 4), (2, 6, 5), (3, 7, 4)]
        assert matroid_1().betti().betti_numbers() == expected
        assert matroid_2().betti().betti_numbers() == expected

    def test_alternating_sum_vanishes(self):
        """Σ (-1)^i b_{i,j} over the resolution is zero for a non-empty ground set."""
        rows = BettiNumbers(Vamos()).betti_numbers()
        assert sum(b if i % 2 == 0 else -b for i, _, b in rows) == 0

    def test_as_array(self):
        table = UniformMatroid(2, 4).betti().as_array()
        assert table.shape == (3, 5)
        assert table.dtype == np.int64
        assert table[0, 0] == 1
        assert table[1, 3] == 4
        assert table[2, 4] == 3
        assert table.sum() == 8

    def test_to_latex(self):
        latex = UniformMatroid(2, 4).betti().to_latex()
        assert latex == ("0 \\leftarrow S / I \\leftarrow S \\leftarrow S(-3)^{4}"
                         " \\leftarrow S(-4)^{3} \\leftarrow 0")
        assert str(UniformMatroid(2, 4).betti()) == latex

    def test_direct_sum_in_resolution(self):
        """Two terms at the same homological degree are joined by ⊕."""
        latex = matroid_1().betti().to_latex()
        assert "S(-2) \\oplus S(-4)^{5}" in latex


# ============================================================
# CONNECTIVITY
# ============================================================

class TestConnectivity:

    def test_components(self):
        m = CircuitsMatroid(4, [[0, 1]])
        assert m.components() == [Subset.of(0, 1), Subset.of(2), Subset.of(3)]
        assert not m.is_connected()

    def test_connected(self):
        assert UniformMatroid(2, 4).is_connected()
        assert hamming_7_4().is_connected()
        assert Vamos().is_connected()

    def test_adjacency_is_symmetric(self):
        A = get_adjacency_matrix(UniformMatroid(1, 3)).toarray()
        assert (A == A.T).all()
        assert A.diagonal().sum() == 0
        assert A.sum() == 6

    def test_trivial_ground_sets(self):
        assert partition_by_connectivity(UniformMatroid(0, 0)) == []
        assert partition_by_connectivity(UniformMatroid(1, 1)) == [Subset.of(0)]


# ============================================================
# MAIN
# ============================================================

if __name__ == "__main__":
    pytest.main([__file__, "-v"])
