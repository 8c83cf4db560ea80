# -*- coding: utf-8 -*-
"""
Unit Tests: Subsets and Ground Sets

Covers:
- Subset set algebra, inclusion order, re-indexing
- SubsetsOfSize / all_subsets enumeration order
- GroundSet label lookup and validation
"""

import pytest

from matroids.core.errors import InvalidInput
from matroids.core.ground_set import GroundSet, as_ground_set
from matroids.core.subset import (
    Subset, SubsetsOfSize, all_subsets, canonical_key, extend_mask,
    iter_members, subsets_of_size, subsets_up_to_size,
)


# ============================================================
# SUBSET
# ============================================================

class TestSubset:
    """Bitmask-backed subset value."""

    def test_of_builds_mask(self):
        s = Subset.of(0, 2)
        assert s.mask == 0b101
        assert s.size == 2
        assert len(s) == 2
        assert s.to_list() == [0, 2]

    def test_equality_is_set_equality(self):
        assert Subset.of(2, 0) == Subset.from_indices([0, 2, 2])
        assert hash(Subset.of(1, 3)) == hash(Subset(0b1010))

    def test_empty_and_full(self):
        assert Subset.empty().is_empty
        assert Subset.full(4) == Subset.of(0, 1, 2, 3)
        assert Subset.full(0) == Subset.empty()

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            Subset(-1)
        with pytest.raises(ValueError):
            Subset.of(-2)

    def test_set_algebra(self):
        a, b = Subset.of(0, 1, 2), Subset.of(2, 3)
        assert a | b == Subset.of(0, 1, 2, 3)
        assert a & b == Subset.of(2)
        assert a - b == Subset.of(0, 1)
        assert a ^ b == Subset.of(0, 1, 3)
        assert a.union(b) == a | b
        assert a.intersect(b) == a & b

    def test_add_remove_contains(self):
        s = Subset.of(1).add(4)
        assert 4 in s
        assert s.contains(1)
        assert 0 not in s
        assert s.remove(1) == Subset.of(4)
        assert "x" not in s

    def test_inclusion_order(self):
        small, big = Subset.of(1), Subset.of(1, 2)
        assert small < big
        assert small <= big
        assert big >= small
        assert big > small
        assert not big < big
        assert big <= big
        assert not Subset.of(0) <= Subset.of(1)
        assert small.issubset(big)
        assert big.issuperset(small)

    def test_iteration_ascending_and_restartable(self):
        s = Subset.of(7, 3, 0)
        assert list(s) == [0, 3, 7]
        assert list(s) == [0, 3, 7]

    def test_max_element(self):
        assert Subset.of(3, 7).max_element == 7
        assert Subset.empty().max_element == -1

    def test_extend(self):
        """Positions 0 and 2 of {1, 3, 4} are 1 and 4."""
        assert Subset.of(0, 2).extend(Subset.of(1, 3, 4)) == Subset.of(1, 4)
        assert extend_mask(0b101, 0b11010) == 0b10010

    def test_union_of(self):
        sets = [Subset.of(0), Subset.of(1), Subset.of(5)]
        assert Subset.of(0, 2).union_of(sets) == Subset.of(0, 5)
        assert Subset.empty().union_of(sets) == Subset.empty()

    def test_repr(self):
        assert repr(Subset.of(0, 1)) == "{0, 1}"
        assert repr(Subset.empty()) == "{}"

    def test_iter_members(self):
        assert list(iter_members(0b101100)) == [2, 3, 5]
        assert list(iter_members(0)) == []


# ============================================================
# ENUMERATION
# ============================================================

class TestSubsetsOfSize:
    """Lexicographic k-subset enumeration."""

    def test_lexicographic_order(self):
        masks = list(SubsetsOfSize(4, 2).masks())
        assert masks == [0b0011, 0b0101, 0b1001, 0b0110, 0b1010, 0b1100]

    def test_length_is_binomial(self):
        assert len(SubsetsOfSize(6, 3)) == 20
        assert len(subsets_of_size(10, 0)) == 1
        assert len(SubsetsOfSize(3, 5)) == 0

    def test_restartable(self):
        enum = SubsetsOfSize(5, 2)
        assert list(enum) == list(enum)
        assert len(list(enum)) == 10

    def test_k_greater_than_n_is_empty(self):
        assert list(SubsetsOfSize(3, 5)) == []

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            SubsetsOfSize(-1, 2)

    def test_all_subsets_by_size(self):
        subsets = list(all_subsets(3))
        assert len(subsets) == 8
        assert subsets[0] == Subset.empty()
        sizes = [s.size for s in subsets]
        assert sizes == sorted(sizes)
        assert subsets[-1] == Subset.full(3)

    def test_subsets_up_to_size(self):
        assert len(list(subsets_up_to_size(4, 2))) == 1 + 4 + 6

    def test_canonical_key(self):
        masks = [0b110, 0b1, 0b11, 0b101]
        assert sorted(masks, key=canonical_key) == [0b1, 0b11, 0b101, 0b110]


# ============================================================
# GROUND SET
# ============================================================

class TestGroundSet:
    """Ordered label universe."""

    def test_labels_and_lookup(self):
        g = GroundSet(["a", "b", "c"])
        assert len(g) == 3
        assert list(g) == ["a", "b", "c"]
        assert g.label(1) == "b"
        assert g.index("c") == 2

    def test_subset_round_trip(self):
        g = GroundSet(["a", "b", "c"])
        s = g.subset(["a", "c"])
        assert s == Subset.of(0, 2)
        assert g.labels_of(s) == ("a", "c")

    def test_duplicate_labels_rejected(self):
        with pytest.raises(InvalidInput):
            GroundSet(["a", "b", "a"])

    def test_unknown_label(self):
        with pytest.raises(InvalidInput):
            GroundSet(["a"]).index("z")

    def test_of_size(self):
        g = GroundSet.of_size(4)
        assert g.labels == (0, 1, 2, 3)
        assert g.full() == Subset.full(4)
        assert g.contains(Subset.of(3))
        assert not g.contains(Subset.of(4))
        with pytest.raises(InvalidInput):
            GroundSet.of_size(-1)

    def test_equality(self):
        assert GroundSet.of_size(3) == GroundSet([0, 1, 2])
        assert GroundSet(["x"]) != GroundSet(["y"])

    def test_as_ground_set(self):
        assert as_ground_set(3) == GroundSet.of_size(3)
        assert as_ground_set(["p", "q"]) == GroundSet(["p", "q"])
        g = GroundSet.of_size(2)
        assert as_ground_set(g) is g
        with pytest.raises(InvalidInput):
            as_ground_set("abc")


# ============================================================
# MAIN
# ============================================================

if __name__ == "__main__":
    pytest.main([__file__, "-v"])
