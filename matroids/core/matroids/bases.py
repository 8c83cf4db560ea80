# -*- coding: utf-8 -*-
"""
matroids/bases.py - Matroid given by its list of bases.

rank(S) = max |S ∩ B| over bases B; S is independent iff S ⊆ B for some B.
"""

from typing import Iterable, Iterator, List, Union

from ..base import Matroid
from ..errors import InvalidInput
from ..subset import Subset, canonical_key, popcount

# Independent sets are tabulated when |bases| · 2^k stays below this.
INDEPENDENT_TABLE_LIMIT = 1 << 18


def normalize_family(sets: Iterable[Union[Subset, Iterable[int]]], n: int, what: str) -> List[int]:
    """
    Masks of a generating family in canonical order.

    Raises InvalidInput for out-of-range indices and duplicate members.
    """
    masks = []
    seen = set()
    for position, s in enumerate(sets):
        if isinstance(s, Subset):
            mask = s.mask
        else:
            indices = list(s)
            if any(not isinstance(i, int) or i < 0 or i >= n for i in indices):
                raise InvalidInput(f"{what} #{position} {indices} has indices outside 0..{n - 1}")
            if len(set(indices)) != len(indices):
                raise InvalidInput(f"{what} #{position} {indices} repeats an element")
            mask = 0
            for i in indices:
                mask |= 1 << i
        if mask >> n:
            raise InvalidInput(f"{what} #{position} {Subset(mask)!r} has indices outside 0..{n - 1}")
        if mask in seen:
            raise InvalidInput(f"Duplicate {what} {Subset(mask)!r}")
        seen.add(mask)
        masks.append(mask)
    return sorted(masks, key=canonical_key)


class BasesMatroid(Matroid):
    """Matroid from an explicit list of bases (all of the same size)."""

    def __init__(self, ground_set, bases: Iterable[Union[Subset, Iterable[int]]]):
        super().__init__(ground_set)
        masks = normalize_family(bases, self.n, "basis")
        if not masks:
            raise InvalidInput("A matroid has at least one basis (possibly the empty set)")
        sizes = {popcount(m) for m in masks}
        if len(sizes) != 1:
            raise InvalidInput(f"Bases must all have the same size, got sizes {sorted(sizes)}")
        self._basis_masks = tuple(masks)
        self._rank_of_matroid = sizes.pop()
        self._independent_table = None
        if len(masks) << self._rank_of_matroid <= INDEPENDENT_TABLE_LIMIT:
            self._independent_table = self._tabulate_independents()

    def _tabulate_independents(self) -> frozenset:
        table = set()
        for basis in self._basis_masks:
            # Walk every submask of the basis.
            sub = basis
            while True:
                table.add(sub)
                if sub == 0:
                    break
                sub = (sub - 1) & basis
        return frozenset(table)

    @property
    def k(self) -> int:
        return self._rank_of_matroid

    @staticmethod
    def rank_of_subset_given_bases(mask: int, bases) -> int:
        """max |S ∩ B|, stopping early once it reaches the basis size."""
        best = 0
        for basis in bases:
            size = popcount(basis & mask)
            if size > best:
                best = size
                if best == popcount(basis):
                    break
        return best

    def _rank(self, mask: int) -> int:
        if self._independent_table is not None and mask in self._independent_table:
            return popcount(mask)
        return self.rank_of_subset_given_bases(mask, self._basis_masks)

    def _is_independent(self, mask: int) -> bool:
        if popcount(mask) > self._rank_of_matroid:
            return False
        if self._independent_table is not None:
            return mask in self._independent_table
        return any(mask & basis == mask for basis in self._basis_masks)

    def iter_bases(self, workers: int = 1, chunk_size: int = 2048) -> Iterator[Subset]:
        return (Subset(m) for m in self._basis_masks)

    def basis_masks(self) -> tuple:
        return self._basis_masks

    def __repr__(self) -> str:
        return f"BasesMatroid(n={self.n}, k={self.k}, bases={len(self._basis_masks)})"


__all__ = ['BasesMatroid', 'normalize_family']
