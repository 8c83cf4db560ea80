# -*- coding: utf-8 -*-
"""
subset.py - Subsets of a finite ground set as integer bitmasks.

Bit i of the mask is set  <=>  index i belongs to the subset.
All operations are pure: every method returns a new Subset.
"""

from dataclasses import dataclass
from itertools import combinations
from typing import Iterable, Iterator, List, Sequence

import numpy as np
from scipy.special import comb


@dataclass(frozen=True)
class Subset:
    """
    Finite set of ground-set indices.

    Equality is set equality (same mask). Ordering operators follow
    set inclusion, so `a <= b` reads "a is a subset of b".
    """
    mask: int = 0

    def __post_init__(self):
        if self.mask < 0:
            raise ValueError(f"Subset mask must be non-negative, got {self.mask}")

    # === Constructors ===

    @classmethod
    def empty(cls) -> 'Subset':
        return cls(0)

    @classmethod
    def full(cls, n: int) -> 'Subset':
        """All indices 0..n-1."""
        return cls((1 << n) - 1)

    @classmethod
    def of(cls, *indices: int) -> 'Subset':
        return cls.from_indices(indices)

    @classmethod
    def from_indices(cls, indices: Iterable[int]) -> 'Subset':
        mask = 0
        for i in indices:
            if i < 0:
                raise ValueError(f"Negative index {i}")
            mask |= 1 << i
        return cls(mask)

    # === Cardinality ===

    @property
    def size(self) -> int:
        return self.mask.bit_count()

    def __len__(self) -> int:
        return self.mask.bit_count()

    @property
    def is_empty(self) -> bool:
        return self.mask == 0

    @property
    def max_element(self) -> int:
        """Largest index in the subset (-1 when empty)."""
        return self.mask.bit_length() - 1

    # === Set Algebra ===

    def union(self, other: 'Subset') -> 'Subset':
        """S ∪ T."""
        return Subset(self.mask | other.mask)

    def intersect(self, other: 'Subset') -> 'Subset':
        """S ∩ T."""
        return Subset(self.mask & other.mask)

    def minus(self, other: 'Subset') -> 'Subset':
        """S \\ T."""
        return Subset(self.mask & ~other.mask)

    def symmetric_difference(self, other: 'Subset') -> 'Subset':
        """S ⊕ T = (S ∪ T) \\ (S ∩ T)."""
        return Subset(self.mask ^ other.mask)

    def add(self, element: int) -> 'Subset':
        return Subset(self.mask | (1 << element))

    def remove(self, element: int) -> 'Subset':
        return Subset(self.mask & ~(1 << element))

    def contains(self, element: int) -> bool:
        return element >= 0 and (self.mask >> element) & 1 == 1

    def __contains__(self, element: object) -> bool:
        return isinstance(element, int) and self.contains(element)

    __or__ = union
    __and__ = intersect
    __sub__ = minus
    __xor__ = symmetric_difference

    # === Inclusion Order ===

    def issubset(self, other: 'Subset') -> bool:
        return self.mask & other.mask == self.mask

    def issuperset(self, other: 'Subset') -> bool:
        return other.issubset(self)

    def __le__(self, other: 'Subset') -> bool:
        if not isinstance(other, Subset):
            return NotImplemented
        return self.issubset(other)

    def __lt__(self, other: 'Subset') -> bool:
        if not isinstance(other, Subset):
            return NotImplemented
        return self.mask != other.mask and self.issubset(other)

    def __ge__(self, other: 'Subset') -> bool:
        if not isinstance(other, Subset):
            return NotImplemented
        return other.issubset(self)

    def __gt__(self, other: 'Subset') -> bool:
        if not isinstance(other, Subset):
            return NotImplemented
        return self.mask != other.mask and other.issubset(self)

    # === Iteration ===

    def __iter__(self) -> Iterator[int]:
        """Indices in ascending order."""
        mask = self.mask
        while mask:
            low = mask & -mask
            yield low.bit_length() - 1
            mask ^= low

    def to_list(self) -> List[int]:
        return list(self)

    # === Re-indexing ===

    def extend(self, into: 'Subset') -> 'Subset':
        """
        Place this subset of range(|into|) onto the members of `into`.

        The i-th smallest member of `into` is selected iff index i is in self.
        Example: Subset.of(0, 2).extend(Subset.of(1, 3, 4)) == Subset.of(1, 4)
        """
        mask = 0
        for position, element in enumerate(into):
            if (self.mask >> position) & 1:
                mask |= 1 << element
        return Subset(mask)

    def union_of(self, sets: Sequence['Subset']) -> 'Subset':
        """Union of the sets whose positions are selected by self."""
        mask = 0
        for i in self:
            mask |= sets[i].mask
        return Subset(mask)

    def __repr__(self) -> str:
        return "{" + ", ".join(str(i) for i in self) + "}"


def mask_of(indices: Iterable[int]) -> int:
    mask = 0
    for i in indices:
        mask |= 1 << i
    return mask


def popcount(mask: int) -> int:
    return mask.bit_count()


def iter_members(mask: int) -> Iterator[int]:
    """Ascending indices of a raw mask."""
    while mask:
        low = mask & -mask
        yield low.bit_length() - 1
        mask ^= low


def extend_mask(selection: int, into: int) -> int:
    """Raw-mask form of Subset.extend."""
    mask = 0
    position = 0
    while into and selection >> position:
        low = into & -into
        if (selection >> position) & 1:
            mask |= low
        into ^= low
        position += 1
    return mask


def canonical_key(mask: int):
    """Sort key: by size, then lexicographically on the sorted indices."""
    return (mask.bit_count(), tuple(iter_members(mask)))


def submasks_of_size(mask: int, k: int) -> Iterator[int]:
    """All k-element submasks of `mask`, lexicographically."""
    for selection in SubsetsOfSize(popcount(mask), k).masks():
        yield extend_mask(selection, mask)


# === Mask arrays ===

_bit_count = np.frompyfunc(int.bit_count, 1, 1)


def mask_array(masks: Iterable[int], width: int) -> np.ndarray:
    """
    Masks over `width` elements as a numpy array.

    uint64 while the masks fit in a machine word, Python ints (object
    dtype) beyond that.
    """
    if width <= 64:
        return np.fromiter(masks, dtype=np.uint64)
    return np.array(list(masks), dtype=object)


def popcount_array(masks: np.ndarray) -> np.ndarray:
    """Element-wise bit counts of a mask array, as int64."""
    if masks.dtype == object:
        return _bit_count(masks).astype(np.int64)
    return np.bitwise_count(masks).astype(np.int64)


class SubsetsOfSize:
    """
    Lazy, restartable enumeration of all k-subsets of range(n).

    Order is lexicographic on the sorted index tuples, which makes
    every scan built on top of it deterministic across runs.
    """

    def __init__(self, n: int, k: int):
        if n < 0 or k < 0:
            raise ValueError(f"n and k must be non-negative (n={n}, k={k})")
        self.n = n
        self.k = k

    def masks(self) -> Iterator[int]:
        """Raw integer masks, same order as iteration."""
        if self.k > self.n:
            return
        for combo in combinations(range(self.n), self.k):
            mask = 0
            for i in combo:
                mask |= 1 << i
            yield mask

    def __iter__(self) -> Iterator[Subset]:
        return (Subset(m) for m in self.masks())

    def __len__(self) -> int:
        if self.k > self.n:
            return 0
        return int(comb(self.n, self.k, exact=True))

    def __repr__(self) -> str:
        return f"SubsetsOfSize(n={self.n}, k={self.k})"


def subsets_of_size(n: int, k: int) -> SubsetsOfSize:
    return SubsetsOfSize(n, k)


def subsets_up_to_size(n: int, k: int) -> Iterator[Subset]:
    """Subsets of size 0..k, by size then lexicographically."""
    for size in range(min(k, n) + 1):
        yield from SubsetsOfSize(n, size)


def all_subsets(n: int) -> Iterator[Subset]:
    """All 2^n subsets, by size then lexicographically."""
    return subsets_up_to_size(n, n)


__all__ = [
    'Subset', 'SubsetsOfSize', 'subsets_of_size', 'subsets_up_to_size',
    'all_subsets', 'mask_of', 'popcount', 'iter_members', 'extend_mask',
    'canonical_key', 'submasks_of_size', 'mask_array', 'popcount_array',
]
