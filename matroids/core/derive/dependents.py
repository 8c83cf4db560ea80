# -*- coding: utf-8 -*-
"""
derive/dependents.py - Dependent families over the circuits of a matroid.

Derived elements are the circuits C_0, C_1, ... of the source matroid M.
A set X of derived elements is written as a selection mask over those
indices, and ∪X is the union of the selected circuits in M.

Building blocks of the combinatorial derived matroid:
    initial_dependents   A₀ = {X : 3 <= |X| <= r, |X| > nullity_M(∪X)}
    inclusion_minimal    reduce a family to its inclusion-minimal members
    epsilon              the ε-closure step on pairs of dependents
    bases_from_dependents  size-r selections containing no dependent
    fast_bases           direct basis test for fast (e.g. uniform) sources

Dependents never exceed the rank r, so "does X contain a dependent" is
answered by looking up the submasks of X in a hash set, not by scanning
the family. The work functions below are module-level so the parallel
scans can ship them to worker processes.
"""

from typing import Callable, FrozenSet, Iterable, List, Optional, Sequence, Set, Tuple

import numpy as np
from scipy.special import comb

from ..parallel import parallel_filter, parallel_map
from ..subset import (
    SubsetsOfSize, canonical_key, extend_mask, mask_array, popcount,
    popcount_array, submasks_of_size,
)
from ...utils.logger import get_logger


class NullityCache:
    """
    nullity_M(∪X) for selections X, memoized on the union mask.

    Many selections share a union (that is the point of the construction),
    so the source rank oracle is consulted once per distinct union.
    """

    def __init__(self, matroid, circuits: Sequence):
        self.matroid = matroid
        self.circuits = tuple(c.mask for c in circuits)
        self._cache = {}

    def __len__(self) -> int:
        return len(self.circuits)

    def union(self, selection: int) -> int:
        mask = 0
        position = 0
        while selection:
            if selection & 1:
                mask |= self.circuits[position]
            selection >>= 1
            position += 1
        return mask

    def nullity_of_union(self, selection: int) -> int:
        union = self.union(selection)
        value = self._cache.get(union)
        if value is None:
            value = self.matroid._nullity(union)
            self._cache[union] = value
        return value


class DependentSet:
    """Hash set of dependents answering containment by submask lookup."""

    def __init__(self, dependents: Iterable[int]):
        self.members: FrozenSet[int] = frozenset(dependents)
        self.sizes: Tuple[int, ...] = tuple(sorted({popcount(d) for d in self.members}))

    def __len__(self) -> int:
        return len(self.members)

    def __contains__(self, mask: int) -> bool:
        return mask in self.members

    def lookups(self, size: int) -> int:
        """Submask lookups needed for a set of `size` elements."""
        return sum(int(comb(size, s, exact=True)) for s in self.sizes if s <= size)

    def inside(self, mask: int) -> bool:
        """Some dependent D ⊆ mask (D = mask included)."""
        size = popcount(mask)
        for s in self.sizes:
            if s > size:
                break
            for sub in submasks_of_size(mask, s):
                if sub in self.members:
                    return True
        return False


# === Work functions (context, item) ===

def _exceeds_nullity(cache: NullityCache, selection: int) -> bool:
    return popcount(selection) > cache.nullity_of_union(selection)


def _avoids_dependents(dependents: DependentSet, selection: int) -> bool:
    return not dependents.inside(selection)


def _avoids_listed(dependents: Tuple[int, ...], selection: int) -> bool:
    return not any(d & selection == d for d in dependents)


def _passes_basis_test(context: Tuple[NullityCache, int], selection: int) -> bool:
    cache, rank = context
    for size in range(3, rank + 1):
        for sub in SubsetsOfSize(rank, size).masks():
            if cache.nullity_of_union(extend_mask(sub, selection)) < size:
                return False
    return True


def _epsilon_row(context: Tuple[np.ndarray, DependentSet, int], i: int) -> List[int]:
    """Sets generated by family[i] with every later member of the family."""
    family, dependents, rank = context
    rest = family[i + 1:]
    if len(rest) == 0:
        return []
    di = family[i]
    unions = rest | di
    intersections = rest & di
    usable = (popcount_array(unions) - 1 <= rank) & (popcount_array(intersections) > 0)

    generated = []
    for union, intersection in zip(unions[usable].tolist(), intersections[usable].tolist()):
        # |I| < 3 never contains a dependent
        if popcount(intersection) >= 3 and dependents.inside(intersection):
            continue
        bit = intersection
        while bit:
            low = bit & -bit
            generated.append(union & ~low)
            bit ^= low
    return generated


# === Family operations ===

def initial_dependents(cache: NullityCache, rank: int, workers: int = 1,
                       chunk_size: int = 2048, limit: Optional[int] = None,
                       on_limit: Optional[Callable[[int], None]] = None) -> List[int]:
    """
    A₀, scanned by size 3..rank in enumeration order.

    Stops as soon as more than `limit` dependents are found and reports
    the count to on_limit.
    """
    logger = get_logger()
    found = []
    for size in range(3, rank + 1):
        remaining = None if limit is None else limit - len(found)
        found.extend(parallel_filter(_exceeds_nullity, SubsetsOfSize(len(cache), size).masks(),
                                     workers, chunk_size, limit=remaining, context=cache))
        logger.scan_progress("initial dependent levels", size - 2, rank - 2)
        if limit is not None and len(found) > limit:
            if on_limit is not None:
                on_limit(len(found))
            break
    return found


def inclusion_minimal(family: Iterable[int]) -> List[int]:
    """
    Inclusion-minimal members, in canonical order.

    Sets of size 3 are always kept: no member is smaller than that.
    Members are visited smallest first, so a member is dropped exactly
    when one of its proper submasks was kept before it.
    """
    kept = []
    members = set()
    for mask in sorted(set(family), key=canonical_key):
        size = popcount(mask)
        if size > 3 and _contains_proper(mask, members, size):
            continue
        kept.append(mask)
        members.add(mask)
    return kept


def _contains_proper(mask: int, members: Set[int], size: int) -> bool:
    for s in range(3, size):
        for sub in submasks_of_size(mask, s):
            if sub in members:
                return True
    return False


def epsilon(dependents: Sequence[int], rank: int, workers: int = 1) -> Set[int]:
    """
    One ε-step: the family together with every (D1 ∪ D2) \\ {x}, x ∈ D1 ∩ D2.

    A pair contributes only if |D1 ∪ D2| - 1 <= rank and the intersection
    is non-empty and, when it has 3 or more elements, contains no dependent.
    No dependent has fewer than 3 elements, so smaller intersections
    never contain one.
    """
    family = list(dependents)
    width = max(family, default=0).bit_length()
    context = (mask_array(family, width), DependentSet(family), rank)

    result = set(family)
    for generated in parallel_map(_epsilon_row, range(len(family)), workers, context=context):
        result.update(generated)
    return result


def bases_from_dependents(dependents: Sequence[int], num_points: int, rank: int,
                          workers: int = 1, chunk_size: int = 2048) -> List[int]:
    """Size-`rank` selections of `num_points` elements containing no dependent."""
    relevant = DependentSet(d for d in dependents if popcount(d) <= rank)
    candidates = SubsetsOfSize(num_points, rank)
    if relevant.lookups(rank) <= len(relevant):
        bases = parallel_filter(_avoids_dependents, candidates.masks(), workers, chunk_size,
                                context=relevant)
    else:
        listed = tuple(sorted(relevant.members, key=canonical_key))
        bases = parallel_filter(_avoids_listed, candidates.masks(), workers, chunk_size,
                                context=listed)
    get_logger().scan_progress(f"bases of rank {rank}", len(bases), len(candidates))
    return bases


def fast_bases(cache: NullityCache, rank: int, workers: int = 1,
               chunk_size: int = 2048) -> List[int]:
    """
    Bases for fast sources: B is a basis iff every X ⊆ B with |X| >= 3
    has nullity_M(∪X) >= |X|.
    """
    return parallel_filter(_passes_basis_test, SubsetsOfSize(len(cache), rank).masks(),
                           workers, chunk_size, context=(cache, rank))


__all__ = [
    'NullityCache', 'DependentSet', 'initial_dependents', 'inclusion_minimal',
    'epsilon', 'bases_from_dependents', 'fast_bases',
]
