#!/usr/bin/env python3
"""
base.py - Abstract Base Class for matroids.

A matroid is a ground set E with a family of independent sets such that
    (I1) ∅ is independent
    (I2) every subset of an independent set is independent
    (I3) if |I| < |J| are independent, some e ∈ J \\ I makes I ∪ {e} independent.

Concrete matroids implement `_is_independent(mask)`; everything else
(rank, bases, circuits, closure, flats, ...) is derived here and may be
overridden where a representation knows better. Subsets are passed as
`Subset` values or iterables of indices; internally they are int masks.

Enumerations are exponential in the size of the ground set by nature of
the problem. They are meant for small ground sets or bounded rank.
"""
import operator
from abc import ABC, abstractmethod
from functools import cached_property
from typing import Iterable, Iterator, List, Optional, TYPE_CHECKING, Union

from scipy.special import comb

from .errors import InputOutOfRange, InvalidInput
from .ground_set import GroundSet, as_ground_set
from .subset import (
    Subset, SubsetsOfSize, canonical_key, iter_members, popcount,
)
from .parallel import iter_filter

if TYPE_CHECKING:
    from .betti import BettiNumbers
    from .config import DerivationConfig
    from .derive.derived import CombinatorialDerived
    from .matroids.bases import BasesMatroid
    from .matroids.dual import Dual
    from .matroids.elongate import Elongation


SubsetLike = Union[Subset, Iterable[int]]


def _independent(matroid: 'Matroid', mask: int) -> bool:
    return matroid._is_independent(mask)


def _circuit(matroid: 'Matroid', mask: int) -> bool:
    return matroid._is_circuit(mask)


class Matroid(ABC):
    """Abstract base for every matroid representation."""

    def __init__(self, ground_set):
        self._ground_set = as_ground_set(ground_set)

    # === Primitive ===

    @abstractmethod
    def _is_independent(self, mask: int) -> bool:
        """Independence oracle on a raw mask already known to be in range."""
        pass

    def _rank(self, mask: int) -> int:
        """
        Greedy rank: extend an independent subset element by element.

        Any inclusion-maximal independent subset of S has size rank(S)
        (exchange axiom), so the scan order only affects speed.
        """
        independent = 0
        size = 0
        for i in iter_members(mask):
            candidate = independent | (1 << i)
            if self._is_independent(candidate):
                independent = candidate
                size += 1
        return size

    # === Ground Set ===

    @property
    def ground_set(self) -> GroundSet:
        return self._ground_set

    @property
    def n(self) -> int:
        """Size of the ground set."""
        return len(self._ground_set)

    @cached_property
    def k(self) -> int:
        """Rank of the matroid."""
        return self._rank(self._full_mask)

    @property
    def _full_mask(self) -> int:
        return (1 << self.n) - 1

    @property
    def corank(self) -> int:
        """|E| - rank(E)."""
        return self.n - self.k

    def _mask(self, subset: SubsetLike) -> int:
        """Coerce to a mask and check it lies in the ground set."""
        if isinstance(subset, Subset):
            if subset.mask >> self.n:
                raise InputOutOfRange(subset, self.n)
            return subset.mask
        mask = 0
        for i in subset:
            try:
                i = operator.index(i)
            except TypeError:
                raise InvalidInput(f"Subset indices must be integers, got {i!r}") from None
            if i < 0 or i >= self.n:
                raise InputOutOfRange(None, self.n, index=i)
            mask |= 1 << i
        return mask

    # === Rank Function ===

    def rank(self, subset: SubsetLike) -> int:
        """Size of a maximum independent subset of S."""
        return self._rank(self._mask(subset))

    def nullity(self, subset: SubsetLike) -> int:
        """|S| - rank(S)."""
        mask = self._mask(subset)
        if mask == self._full_mask:
            return self.n - self.k
        return popcount(mask) - self._rank(mask)

    def _nullity(self, mask: int) -> int:
        return popcount(mask) - self._rank(mask)

    def dual_rank(self, subset: SubsetLike) -> int:
        """Rank of S in the dual matroid: |S| + rank(E \\ S) - rank(E)."""
        mask = self._mask(subset)
        return popcount(mask) + self._rank(self._full_mask & ~mask) - self.k

    # === Independence Predicates ===

    def is_independent(self, subset: SubsetLike) -> bool:
        return self._is_independent(self._mask(subset))

    def is_dependent(self, subset: SubsetLike) -> bool:
        return not self.is_independent(subset)

    def is_basis(self, subset: SubsetLike) -> bool:
        mask = self._mask(subset)
        return popcount(mask) == self.k and self._is_independent(mask)

    def _is_circuit(self, mask: int) -> bool:
        if mask == 0 or self._is_independent(mask):
            return False
        return all(self._is_independent(mask & ~(1 << e)) for e in iter_members(mask))

    def is_circuit(self, subset: SubsetLike) -> bool:
        """Minimal dependent set: dependent, and independent after removing any element."""
        return self._is_circuit(self._mask(subset))

    def _is_cycle(self, mask: int) -> bool:
        if mask == 0:
            return False
        r = self._rank(mask)
        return all(self._rank(mask & ~(1 << e)) == r for e in iter_members(mask))

    def is_cycle(self, subset: SubsetLike) -> bool:
        """Non-empty union of circuits: no element is a coloop of S."""
        return self._is_cycle(self._mask(subset))

    # === Closure & Flats ===

    def _closure(self, mask: int) -> int:
        r = self._rank(mask)
        closed = mask
        for e in range(self.n):
            bit = 1 << e
            if not mask & bit and self._rank(mask | bit) == r:
                closed |= bit
        return closed

    def closure(self, subset: SubsetLike) -> Subset:
        """cl(S) = S ∪ {e : rank(S ∪ {e}) = rank(S)}."""
        return Subset(self._closure(self._mask(subset)))

    def is_flat(self, subset: SubsetLike) -> bool:
        mask = self._mask(subset)
        return self._closure(mask) == mask

    def flats(self) -> List[Subset]:
        """All flats; every flat is the closure of an independent set."""
        closed = {self._closure(s.mask) for s in self.independents()}
        return [Subset(m) for m in sorted(closed, key=canonical_key)]

    def flats_of_rank(self, r: int) -> List[Subset]:
        return [f for f in self.flats() if self._rank(f.mask) == r]

    def hyperplanes(self) -> List[Subset]:
        """Flats of rank k - 1."""
        if self.k == 0:
            return []
        return self.flats_of_rank(self.k - 1)

    # === Enumerations ===

    def iter_bases(self, workers: int = 1, chunk_size: int = 2048) -> Iterator[Subset]:
        """
        Lazily scan all size-k subsets and keep the independent ones.

        Exponential in n; only practical for small ground sets.
        """
        candidates = SubsetsOfSize(self.n, self.k).masks()
        for mask in iter_filter(_independent, candidates, workers, chunk_size, context=self):
            yield Subset(mask)

    @cached_property
    def _bases(self) -> tuple:
        return tuple(self.iter_bases())

    def bases(self) -> List[Subset]:
        return list(self._bases)

    def iter_circuits(self, workers: int = 1, chunk_size: int = 2048) -> Iterator[Subset]:
        """Minimal dependent sets, by size 1..k+1 (a circuit never exceeds k+1 elements)."""
        for size in range(1, min(self.k + 1, self.n) + 1):
            candidates = SubsetsOfSize(self.n, size).masks()
            for mask in iter_filter(_circuit, candidates, workers, chunk_size, context=self):
                yield Subset(mask)

    @cached_property
    def _circuits(self) -> tuple:
        return tuple(self.iter_circuits())

    def circuits(self) -> List[Subset]:
        return list(self._circuits)

    def independents(self) -> List[Subset]:
        """All independent sets, by size then lexicographically."""
        result = []
        for size in range(self.k + 1):
            result.extend(Subset(m) for m in SubsetsOfSize(self.n, size).masks()
                          if self._is_independent(m))
        return result

    def fundamental_circuit(self, element: int, basis: SubsetLike) -> Optional[Subset]:
        """The unique circuit in B ∪ {e}; None when e ∈ B."""
        b = self._mask(basis)
        if not self.is_basis(Subset(b)):
            raise InvalidInput(f"{Subset(b)!r} is not a basis")
        self._mask([element])
        if (b >> element) & 1:
            return None
        bit = 1 << element
        circuit = bit
        for x in iter_members(b):
            if self._is_independent((b & ~(1 << x)) | bit):
                circuit |= 1 << x
        return Subset(circuit)

    # === Global Invariants ===

    def is_uniform(self) -> bool:
        """
        Uniform iff it has C(n, k) bases.

        Counts all bases, so this is as expensive as bases().
        """
        return len(self._bases) == comb(self.n, self.k, exact=True)

    def is_equal(self, other: 'Matroid') -> bool:
        """Same independent sets on the same ground-set size (not isomorphism)."""
        if self.n != other.n or self.k != other.k:
            return False
        return all(
            self._is_independent(m) == other._is_independent(m)
            for size in range(self.n + 1)
            for m in SubsetsOfSize(self.n, size).masks()
        )

    def bases_series(self) -> List[int]:
        """Sorted number of bases containing each element (isomorphism invariant)."""
        counts = [0] * self.n
        for basis in self._bases:
            for e in basis:
                counts[e] += 1
        return sorted(counts)

    def generalized_hamming_distance(self, h: int) -> Optional[int]:
        """
        d_h: size of the smallest S with dual_rank(S) <= |S| - h.

        None when no such subset exists.
        """
        for size in range(h, self.n + 1):
            for mask in SubsetsOfSize(self.n, size).masks():
                dual = size + self._rank(self._full_mask & ~mask) - self.k
                if dual <= size - h:
                    return size
        return None

    def euler_characteristic(self) -> int:
        """Σ_i (-1)^(i+1) · #{independent sets of size i}."""
        total = 0
        for size in range(self.k + 1):
            count = sum(1 for m in SubsetsOfSize(self.n, size).masks() if self._is_independent(m))
            total += count if size % 2 else -count
        return total

    # === Constructions ===

    def restrict(self, subset: SubsetLike) -> 'BasesMatroid':
        """M|S as a matroid on |S| elements, labelled like S."""
        from .matroids.bases import BasesMatroid

        mask = self._mask(subset)
        members = Subset(mask)
        r = self._rank(mask)
        size = popcount(mask)
        bases = [Subset(m) for m in SubsetsOfSize(size, r).masks()
                 if self._is_independent(Subset(m).extend(members).mask)]
        labels = self._ground_set.labels_of(members)
        return BasesMatroid(GroundSet(labels), bases)

    def dual(self) -> 'Dual':
        from .matroids.dual import Dual
        return Dual(self)

    def elongate(self, elongation: int) -> 'Elongation':
        from .matroids.elongate import Elongation
        return Elongation(self, elongation)

    def combinatorial_derived(self, config: Optional['DerivationConfig'] = None) -> 'CombinatorialDerived':
        from .derive.core import derive_combinatorial
        return derive_combinatorial(self, config)

    # === Betti Numbers ===

    def betti_num(self, subset: SubsetLike) -> int:
        from .betti import betti_of_subset
        return betti_of_subset(self, self._mask(subset))

    def betti_number(self, i: int, j: int) -> int:
        """b_{i,j}: sum over subsets of size j and nullity i."""
        from .betti import betti_of_subset
        return sum(
            betti_of_subset(self, m)
            for m in SubsetsOfSize(self.n, j).masks()
            if self._nullity(m) == i
        )

    def betti(self) -> 'BettiNumbers':
        from .betti import BettiNumbers
        return BettiNumbers(self)

    # === Connectivity ===

    def components(self) -> List[Subset]:
        from .topology import partition_by_connectivity
        return partition_by_connectivity(self)

    def is_connected(self) -> bool:
        return len(self.components()) <= 1

    # === Persistence ===

    def save(self, path, family: str = "bases"):
        from ..storage.codec import save_matroid
        return save_matroid(self, path, family=family)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(n={self.n}, k={self.k})"


__all__ = ['Matroid', 'SubsetLike']
