# -*- coding: utf-8 -*-
"""derive/derived.py - The combinatorial derived matroid as a value."""

from typing import Iterable, Sequence, Tuple, Union

from ..errors import InvalidInput
from ..ground_set import GroundSet, as_ground_set
from ..matroids.bases import BasesMatroid
from ..subset import Subset, iter_members


class CombinatorialDerived(BasesMatroid):
    """
    Matroid on the circuits of a source matroid M.

    Element i is the i-th circuit of M in enumeration order; its label is
    the tuple of source labels of that circuit. Independence is given by
    the computed bases. The source matroid itself is not retained, only
    its ground set and circuits.
    """

    def __init__(self, source_ground_set, elements: Sequence[Subset],
                 bases: Iterable[Union[Subset, Iterable[int]]]):
        source = as_ground_set(source_ground_set)
        elements = tuple(elements)
        for circuit in elements:
            if circuit.is_empty or not source.contains(circuit):
                raise InvalidInput(f"{circuit!r} is not a non-empty subset of the source ground set")
        labels = [source.labels_of(circuit) for circuit in elements]
        super().__init__(GroundSet(labels), bases)
        self._source_ground_set = source
        self._elements = elements

    @property
    def elements(self) -> Tuple[Subset, ...]:
        """Circuits of the source matroid, indexed like this ground set."""
        return self._elements

    @property
    def source_ground_set(self) -> GroundSet:
        return self._source_ground_set

    def circuit_union(self, subset) -> Subset:
        """Union in the source ground set of the circuits selected by S."""
        mask = self._mask(subset)
        union = 0
        for i in iter_members(mask):
            union |= self._elements[i].mask
        return Subset(union)

    def completely_redundant(self, subset) -> bool:
        """
        True iff dropping any single circuit of S leaves ∪S unchanged.

        The empty selection is trivially redundant.
        """
        mask = self._mask(subset)
        union = self.circuit_union(Subset(mask))
        return all(self.circuit_union(Subset(mask & ~(1 << e))) == union
                   for e in iter_members(mask))

    def __repr__(self) -> str:
        return (f"CombinatorialDerived(n={self.n}, k={self.k}, "
                f"bases={len(self.basis_masks())}, source_n={len(self._source_ground_set)})")


__all__ = ['CombinatorialDerived']
