# -*- coding: utf-8 -*-
"""matroids/circuits.py - Matroid given by its list of circuits."""

from typing import Iterable, Iterator, Union

from ..base import Matroid
from ..errors import InvalidInput
from ..subset import Subset
from .bases import normalize_family


class CircuitsMatroid(Matroid):
    """
    S is independent iff it contains no circuit.

    The family must be a clutter: non-empty sets, none containing another.
    """

    def __init__(self, ground_set, circuits: Iterable[Union[Subset, Iterable[int]]]):
        super().__init__(ground_set)
        masks = normalize_family(circuits, self.n, "circuit")
        if any(m == 0 for m in masks):
            raise InvalidInput("The empty set cannot be a circuit")
        for i, a in enumerate(masks):
            for b in masks[i + 1:]:
                if a & b == a:
                    raise InvalidInput(f"Circuit {Subset(a)!r} is contained in circuit {Subset(b)!r}")
        self._circuit_masks = tuple(masks)

    def _is_independent(self, mask: int) -> bool:
        return not any(c & mask == c for c in self._circuit_masks)

    def iter_circuits(self, workers: int = 1, chunk_size: int = 2048) -> Iterator[Subset]:
        return (Subset(m) for m in self._circuit_masks)

    def __repr__(self) -> str:
        return f"CircuitsMatroid(n={self.n}, circuits={len(self._circuit_masks)})"


__all__ = ['CircuitsMatroid']
