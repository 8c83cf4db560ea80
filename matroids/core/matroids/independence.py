# -*- coding: utf-8 -*-
"""matroids/independence.py - Matroid given by an independence predicate."""

from typing import Callable

from ..base import Matroid
from ..subset import Subset


class IndependenceMatroid(Matroid):
    """
    Wraps a pure predicate Subset -> bool.

    Nothing is checked at construction; run `validate` on hand-written
    predicates before trusting derived invariants.
    """

    def __init__(self, ground_set, predicate: Callable[[Subset], bool], name: str = None):
        super().__init__(ground_set)
        self._predicate = predicate
        self.name = name or getattr(predicate, '__name__', 'predicate')

    def _is_independent(self, mask: int) -> bool:
        return bool(self._predicate(Subset(mask)))

    def __repr__(self) -> str:
        return f"IndependenceMatroid({self.name}, n={self.n})"


__all__ = ['IndependenceMatroid']
