# -*- coding: utf-8 -*-
"""ground_set.py - Ordered, immutable universe of labelled elements."""

from typing import Hashable, Iterable, Iterator, Sequence, Tuple

from .errors import InvalidInput
from .subset import Subset


class GroundSet:
    """
    Ordered sequence of distinct labels, indexed 0..n-1.

    Identity is the index; labels are for display and lookup only.
    """

    __slots__ = ('_labels', '_index')

    def __init__(self, labels: Iterable[Hashable]):
        labels = tuple(labels)
        index = {}
        for i, label in enumerate(labels):
            if label in index:
                raise InvalidInput(f"Duplicate ground set label {label!r} at positions {index[label]} and {i}")
            index[label] = i
        self._labels = labels
        self._index = index

    @classmethod
    def of_size(cls, n: int) -> 'GroundSet':
        """Ground set labelled 0..n-1."""
        if n < 0:
            raise InvalidInput(f"Ground set size must be non-negative, got {n}")
        return cls(range(n))

    @property
    def labels(self) -> Tuple[Hashable, ...]:
        return self._labels

    def __len__(self) -> int:
        return len(self._labels)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._labels)

    def label(self, index: int) -> Hashable:
        return self._labels[index]

    def index(self, label: Hashable) -> int:
        try:
            return self._index[label]
        except KeyError:
            raise InvalidInput(f"Unknown ground set label {label!r}") from None

    def subset(self, labels: Iterable[Hashable]) -> Subset:
        """Subset holding the given labels."""
        return Subset.from_indices(self.index(label) for label in labels)

    def labels_of(self, subset: Subset) -> Tuple[Hashable, ...]:
        return tuple(self._labels[i] for i in subset)

    def full(self) -> Subset:
        return Subset.full(len(self._labels))

    def contains(self, subset: Subset) -> bool:
        """True if every index of subset lies in 0..n-1."""
        return subset.mask >> len(self._labels) == 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GroundSet):
            return NotImplemented
        return self._labels == other._labels

    def __hash__(self) -> int:
        return hash(self._labels)

    def __repr__(self) -> str:
        return f"GroundSet({list(self._labels)!r})"


def as_ground_set(ground_set) -> GroundSet:
    """Accept a GroundSet, a size, or a sequence of labels."""
    if isinstance(ground_set, GroundSet):
        return ground_set
    if isinstance(ground_set, int):
        return GroundSet.of_size(ground_set)
    if isinstance(ground_set, (str, bytes)):
        raise InvalidInput("Ground set labels must be given as a sequence, not a string")
    if isinstance(ground_set, Sequence) or hasattr(ground_set, '__iter__'):
        return GroundSet(ground_set)
    raise InvalidInput(f"Cannot build a ground set from {type(ground_set).__name__}")


__all__ = ['GroundSet', 'as_ground_set']
