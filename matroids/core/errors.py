# -*- coding: utf-8 -*-
"""
errors.py - Exception taxonomy for matroid construction and derivation.

Every error is raised by the operation that detects it and is never
retried: these are deterministic computations.
"""

from enum import Enum
from typing import Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .subset import Subset


class Axiom(Enum):
    """The independence axioms checked by the validator."""
    EMPTY_SET = "the empty set is independent"
    HEREDITARY = "subsets of independent sets are independent"
    EXCHANGE = "smaller independent sets extend from larger ones"


class MatroidError(Exception):
    """Root of all matroid errors."""
    pass


class InvalidInput(MatroidError, ValueError):
    """Malformed ground set or generating family (duplicates, bad indices)."""
    pass


class InputOutOfRange(MatroidError, IndexError):
    """A subset references indices outside the ground set."""

    def __init__(self, subset: Optional['Subset'], n: int, index: Optional[int] = None):
        self.subset = subset
        self.n = n
        self.index = index
        if index is not None:
            message = f"Index {index} is outside a ground set of size {n}"
        else:
            message = f"Subset {subset!r} is not contained in a ground set of size {n}"
        super().__init__(message)


class AxiomViolation(MatroidError):
    """A candidate matroid fails an independence axiom."""

    def __init__(self, axiom: Axiom, witnesses: Tuple['Subset', ...], detail: str = ""):
        self.axiom = axiom
        self.witnesses = tuple(witnesses)
        message = f"Axiom violated ({axiom.name}: {axiom.value}); counterexample {list(self.witnesses)}"
        if detail:
            message += f" - {detail}"
        super().__init__(message)


class ConstructionFailed(MatroidError):
    """The derived-matroid construction is undefined for the given source."""
    pass


class TooLarge(MatroidError):
    """A configured size bound was exceeded during enumeration."""

    def __init__(self, what: str, limit: int, reached: Optional[int] = None):
        self.what = what
        self.limit = limit
        self.reached = reached
        found = f" (reached {reached})" if reached is not None else ""
        super().__init__(f"Number of {what} exceeds the configured bound {limit}{found}")


__all__ = [
    'Axiom', 'MatroidError', 'InvalidInput', 'InputOutOfRange',
    'AxiomViolation', 'ConstructionFailed', 'TooLarge',
]
