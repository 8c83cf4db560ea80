# -*- coding: utf-8 -*-
"""
validator.py - Check the independence axioms of a candidate matroid.

    (I1) ∅ is independent
    (I2) I independent, e ∈ I  ⇒  I \\ {e} independent
    (I3) |J| = |I| + 1, both independent  ⇒  ∃ e ∈ J \\ I with I ∪ {e} independent

Independent sets are enumerated level by level (by size). Violations
carry a minimal counterexample: the first failing pair at the smallest
size, in enumeration order.

With a `limit`, enumeration stops at the first empty level, or after a
level below the rank at which more than `limit` independent sets have
been collected. Larger levels are then covered only by the basis-exchange
axiom on the bases (a partial check). A scan that reaches the rank level is
never truncated. Without a limit every subset is scanned.
"""

from typing import Dict, List, Optional

import numpy as np

from .base import Matroid
from .errors import Axiom, AxiomViolation
from .subset import Subset, SubsetsOfSize, iter_members, mask_array
from ..utils.logger import get_logger


def _extensions(matroid: Matroid, mask: int) -> int:
    """Mask of elements e ∉ I with I ∪ {e} independent."""
    ext = 0
    for e in range(matroid.n):
        bit = 1 << e
        if not mask & bit and matroid._is_independent(mask | bit):
            ext |= bit
    return ext


def _check_exchange(matroid: Matroid, smaller: List[int], larger: List[int]):
    """
    Every I in `smaller` extends from every J in `larger`.

    ext(I) holds no element of I, so J fails to extend I exactly when
    J ∩ ext(I) is empty; that test runs over the whole larger level at once.
    """
    if not larger:
        return
    candidates = mask_array(larger, matroid.n)
    for i in smaller:
        ext = _extensions(matroid, i)
        stuck = (candidates & ext) == 0
        if stuck.any():
            j = larger[int(np.argmax(stuck))]
            raise AxiomViolation(Axiom.EXCHANGE, (Subset(i), Subset(j)),
                                 f"no element of {Subset(j & ~i)!r} extends {Subset(i)!r}")


def _check_basis_exchange(matroid: Matroid, bases: List[int]):
    """
    B1, B2 bases, x ∈ B1 \\ B2  ⇒  ∃ y ∈ B2 \\ B1 with B1 - x + y a basis.

    For each B1 and x the repairing elements y form a mask R; B2 fails
    when it misses x and meets R nowhere. That test runs over all bases
    at once.
    """
    basis_set = set(bases)
    table = mask_array(bases, matroid.n)
    for b1 in bases:
        failing = np.zeros(len(bases), dtype=bool)
        for x in iter_members(b1):
            without = b1 & ~(1 << x)
            repair = 0
            for y in range(matroid.n):
                if not (b1 >> y) & 1 and without | (1 << y) in basis_set:
                    repair |= 1 << y
            failing |= ((table & (1 << x)) == 0) & ((table & repair) == 0)
        if failing.any():
            b2 = bases[int(np.argmax(failing))]
            x = next(x for x in iter_members(b1 & ~b2)
                     if not any((b1 & ~(1 << x)) | (1 << y) in basis_set
                                for y in iter_members(b2 & ~b1)))
            raise AxiomViolation(Axiom.EXCHANGE, (Subset(b1), Subset(b2)),
                                 f"removing {x} from the first basis cannot be repaired "
                                 f"from the second")


def validate(matroid: Matroid, limit: Optional[int] = None) -> None:
    """
    Raise AxiomViolation if `matroid` breaks an independence axiom.

    Args:
        matroid: candidate matroid (only its independence oracle is used)
        limit: bound on enumerated independent sets, None for a full check
    """
    logger = get_logger()

    if not matroid._is_independent(0):
        raise AxiomViolation(Axiom.EMPTY_SET, (Subset.empty(),))

    levels: Dict[int, List[int]] = {0: [0]}
    previous = {0}
    total = 1
    truncated = False
    for size in range(1, matroid.n + 1):
        level = [m for m in SubsetsOfSize(matroid.n, size).masks() if matroid._is_independent(m)]
        for mask in level:
            for e in iter_members(mask):
                if mask & ~(1 << e) not in previous:
                    raise AxiomViolation(Axiom.HEREDITARY, (Subset(mask), Subset(mask & ~(1 << e))))
        _check_exchange(matroid, levels[size - 1], level)
        levels[size] = level
        if not level and limit is not None:
            # Bounded runs do not scan above an empty level
            break
        previous = set(level)
        total += len(level)
        if limit is not None and total > limit and size < matroid.k:
            truncated = True
            break

    if truncated:
        logger.warning(f"Validation truncated after {total} independent sets; "
                       f"checking basis exchange only beyond size {max(levels)}")
        _check_basis_exchange(matroid, [b.mask for b in matroid.bases()])
    logger.validation_result(True, f"{type(matroid).__name__} on {matroid.n} elements")


def check(matroid: Matroid, limit: Optional[int] = None) -> Optional[AxiomViolation]:
    """The violation found by `validate`, or None."""
    try:
        validate(matroid, limit)
    except AxiomViolation as e:
        return e
    return None


def is_matroid(matroid: Matroid, limit: Optional[int] = None) -> bool:
    return check(matroid, limit) is None


__all__ = ['validate', 'check', 'is_matroid']
