# -*- coding: utf-8 -*-
"""
derive/core.py - Combinatorial derived matroid entry point.

Construction (Freij-Hollanti, Jurrius, Kuznetsova, arXiv:2206.06881):
the ground set is the set of circuits of M, the initial rank is the
nullity n(M) - k(M), and the dependent sets are generated from A₀ by
iterating the ε-step with reduction to inclusion-minimal sets.

Fast sources (uniform, or at most 3 elements) skip the closure and test
each candidate basis directly.
"""

from typing import List, Optional

from ..base import Matroid
from ..config import DEFAULT_CONFIG, DerivationConfig
from ..errors import AxiomViolation, ConstructionFailed, InvalidInput, TooLarge
from ..subset import Subset
from ..validator import validate
from ...utils.logger import get_logger
from .dependents import (
    NullityCache, bases_from_dependents, epsilon, fast_bases,
    inclusion_minimal, initial_dependents,
)
from .derived import CombinatorialDerived

FAST = 'fast'
GENERAL = 'general'


def is_fast(matroid: Matroid) -> bool:
    """Sources for which the direct basis test is exact."""
    return matroid.n <= 3 or matroid.is_uniform()


def _collect_elements(matroid: Matroid, config: DerivationConfig) -> List[Subset]:
    elements = []
    for circuit in matroid.iter_circuits(config.workers, config.chunk_size):
        elements.append(circuit)
        if config.max_elements is not None and len(elements) > config.max_elements:
            raise TooLarge("derived elements (circuits)", config.max_elements, len(elements))
    return elements


def _check_dependents(count: int, config: DerivationConfig):
    if config.max_dependents is not None and count > config.max_dependents:
        raise TooLarge("dependent sets", config.max_dependents, count)


def _general_bases(cache: NullityCache, rank: int, config: DerivationConfig):
    """Closure of A₀ under ε, then bases at the highest rank that has any."""
    logger = get_logger()

    logger.stage("Calculating initial dependents")
    dependents = initial_dependents(
        cache, rank, config.workers, config.chunk_size,
        limit=config.max_dependents,
        on_limit=lambda count: _check_dependents(count, config),
    )
    logger.stage("Finding inclusion minimal")
    dependents = inclusion_minimal(dependents)
    logger.dependents_count(len(dependents), first=True)

    while True:
        logger.stage("Doing epsilon")
        expanded = epsilon(dependents, rank, config.workers)
        _check_dependents(len(expanded), config)
        logger.stage("Finding inclusion minimal")
        reduced = inclusion_minimal(expanded)
        logger.dependents_count(len(reduced))
        if set(reduced) == set(dependents):
            break
        dependents = reduced

    logger.stage("Finding bases")
    bases = bases_from_dependents(dependents, len(cache), rank, config.workers, config.chunk_size)
    while not bases:
        if rank == 1:
            raise ConstructionFailed("Every selection of circuits is dependent; the derived rank would drop to 0")
        rank -= 1
        logger.rank_decreased(rank)
        bases = bases_from_dependents(dependents, len(cache), rank, config.workers, config.chunk_size)
    return rank, bases


def derive_combinatorial(matroid: Matroid, config: Optional[DerivationConfig] = None,
                         strategy: Optional[str] = None) -> CombinatorialDerived:
    """
    Compute the combinatorial derived matroid of `matroid`.

    Args:
        matroid: source matroid; it is never mutated
        config: size bounds, worker count and validation switch
        strategy: 'fast' or 'general' to force a path; chosen from the
            source when None

    Returns:
        CombinatorialDerived, validated unless config.validate is False

    Raises:
        ConstructionFailed: the source has no circuits, or no bases remain
        TooLarge: a configured bound was exceeded
        AxiomViolation: the computed family is not a matroid
    """
    config = config or DEFAULT_CONFIG
    logger = get_logger()

    rank = matroid.n - matroid.k
    if rank < 1:
        raise ConstructionFailed(
            f"{matroid!r} has nullity {rank}; the derived matroid needs at least one circuit")

    if strategy is None:
        strategy = FAST if is_fast(matroid) else GENERAL
    elif strategy not in (FAST, GENERAL):
        raise InvalidInput(f"Unknown strategy {strategy!r}, expected '{FAST}' or '{GENERAL}'")

    logger.derivation_start(matroid.n, matroid.k, strategy)
    logger.stage("Enumerating circuits")
    elements = _collect_elements(matroid, config)
    cache = NullityCache(matroid, elements)

    if strategy == FAST:
        bases = fast_bases(cache, rank, config.workers, config.chunk_size)
        if not bases:
            raise ConstructionFailed(f"No size-{rank} selection of circuits passes the basis test")
    else:
        rank, bases = _general_bases(cache, rank, config)

    derived = CombinatorialDerived(matroid.ground_set, elements, [Subset(b) for b in bases])
    logger.derivation_done(len(bases), rank, len(elements))

    if config.validate:
        try:
            validate(derived, limit=config.validation_limit)
        except AxiomViolation as e:
            logger.validation_result(False, str(e))
            raise
        logger.validation_result(True, f"derived matroid on {derived.n} elements")
    return derived


__all__ = ['derive_combinatorial', 'is_fast', 'FAST', 'GENERAL']
