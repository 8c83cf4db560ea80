"""
Matroids Core - ground sets, subsets, matroid representations and invariants.
"""

from matroids.core.errors import (
    Axiom, MatroidError, InvalidInput, InputOutOfRange,
    AxiomViolation, ConstructionFailed, TooLarge,
)
from matroids.core.subset import (
    Subset, SubsetsOfSize, subsets_of_size, subsets_up_to_size, all_subsets,
)
from matroids.core.ground_set import GroundSet
from matroids.core.config import DerivationConfig, DEFAULT_CONFIG
from matroids.core.base import Matroid
from matroids.core.matroids import (
    BasesMatroid, CircuitsMatroid, IndependenceMatroid, UniformMatroid,
    MatrixMatroid, Dual, Elongation, Vamos,
)
from matroids.core.derive import derive_combinatorial, CombinatorialDerived
from matroids.core.validator import validate, check, is_matroid
from matroids.core.betti import BettiNumbers

__all__ = [
    "Axiom", "MatroidError", "InvalidInput", "InputOutOfRange",
    "AxiomViolation", "ConstructionFailed", "TooLarge",
    "Subset", "SubsetsOfSize", "subsets_of_size", "subsets_up_to_size", "all_subsets",
    "GroundSet", "DerivationConfig", "DEFAULT_CONFIG", "Matroid",
    "BasesMatroid", "CircuitsMatroid", "IndependenceMatroid", "UniformMatroid",
    "MatrixMatroid", "Dual", "Elongation", "Vamos",
    "derive_combinatorial", "CombinatorialDerived",
    "validate", "check", "is_matroid", "BettiNumbers",
]
