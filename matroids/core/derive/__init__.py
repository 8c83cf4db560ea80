# -*- coding: utf-8 -*-
"""
derive package - Combinatorial derived matroid

Entry point `derive_combinatorial` plus the dependent-family building blocks.
"""

from .core import derive_combinatorial, is_fast, FAST, GENERAL
from .derived import CombinatorialDerived
from .dependents import (
    NullityCache,
    DependentSet,
    initial_dependents,
    inclusion_minimal,
    epsilon,
    bases_from_dependents,
    fast_bases,
)

__all__ = [
    # Entry
    'derive_combinatorial', 'is_fast', 'FAST', 'GENERAL',

    # Result
    'CombinatorialDerived',

    # Building blocks
    'NullityCache', 'DependentSet', 'initial_dependents', 'inclusion_minimal', 'epsilon',
    'bases_from_dependents', 'fast_bases',
]
