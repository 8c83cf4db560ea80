# -*- coding: utf-8 -*-
"""Concrete matroid representations."""

from .bases import BasesMatroid
from .circuits import CircuitsMatroid
from .independence import IndependenceMatroid
from .uniform import UniformMatroid
from .matrix import MatrixMatroid
from .dual import Dual
from .elongate import Elongation
from .vamos import Vamos
from .catalog import (
    matroid_1, matroid_2, non_fast_matroid, hamming_7_4, hamming_7_4_parity,
)

__all__ = [
    'BasesMatroid', 'CircuitsMatroid', 'IndependenceMatroid', 'UniformMatroid',
    'MatrixMatroid', 'Dual', 'Elongation', 'Vamos',
    'matroid_1', 'matroid_2', 'non_fast_matroid', 'hamming_7_4', 'hamming_7_4_parity',
]
