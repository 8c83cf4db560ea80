"""
Matroids - matroid invariants and the combinatorial derived matroid.

Core modules:
- matroids.core: subsets, matroid representations, derivation, validation
- matroids.storage: serialized matroids and the precalculated-matroid store
- matroids.utils: logging
"""

from matroids.core import *  # noqa: F401,F403
from matroids.core import __all__ as _core_all
from matroids.storage import MatroidStore, save_matroid, load_matroid, dumps, loads
from matroids.utils import configure_logging, get_logger

__version__ = "0.1.0"
__all__ = list(_core_all) + [
    "MatroidStore", "save_matroid", "load_matroid", "dumps", "loads",
    "configure_logging", "get_logger",
]
