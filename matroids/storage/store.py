# -*- coding: utf-8 -*-
"""
store.py - Directory of precalculated matroids.

Each entry is one `<name>.matroid` file written by the codec. Entries are
loaded on demand and every load returns a fresh, independent matroid; the
store keeps no matroids in memory.
"""

import os
from typing import List, Optional

from ..core.base import Matroid
from ..core.config import DEFAULT_CONFIG, DerivationConfig
from ..core.errors import InvalidInput
from ..core.validator import validate
from ..utils.logger import get_logger
from .codec import EXTENSION, load_matroid, save_matroid

DEFAULT_DIRECTORY = "calculated_matroids"


class MatroidStore:
    """
    Named matroids under one directory.

    Args:
        directory: location of the .matroid files (created on first save)
        read_only: refuse writes, for shipped artifact directories
    """

    def __init__(self, directory: str = DEFAULT_DIRECTORY, read_only: bool = False):
        self.directory = os.fspath(directory)
        self.read_only = read_only

    def _path(self, name: str) -> str:
        if not name or os.sep in name or (os.altsep and os.altsep in name) or name.startswith('.'):
            raise InvalidInput(f"Invalid matroid name {name!r}")
        return os.path.join(self.directory, name + EXTENSION)

    def names(self) -> List[str]:
        """Stored names, sorted."""
        if not os.path.isdir(self.directory):
            return []
        return sorted(f[:-len(EXTENSION)] for f in os.listdir(self.directory)
                      if f.endswith(EXTENSION))

    def contains(self, name: str) -> bool:
        return os.path.isfile(self._path(name))

    def __contains__(self, name: str) -> bool:
        return self.contains(name)

    def load(self, name: str) -> Matroid:
        """Load `name`; FileNotFoundError if it was never stored."""
        path = self._path(name)
        get_logger().store_event("load", name, path)
        return load_matroid(path)

    def save(self, name: str, matroid: Matroid, family: str = "bases") -> str:
        if self.read_only:
            raise PermissionError(f"Matroid store {self.directory!r} is read-only")
        path = self._path(name)
        os.makedirs(self.directory, exist_ok=True)
        get_logger().store_event("save", name, path)
        return save_matroid(matroid, path, family=family)

    def derived(self, name: str, source: Matroid,
                config: Optional[DerivationConfig] = None) -> Matroid:
        """
        Derived matroid of `source`, cached under `name`.

        A stored entry is validated before it is returned; a missing one is
        computed (and validated) by the derivation engine, then saved unless
        the store is read-only.
        """
        if self.contains(name):
            matroid = self.load(name)
            limit = (config or DEFAULT_CONFIG).validation_limit
            validate(matroid, limit=limit)
            return matroid
        derived = source.combinatorial_derived(config)
        if not self.read_only:
            self.save(name, derived)
        return derived

    def __repr__(self) -> str:
        return f"MatroidStore({self.directory!r}, read_only={self.read_only})"


__all__ = ['MatroidStore', 'DEFAULT_DIRECTORY']
