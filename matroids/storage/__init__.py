# -*- coding: utf-8 -*-
"""Persistence of computed matroids."""

from .codec import (
    SerializedMatroid,
    encode,
    decode,
    to_dict,
    from_dict,
    dumps,
    loads,
    save_matroid,
    load_matroid,
    matroid_path,
    FORMAT,
    FORMAT_VERSION,
    EXTENSION,
)
from .store import MatroidStore, DEFAULT_DIRECTORY

__all__ = [
    'SerializedMatroid', 'encode', 'decode', 'to_dict', 'from_dict',
    'dumps', 'loads', 'save_matroid', 'load_matroid', 'matroid_path',
    'FORMAT', 'FORMAT_VERSION', 'EXTENSION',
    'MatroidStore', 'DEFAULT_DIRECTORY',
]
