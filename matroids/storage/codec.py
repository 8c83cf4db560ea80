# -*- coding: utf-8 -*-
"""
codec.py - Serialized form of a matroid.

A matroid is stored as its ground-set size plus a generating family
(bases or circuits) in canonical order: by size, then lexicographically.
That is enough to rebuild the independence test exactly:

    {
      "format": "matroid", "version": 1,
      "groundSetSize": 6, "rank": 3,
      "elementLabels": ["a", "b", ...],          (optional)
      "generatingFamily": "bases" | "circuits",
      "sets": [[0, 1, 2], [0, 1, 3], ...],
      "derivedFrom": {"groundSetSize": ..., "elementLabels": [...],
                      "elements": [[...], ...]}  (derived matroids only)
    }

Files are JSON text with the extension `.matroid`.
"""

import json
import os
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..core.base import Matroid
from ..core.derive.derived import CombinatorialDerived
from ..core.errors import InvalidInput
from ..core.ground_set import GroundSet
from ..core.matroids.bases import BasesMatroid
from ..core.matroids.circuits import CircuitsMatroid
from ..core.subset import Subset, canonical_key

FORMAT = "matroid"
FORMAT_VERSION = 1
EXTENSION = ".matroid"
FAMILIES = ("bases", "circuits")


@dataclass(frozen=True)
class SerializedMatroid:
    """Plain-data snapshot of a matroid (see module docstring for the JSON layout)."""
    ground_set_size: int
    rank: int
    generating_family: str
    sets: List[List[int]]
    element_labels: Optional[List[str]] = None
    derived_from: Optional[Dict[str, Any]] = None
    format: str = FORMAT
    version: int = FORMAT_VERSION


# === Matroid <-> SerializedMatroid ===

def _labels_as_strings(ground_set: GroundSet) -> Optional[List[str]]:
    """String labels, or None if they are the default 0..n-1 or collide as strings."""
    if ground_set == GroundSet.of_size(len(ground_set)):
        return None
    labels = [str(label) for label in ground_set]
    if len(set(labels)) != len(labels):
        return None
    return labels


def _canonical(sets) -> List[List[int]]:
    masks = sorted((s.mask for s in sets), key=canonical_key)
    return [Subset(m).to_list() for m in masks]


def encode(matroid: Matroid, family: str = "bases") -> SerializedMatroid:
    """Snapshot `matroid` by its bases or its circuits."""
    if family not in FAMILIES:
        raise InvalidInput(f"Generating family must be one of {FAMILIES}, got {family!r}")
    sets = matroid.bases() if family == "bases" else matroid.circuits()

    derived_from = None
    if isinstance(matroid, CombinatorialDerived) and family == "bases":
        source = matroid.source_ground_set
        derived_from = {
            "groundSetSize": len(source),
            "elementLabels": _labels_as_strings(source),
            "elements": [c.to_list() for c in matroid.elements],
        }
        element_labels = None
    else:
        element_labels = _labels_as_strings(matroid.ground_set)

    return SerializedMatroid(
        ground_set_size=matroid.n,
        rank=matroid.k,
        generating_family=family,
        sets=_canonical(sets),
        element_labels=element_labels,
        derived_from=derived_from,
    )


def _check_int(value, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidInput(f"{what} must be a non-negative integer, got {value!r}")
    return value


def _check_sets(sets, what: str) -> List[List[int]]:
    if not isinstance(sets, list) or not all(isinstance(s, list) for s in sets):
        raise InvalidInput(f"{what} must be a list of index lists")
    for s in sets:
        for i in s:
            _check_int(i, f"index in {what}")
    return sets


def _ground_set(size: int, labels: Optional[List[str]]) -> GroundSet:
    if labels is None:
        return GroundSet.of_size(size)
    if len(labels) != size:
        raise InvalidInput(f"{len(labels)} element labels for a ground set of size {size}")
    return GroundSet(labels)


def decode(serialized: SerializedMatroid) -> Matroid:
    """
    Rebuild a matroid whose independence agrees with the encoded one.

    Raises InvalidInput for unknown formats or versions, and for sizes or
    indices that do not fit together.
    """
    if serialized.format != FORMAT:
        raise InvalidInput(f"Unknown format tag {serialized.format!r}")
    if serialized.version != FORMAT_VERSION:
        raise InvalidInput(f"Unsupported format version {serialized.version!r}")
    if serialized.generating_family not in FAMILIES:
        raise InvalidInput(f"Unknown generating family {serialized.generating_family!r}")
    n = _check_int(serialized.ground_set_size, "groundSetSize")
    rank = _check_int(serialized.rank, "rank")
    if rank > n:
        raise InvalidInput(f"rank {rank} exceeds groundSetSize {n}")
    sets = _check_sets(serialized.sets, "sets")

    if serialized.derived_from is not None:
        if serialized.generating_family != "bases":
            raise InvalidInput("Derived matroids are stored by their bases")
        source = serialized.derived_from
        if not isinstance(source, dict):
            raise InvalidInput("derivedFrom must be a JSON object")
        source_size = _check_int(source.get("groundSetSize"), "derivedFrom.groundSetSize")
        elements = _check_sets(source.get("elements"), "derivedFrom.elements")
        if len(elements) != n:
            raise InvalidInput(f"{len(elements)} derived elements for a ground set of size {n}")
        source_ground_set = _ground_set(source_size, source.get("elementLabels"))
        matroid = CombinatorialDerived(
            source_ground_set, [Subset.from_indices(e) for e in elements], sets)
    elif serialized.generating_family == "bases":
        matroid = BasesMatroid(_ground_set(n, serialized.element_labels), sets)
    else:
        matroid = CircuitsMatroid(_ground_set(n, serialized.element_labels), sets)

    if matroid.k != rank:
        raise InvalidInput(f"Stored rank {rank} does not match the decoded rank {matroid.k}")
    return matroid


# === SerializedMatroid <-> JSON ===

def to_dict(serialized: SerializedMatroid) -> Dict[str, Any]:
    data = {
        "format": serialized.format,
        "version": serialized.version,
        "groundSetSize": serialized.ground_set_size,
        "rank": serialized.rank,
        "generatingFamily": serialized.generating_family,
        "sets": serialized.sets,
    }
    if serialized.element_labels is not None:
        data["elementLabels"] = serialized.element_labels
    if serialized.derived_from is not None:
        data["derivedFrom"] = serialized.derived_from
    return data


def from_dict(data: Dict[str, Any]) -> SerializedMatroid:
    if not isinstance(data, dict):
        raise InvalidInput(f"Expected a JSON object, got {type(data).__name__}")
    missing = [key for key in ("format", "version", "groundSetSize", "rank",
                               "generatingFamily", "sets") if key not in data]
    if missing:
        raise InvalidInput(f"Serialized matroid is missing {missing}")
    return SerializedMatroid(
        ground_set_size=data["groundSetSize"],
        rank=data["rank"],
        generating_family=data["generatingFamily"],
        sets=data["sets"],
        element_labels=data.get("elementLabels"),
        derived_from=data.get("derivedFrom"),
        format=data["format"],
        version=data["version"],
    )


def dumps(matroid: Matroid, family: str = "bases") -> str:
    return json.dumps(to_dict(encode(matroid, family)))


def loads(text: str) -> Matroid:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidInput(f"Not a serialized matroid: {e}") from e
    return decode(from_dict(data))


# === Files ===

def matroid_path(path: str) -> str:
    """`path` with its extension set to .matroid."""
    root, _ = os.path.splitext(os.fspath(path))
    return root + EXTENSION


def save_matroid(matroid: Matroid, path: str, family: str = "bases") -> str:
    """Write `matroid` to `path` (extension set to .matroid); returns the file path."""
    target = matroid_path(path)
    text = dumps(matroid, family)
    with open(target, 'w') as f:
        f.write(text)
    return target


def load_matroid(path: str) -> Matroid:
    with open(matroid_path(path)) as f:
        return loads(f.read())


__all__ = [
    'SerializedMatroid', 'encode', 'decode', 'to_dict', 'from_dict',
    'dumps', 'loads', 'save_matroid', 'load_matroid', 'matroid_path',
    'FORMAT', 'FORMAT_VERSION', 'EXTENSION',
]
