# -*- coding: utf-8 -*-
"""
Unit Tests: Serialized matroids and the matroid store

Covers:
- Bases / circuits encoding reproduces independence exactly
- Element labels and derived-matroid provenance
- Rejection of malformed documents
- MatroidStore naming, caching and read-only mode
"""

import json
import os

import pytest

from matroids.core.derive import CombinatorialDerived
from matroids.core.errors import Axiom, AxiomViolation, InvalidInput
from matroids.core.matroids import (
    BasesMatroid, CircuitsMatroid, UniformMatroid, Vamos, hamming_7_4,
)
from matroids.core.subset import Subset, all_subsets
from matroids.storage import (
    EXTENSION, FORMAT, FORMAT_VERSION, MatroidStore, decode, dumps, encode,
    load_matroid, loads, matroid_path, save_matroid, to_dict,
)


def same_independence(a, b) -> bool:
    return a.n == b.n and all(a.is_independent(s) == b.is_independent(s) for s in all_subsets(a.n))


# ============================================================
# FIXTURES
# ============================================================

@pytest.fixture
def store(tmp_path):
    return MatroidStore(tmp_path / "calculated_matroids")


# ============================================================
# CODEC
# ============================================================

class TestCodec:

    @pytest.mark.parametrize("family", ["bases", "circuits"])
    def test_round_trip_vamos(self, family):
        m = Vamos()
        restored = loads(dumps(m, family))
        assert same_independence(m, restored)
        assert restored.k == 4

    def test_circuits_decode_to_circuits_matroid(self):
        restored = loads(dumps(hamming_7_4(), "circuits"))
        assert isinstance(restored, CircuitsMatroid)
        assert restored.circuits() == hamming_7_4().circuits()

    def test_document_layout(self):
        data = json.loads(dumps(UniformMatroid(1, 2)))
        assert data == {
            "format": FORMAT,
            "version": FORMAT_VERSION,
            "groundSetSize": 2,
            "rank": 1,
            "generatingFamily": "bases",
            "sets": [[0], [1]],
        }

    def test_sets_in_canonical_order(self):
        serialized = encode(BasesMatroid(4, [[2, 3], [0, 3], [0, 1]]))
        assert serialized.sets == [[0, 1], [0, 3], [2, 3]]

    def test_labels_kept(self):
        m = BasesMatroid(["a", "b", "c"], [[0, 1], [0, 2]])
        restored = loads(dumps(m))
        assert restored.ground_set.labels == ("a", "b", "c")
        assert restored.is_basis(Subset.of(0, 2))

    def test_default_labels_omitted(self):
        assert "elementLabels" not in to_dict(encode(UniformMatroid(2, 3)))

    def test_derived_round_trip(self):
        derived = UniformMatroid(3, 5).combinatorial_derived()
        restored = loads(dumps(derived))
        assert isinstance(restored, CombinatorialDerived)
        assert restored.elements == derived.elements
        assert restored.is_equal(derived)
        assert restored.circuit_union([0, 1]) == Subset.full(5)

    def test_derived_by_circuits_is_plain(self):
        derived = UniformMatroid(3, 5).combinatorial_derived()
        restored = loads(dumps(derived, "circuits"))
        assert not isinstance(restored, CombinatorialDerived)
        assert same_independence(derived, restored)

    def test_unknown_family(self):
        with pytest.raises(InvalidInput):
            encode(UniformMatroid(1, 2), "flats")


class TestMalformedDocuments:

    def document(self, **changes):
        data = to_dict(encode(UniformMatroid(2, 4)))
        data.update(changes)
        return json.dumps(data)

    @pytest.mark.parametrize("changes", [
        {"format": "graph"},
        {"version": 2},
        {"generatingFamily": "flats"},
        {"rank": 3},
        {"rank": 5},
        {"groundSetSize": -1},
        {"sets": [[0, 7]]},
        {"sets": "all"},
        {"elementLabels": ["a"]},
        {"derivedFrom": {"groundSetSize": 4, "elements": []}},
    ])
    def test_rejected(self, changes):
        with pytest.raises(InvalidInput):
            loads(self.document(**changes))

    def test_missing_key(self):
        data = to_dict(encode(UniformMatroid(2, 4)))
        del data["sets"]
        with pytest.raises(InvalidInput):
            loads(json.dumps(data))

    def test_not_json(self):
        with pytest.raises(InvalidInput):
            loads("U(2, 4)")

    def test_not_an_object(self):
        with pytest.raises(InvalidInput):
            loads("[1, 2, 3]")

    def test_decode_rejects_version(self):
        serialized = encode(UniformMatroid(1, 1))
        with pytest.raises(InvalidInput):
            decode(type(serialized)(**{**serialized.__dict__, "version": 0}))


# ============================================================
# FILES
# ============================================================

class TestFiles:

    def test_extension_is_set(self, tmp_path):
        assert matroid_path(str(tmp_path / "u24.json")) == str(tmp_path / "u24") + EXTENSION
        assert matroid_path("plain") == "plain.matroid"

    def test_save_and_load(self, tmp_path):
        path = save_matroid(UniformMatroid(2, 4), str(tmp_path / "u24"))
        assert path.endswith(".matroid")
        assert os.path.isfile(path)
        assert load_matroid(path).is_equal(UniformMatroid(2, 4))

    def test_matroid_save_method(self, tmp_path):
        path = Vamos().save(str(tmp_path / "vamos.txt"), family="circuits")
        assert os.path.basename(path) == "vamos.matroid"
        assert len(load_matroid(path).circuits()) == 41


# ============================================================
# STORE
# ============================================================

class TestMatroidStore:

    def test_empty_store(self, store):
        assert store.names() == []
        assert "u24" not in store

    def test_save_load(self, store):
        store.save("u24", UniformMatroid(2, 4))
        assert store.names() == ["u24"]
        assert store.contains("u24")
        assert store.load("u24").is_equal(UniformMatroid(2, 4))

    def test_loads_are_independent(self, store):
        store.save("vamos", Vamos())
        assert store.load("vamos") is not store.load("vamos")

    def test_missing_entry(self, store):
        with pytest.raises(FileNotFoundError):
            store.load("nothing")

    @pytest.mark.parametrize("name", ["", "../escape", ".hidden", "a/b"])
    def test_invalid_names(self, store, name):
        with pytest.raises(InvalidInput):
            store.save(name, UniformMatroid(1, 1))

    def test_read_only(self, tmp_path):
        store = MatroidStore(tmp_path, read_only=True)
        with pytest.raises(PermissionError):
            store.save("u11", UniformMatroid(1, 1))

    def test_derived_is_cached(self, store):
        source = UniformMatroid(3, 5)
        computed = store.derived("u35_derived", source)
        assert "u35_derived" in store
        cached = store.derived("u35_derived", source)
        assert isinstance(cached, CombinatorialDerived)
        assert cached.is_equal(computed)

    def test_read_only_derived_not_saved(self, tmp_path):
        store = MatroidStore(tmp_path, read_only=True)
        derived = store.derived("u56_derived", UniformMatroid(5, 6))
        assert derived.is_equal(UniformMatroid(1, 1))
        assert store.names() == []

    def test_stored_non_matroid_is_rejected(self, store):
        store.save("broken", BasesMatroid(4, [[0, 1], [2, 3]]))
        with pytest.raises(AxiomViolation) as info:
            store.derived("broken", UniformMatroid(3, 5))
        assert info.value.axiom is Axiom.EXCHANGE


# ============================================================
# MAIN
# ============================================================

if __name__ == "__main__":
    pytest.main([__file__, "-v"])
