# -*- coding: utf-8 -*-
"""
Unit Tests: Axiom validator

Covers:
- Empty-set, hereditary and exchange violations with minimal witnesses
- Valid matroids from every representation
- Bounded validation falling back to basis exchange
"""

import pytest

from matroids.core.errors import Axiom, AxiomViolation
from matroids.core.matroids import (
    BasesMatroid, IndependenceMatroid, UniformMatroid, Vamos,
    hamming_7_4, matroid_1,
)
from matroids.core.subset import Subset
from matroids.core import validator
from matroids.core.validator import check, is_matroid, validate
from matroids.utils.logger import LogLevel, MatroidLogger


# ============================================================
# VIOLATIONS
# ============================================================

class TestViolations:
    """Each axiom is reported with the first counterexample found."""

    def test_empty_set(self):
        m = IndependenceMatroid(3, lambda s: False, name="nothing")
        with pytest.raises(AxiomViolation) as info:
            validate(m)
        assert info.value.axiom is Axiom.EMPTY_SET
        assert info.value.witnesses == (Subset.empty(),)

    def test_hereditary(self):
        """{0, 1} is independent but {1} is not."""
        m = IndependenceMatroid(3, lambda s: s.mask in (0, 0b011), name="gap")
        violation = check(m)
        assert violation is not None
        assert violation.axiom is Axiom.HEREDITARY
        assert violation.witnesses == (Subset.of(0, 1), Subset.of(1))

    def test_exchange(self):
        """{0} cannot be extended from {2, 3}."""
        m = BasesMatroid(4, [[0, 1], [2, 3]])
        with pytest.raises(AxiomViolation) as info:
            validate(m)
        assert info.value.axiom is Axiom.EXCHANGE
        assert info.value.witnesses == (Subset.of(0), Subset.of(2, 3))

    def test_message_names_axiom(self):
        violation = check(BasesMatroid(4, [[0, 1], [2, 3]]))
        assert "EXCHANGE" in str(violation)
        assert not is_matroid(BasesMatroid(4, [[0, 1], [2, 3]]))


# ============================================================
# VALID MATROIDS
# ============================================================

class TestValidMatroids:

    @pytest.mark.parametrize("factory", [
        lambda: UniformMatroid(2, 4),
        lambda: UniformMatroid(0, 3),
        lambda: Vamos(),
        lambda: matroid_1(),
        lambda: hamming_7_4(),
        lambda: hamming_7_4().dual(),
    ])
    def test_passes(self, factory):
        assert check(factory()) is None

    def test_empty_ground_set(self):
        assert is_matroid(UniformMatroid(0, 0))

    def test_derived_matroids_pass(self):
        derived = UniformMatroid(3, 5).combinatorial_derived()
        assert is_matroid(derived)


# ============================================================
# BOUNDED VALIDATION
# ============================================================

class TestBoundedValidation:

    def test_truncated_valid(self):
        validate(UniformMatroid(2, 4), limit=3)

    def test_truncated_catches_basis_exchange(self):
        """The level scan stops at size 1, the basis check still fails."""
        with pytest.raises(AxiomViolation) as info:
            validate(BasesMatroid(4, [[0, 1], [2, 3]]), limit=1)
        assert info.value.axiom is Axiom.EXCHANGE
        assert info.value.witnesses == (Subset.of(0, 1), Subset.of(2, 3))

    def test_large_limit_is_full_check(self):
        assert check(Vamos(), limit=10_000) is None

    def test_limit_reached_at_rank_level_is_not_truncated(self, monkeypatch, capsys):
        logger = MatroidLogger("matroids.test.validator", LogLevel.WARNING)
        monkeypatch.setattr(validator, "get_logger", lambda: logger)
        validate(BasesMatroid(3, [[0], [1]]), limit=1)
        assert "truncated" not in capsys.readouterr().err
        validate(UniformMatroid(2, 4), limit=3)
        assert "Validation truncated" in capsys.readouterr().err


class TestWideGroundSets:
    """Ground sets past 64 elements use object mask arrays."""

    def test_valid(self):
        m = IndependenceMatroid(70, lambda s: s.size <= 1, name="points")
        assert check(m, limit=10_000) is None

    def test_exchange_witness(self):
        pair = Subset.of(68, 69)
        m = IndependenceMatroid(70, lambda s: s.size <= 1 or s == pair, name="wide")
        with pytest.raises(AxiomViolation) as info:
            validate(m, limit=10_000)
        assert info.value.axiom is Axiom.EXCHANGE
        assert info.value.witnesses == (Subset.of(0), pair)



# ============================================================
# MAIN
# ============================================================

if __name__ == "__main__":
    pytest.main([__file__, "-v"])
