# -*- coding: utf-8 -*-
"""
Unit Tests: Configuration, parallel scans and logging

Covers:
- DerivationConfig validation and overrides
- Order-preserving parallel filter / map
- MatroidLogger formatting and level control
"""

import operator

import pytest

from matroids.core.config import DEFAULT_CONFIG, DerivationConfig
from matroids.core.errors import InvalidInput, TooLarge
from matroids.core.parallel import iter_filter, parallel_filter, parallel_map
from matroids.utils.logger import LogLevel, MatroidLogger, configure_logging, get_logger


# ============================================================
# CONFIG
# ============================================================

class TestDerivationConfig:

    def test_defaults(self):
        assert DEFAULT_CONFIG.workers == 1
        assert not DEFAULT_CONFIG.is_parallel
        assert DEFAULT_CONFIG.validate
        assert DEFAULT_CONFIG.max_elements is None

    @pytest.mark.parametrize("kwargs", [
        {"workers": 0},
        {"chunk_size": 0},
        {"max_elements": -1},
        {"max_dependents": -5},
        {"validation_limit": -1},
    ])
    def test_rejects_bad_values(self, kwargs):
        with pytest.raises(InvalidInput):
            DerivationConfig(**kwargs)

    def test_with_overrides(self):
        config = DEFAULT_CONFIG.with_overrides(workers=4, max_elements=100)
        assert config.is_parallel
        assert config.max_elements == 100
        assert DEFAULT_CONFIG.workers == 1

    def test_frozen(self):
        with pytest.raises(Exception):
            DEFAULT_CONFIG.workers = 8


# ============================================================
# PARALLEL SCANS
# ============================================================

class TestParallel:

    @pytest.mark.parametrize("workers,chunk_size", [(1, 2048), (2, 1), (4, 3), (8, 100)])
    def test_filter_preserves_order(self, workers, chunk_size):
        wanted = frozenset(range(3, 200, 7))
        kept = parallel_filter(operator.contains, range(200), workers, chunk_size, context=wanted)
        assert kept == sorted(wanted)

    def test_iter_filter_is_lazy(self):
        def endless():
            i = 0
            while True:
                yield i
                i += 1
        it = iter_filter(lambda _, x: x % 2 == 0, endless())
        assert [next(it) for _ in range(3)] == [0, 2, 4]

    def test_limit_calls_handler(self):
        def on_limit(count):
            raise TooLarge("items", 5, count)
        with pytest.raises(TooLarge) as info:
            parallel_filter(operator.contains, range(100), workers=3, chunk_size=4,
                            limit=5, on_limit=on_limit, context=range(100))
        assert info.value.reached == 6

    def test_limit_without_handler_stops(self):
        assert parallel_filter(operator.contains, range(100), limit=5,
                               context=range(100)) == list(range(6))

    @pytest.mark.parametrize("workers", [1, 4])
    def test_map_preserves_order(self, workers):
        squares = parallel_map(operator.mul, range(20), workers, chunk_size=3, context=3)
        assert squares == [3 * x for x in range(20)]


# ============================================================
# LOGGING
# ============================================================

class TestLogger:

    def test_info_is_plain(self, capsys):
        logger = MatroidLogger("matroids.test.info", LogLevel.INFO)
        logger.derivation_done(28, 3, 7)
        err = capsys.readouterr().err
        assert "28 bases, rank: 3 on 7 elements" in err
        assert "[INFO]" not in err

    def test_levels_are_tagged(self, capsys):
        logger = MatroidLogger("matroids.test.tags", LogLevel.DEBUG)
        logger.warning("careful")
        logger.validation_result(False, "heredity")
        err = capsys.readouterr().err
        assert "[WARNING] careful" in err
        assert "[ERROR] Validation failed: heredity" in err

    def test_quiet_by_default(self, capsys):
        logger = MatroidLogger("matroids.test.quiet")
        logger.stage("Finding bases")
        logger.dependents_count(7, first=True)
        assert capsys.readouterr().err == ""

    def test_set_level(self, capsys):
        logger = MatroidLogger("matroids.test.level")
        logger.set_level(LogLevel.INFO)
        logger.rank_decreased(2)
        assert "decreasing derived rank to 2" in capsys.readouterr().err

    def test_configure_logging(self):
        configure_logging(verbose=True)
        assert get_logger().level == LogLevel.INFO.value
        configure_logging(debug=True)
        assert get_logger().level == LogLevel.DEBUG.value
        configure_logging()
        assert get_logger().level == LogLevel.WARNING.value


# ============================================================
# MAIN
# ============================================================

if __name__ == "__main__":
    pytest.main([__file__, "-v"])
