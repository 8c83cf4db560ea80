# utils/__init__.py
# This file is part of matroids - matroid invariants and derived matroids

from .logger import (
    LogLevel,
    MatroidLogger,
    MatroidFormatter,
    get_logger,
    set_log_level,
    configure_logging,
)

__all__ = [
    "LogLevel",
    "MatroidLogger",
    "MatroidFormatter",
    "get_logger",
    "set_log_level",
    "configure_logging",
]
