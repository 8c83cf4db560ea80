# utils/logger.py
# This file is part of matroids - matroid invariants and derived matroids
#
# Logging utility for matroid computations with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for matroid computations."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class MatroidLogger:
    """Centralized logger for long-running enumerations and derivations."""

    def __init__(self, name: str = "matroids", level: LogLevel = LogLevel.WARNING):
        """Initialize the logger.

        Args:
            name: Logger name
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(MatroidFormatter())

        self.logger.addHandler(console_handler)
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    @property
    def level(self) -> int:
        return self.logger.level

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for derivation runs
    def derivation_start(self, n: int, k: int, path: str):
        """Log the start of a derived-matroid computation."""
        self.info(f"=== Combinatorial derived of a rank {k} matroid on {n} elements ({path} path) ===")

    def stage(self, description: str):
        """Log entry into a stage of a long computation."""
        self.info(f"{description}...")

    def dependents_count(self, count: int, first: bool = False):
        """Log the size of the current dependent family."""
        prefix = "First cardinality" if first else "Cardinality"
        self.info(f"{prefix} of dependents: {count}")

    def rank_decreased(self, rank: int):
        """Log a rank decrease of the derived matroid."""
        self.info(f"No bases at the current rank, decreasing derived rank to {rank}")

    def derivation_done(self, n_bases: int, rank: int, n_elements: int):
        """Log a finished derivation."""
        self.info(
            f"Done calculating combinatorial derived matroid, {n_bases} bases, "
            f"rank: {rank} on {n_elements} elements!"
        )

    def scan_progress(self, what: str, done: int, total: int):
        """Log progress through a subset scan."""
        self.debug(f"    {what}: {done}/{total}")

    def store_event(self, action: str, name: str, path: str):
        """Log a load or save against the matroid store."""
        self.info(f"[store] {action} {name} ({path})")

    def validation_result(self, success: bool, message: str = ""):
        """Log validation results."""
        if success:
            self.debug(f"Validation passed{': ' + message if message else ''}")
        else:
            self.error(f"Validation failed{': ' + message if message else ''}")


class MatroidFormatter(logging.Formatter):
    """Formatter with clean output for INFO and level tags otherwise."""

    def format(self, record):
        if record.levelno == logging.INFO:
            return record.getMessage()
        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[MatroidLogger] = None


def get_logger(name: str = "matroids") -> MatroidLogger:
    """Get or create the global logger instance.

    Args:
        name: Logger name (default: "matroids")

    Returns:
        MatroidLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = MatroidLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level."""
    get_logger().set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging from two flags.

    Args:
        verbose: Enable progress (INFO) output
        debug: Enable debug output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)
