# -*- coding: utf-8 -*-
"""config.py - Bounds and execution settings for derivation runs."""

from dataclasses import dataclass, replace
from typing import Optional

from .errors import InvalidInput


@dataclass(frozen=True)
class DerivationConfig:
    """
    Settings for the derivation engine and the validation gate.

    max_elements      abort with TooLarge once the derived ground set
                      (circuits of the source) grows beyond this size
    max_dependents    abort with TooLarge once the dependent family of the
                      general path grows beyond this size
    workers           size of the process pool used for subset scans (1 = serial)
    chunk_size        candidates per work unit in parallel scans
    validate          run the axiom validator on every derived matroid
    validation_limit  independent sets enumerated by the validator before it
                      falls back to a basis-exchange check
    """
    max_elements: Optional[int] = None
    max_dependents: Optional[int] = None
    workers: int = 1
    chunk_size: int = 2048
    validate: bool = True
    validation_limit: Optional[int] = 50_000

    def __post_init__(self):
        for name in ('max_elements', 'max_dependents', 'validation_limit'):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise InvalidInput(f"{name} must be non-negative or None, got {value}")
        if self.workers < 1:
            raise InvalidInput(f"workers must be at least 1, got {self.workers}")
        if self.chunk_size < 1:
            raise InvalidInput(f"chunk_size must be at least 1, got {self.chunk_size}")

    @property
    def is_parallel(self) -> bool:
        return self.workers > 1

    def with_overrides(self, **overrides) -> 'DerivationConfig':
        return replace(self, **overrides)


DEFAULT_CONFIG = DerivationConfig()


__all__ = ['DerivationConfig', 'DEFAULT_CONFIG']
