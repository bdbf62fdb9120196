"""Lazy adapters that collapse runs of consecutive duplicate elements.

>>> from dedupiter import dedup, dedup_by, dedup_by_key
>>> list(dedup([10, 20, 20, 21, 30, 20]))
[10, 20, 21, 30, 20]
"""

from .adapters import (
    ConsecutiveDedup,
    Dedup,
    DedupBy,
    DedupByKey,
    dedup,
    dedup_by,
    dedup_by_key,
)
from .strategies import DuplicateStrategy, EqualityStrategy, KeyStrategy, PredicateStrategy

__all__ = [
    "ConsecutiveDedup",
    "Dedup",
    "DedupBy",
    "DedupByKey",
    "DuplicateStrategy",
    "EqualityStrategy",
    "KeyStrategy",
    "PredicateStrategy",
    "dedup",
    "dedup_by",
    "dedup_by_key",
]
