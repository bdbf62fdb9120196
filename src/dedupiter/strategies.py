from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")
K = TypeVar("K")


def _require_callable(name: str, fn: Any) -> None:
    if not callable(fn):
        raise TypeError(f"{name} must be callable, got {type(fn).__name__}")


class DuplicateStrategy(ABC, Generic[T]):
    """Comparison policy plugged into :class:`~dedupiter.adapters.ConsecutiveDedup`.

    For each candidate the adapter calls ``probe`` once, then ``is_duplicate``
    against the retained state (only when something has been retained). When
    the candidate is emitted, ``keep`` turns it into the new retained state.
    """

    @abstractmethod
    def probe(self, candidate: T) -> Any:
        ...

    @abstractmethod
    def is_duplicate(self, retained: Any, probed: Any) -> bool:
        ...

    def keep(self, candidate: T, probed: Any) -> Any:
        return probed


class _SnapshotMixin:
    snapshot: Callable[[Any], Any] | None

    def keep(self, candidate: Any, probed: Any) -> Any:
        if self.snapshot is None:
            return candidate
        return self.snapshot(candidate)


class EqualityStrategy(_SnapshotMixin, DuplicateStrategy[T]):
    """Native ``==`` against the last emitted element."""

    def __init__(self, snapshot: Callable[[T], T] | None = None) -> None:
        if snapshot is not None:
            _require_callable("snapshot", snapshot)
        self.snapshot = snapshot

    def probe(self, candidate: T) -> T:
        return candidate

    def is_duplicate(self, retained: Any, probed: Any) -> bool:
        return retained == probed


class PredicateStrategy(_SnapshotMixin, DuplicateStrategy[T]):
    """Caller predicate, always called as ``same(last_emitted, candidate)``."""

    def __init__(
        self,
        same: Callable[[T, T], bool],
        snapshot: Callable[[T], T] | None = None,
    ) -> None:
        _require_callable("same", same)
        if snapshot is not None:
            _require_callable("snapshot", snapshot)
        self.same = same
        self.snapshot = snapshot

    def probe(self, candidate: T) -> T:
        return candidate

    def is_duplicate(self, retained: Any, probed: Any) -> bool:
        return bool(self.same(retained, probed))


class KeyStrategy(DuplicateStrategy[T], Generic[T, K]):
    """Compare ``key(candidate)`` with the key of the last emitted element.

    The key is computed once per candidate; on emission that same key value
    is retained rather than the element.
    """

    def __init__(self, key: Callable[[T], K]) -> None:
        _require_callable("key", key)
        self.key = key

    def probe(self, candidate: T) -> K:
        return self.key(candidate)

    def is_duplicate(self, retained: Any, probed: Any) -> bool:
        return probed == retained
