from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

from dedupiter.observability import DedupEvent, Observer
from dedupiter.strategies import (
    DuplicateStrategy,
    EqualityStrategy,
    KeyStrategy,
    PredicateStrategy,
)

T = TypeVar("T")
K = TypeVar("K")

# Marks "nothing emitted yet" so that None stays a valid element or key.
_UNSET: Any = object()


class ConsecutiveDedup(Iterator[T]):
    """Iterator that drops elements repeating the last emitted one.

    Only the first element of each run of consecutive duplicates is yielded;
    what counts as a duplicate is decided by ``strategy``. A single piece of
    state is retained (the last emitted element, or its key), so sources of
    any length, including infinite ones, run in constant memory.

    Exceptions raised by the source or by the strategy's callables propagate
    out of ``__next__`` unchanged and leave the retained state untouched.
    """

    def __init__(
        self,
        source: Iterable[T],
        strategy: DuplicateStrategy[T],
        *,
        observer: Optional[Observer] = None,
    ) -> None:
        self._source = iter(source)
        self._strategy = strategy
        self._retained: Any = _UNSET
        self._observer = observer
        self._exhausted = False
        self._emitted = 0
        self._suppressed = 0

    def set_observer(self, observer: Optional[Observer]) -> None:
        self._observer = observer

    def __iter__(self) -> ConsecutiveDedup[T]:
        return self

    def __next__(self) -> T:
        if self._exhausted:
            raise StopIteration
        strategy = self._strategy
        for candidate in self._source:
            probed = strategy.probe(candidate)
            if self._retained is not _UNSET and strategy.is_duplicate(self._retained, probed):
                self._suppressed += 1
                if self._observer is not None:
                    self._notify(
                        "duplicate_suppressed",
                        element=candidate,
                        suppressed=self._suppressed,
                    )
                continue
            self._retained = strategy.keep(candidate, probed)
            self._emitted += 1
            return candidate
        self._exhausted = True
        if self._observer is not None:
            self._notify(
                "exhausted",
                emitted=self._emitted,
                suppressed=self._suppressed,
            )
        raise StopIteration

    def _notify(self, event_type: str, **payload: object) -> None:
        payload["adapter"] = type(self).__name__
        self._observer(DedupEvent(type=event_type, payload=payload))

    # Chaining helpers.
    def dedup(self, **kwargs: Any) -> Dedup[T]:
        return Dedup(self, **kwargs)

    def dedup_by(self, same: Callable[[T, T], bool], **kwargs: Any) -> DedupBy[T]:
        return DedupBy(self, same, **kwargs)

    def dedup_by_key(self, key: Callable[[T], K], **kwargs: Any) -> DedupByKey[T, K]:
        return DedupByKey(self, key, **kwargs)


class Dedup(ConsecutiveDedup[T]):
    """Drop elements equal (``==``) to the previously emitted element."""

    def __init__(
        self,
        source: Iterable[T],
        *,
        snapshot: Callable[[T], T] | None = None,
        observer: Optional[Observer] = None,
    ) -> None:
        super().__init__(source, EqualityStrategy(snapshot), observer=observer)


class DedupBy(ConsecutiveDedup[T]):
    """Drop elements for which ``same(last_emitted, element)`` is true.

    The predicate always sees the last *emitted* element first, so a
    non-transitive predicate is applied against the head of the current run,
    not against the element that was suppressed just before.
    """

    def __init__(
        self,
        source: Iterable[T],
        same: Callable[[T, T], bool],
        *,
        snapshot: Callable[[T], T] | None = None,
        observer: Optional[Observer] = None,
    ) -> None:
        super().__init__(source, PredicateStrategy(same, snapshot), observer=observer)


class DedupByKey(ConsecutiveDedup[T], Generic[T, K]):
    """Drop elements whose ``key(element)`` equals the last emitted key."""

    def __init__(
        self,
        source: Iterable[T],
        key: Callable[[T], K],
        *,
        observer: Optional[Observer] = None,
    ) -> None:
        super().__init__(source, KeyStrategy(key), observer=observer)


def dedup(source: Iterable[T], **kwargs: Any) -> Dedup[T]:
    """Collapse runs of equal consecutive elements of ``source``.

    >>> "".join(dedup("aabbccdddeeeeffffeee"))
    'abcdefe'
    """
    return Dedup(source, **kwargs)


def dedup_by(source: Iterable[T], same: Callable[[T, T], bool], **kwargs: Any) -> DedupBy[T]:
    """Collapse runs where ``same(previous_emitted, candidate)`` holds.

    >>> both_space = lambda a, b: a.isspace() and b.isspace()
    >>> "".join(dedup_by("a  b   c", both_space))
    'a b c'
    """
    return DedupBy(source, same, **kwargs)


def dedup_by_key(source: Iterable[T], key: Callable[[T], K], **kwargs: Any) -> DedupByKey[T, K]:
    """Collapse runs of consecutive elements sharing ``key(element)``.

    >>> "".join(dedup_by_key("First In, Last Out", str.isspace))
    'F I L O'
    """
    return DedupByKey(source, key, **kwargs)
