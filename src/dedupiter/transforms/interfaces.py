from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable, Iterator, Optional

from dedupiter.observability import Observer


class StreamTransformBase(ABC):
    """Base interface for lazy stream transforms."""

    def __call__(self, stream: Iterable[Any]) -> Iterator[Any]:
        return self.apply(stream)

    @abstractmethod
    def apply(self, stream: Iterable[Any]) -> Iterator[Any]:
        ...


class ObservedStreamTransformBase(StreamTransformBase):
    """Stream transform that forwards an optional observer to what it builds."""

    def __init__(self) -> None:
        self._observer: Optional[Observer] = None

    def set_observer(self, observer: Optional[Observer]) -> None:
        self._observer = observer
