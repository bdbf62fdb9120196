from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Iterable, Iterator


@dataclass
class Tick:
    time: datetime
    id: str
    value: float | None


def make_tick(value: float | None, hour: int, tick_id: str = "temp") -> Tick:
    return Tick(
        time=datetime(2024, 1, 1, hour=hour, tzinfo=timezone.utc),
        id=tick_id,
        value=value,
    )


class CountingIterator(Iterator[Any]):
    """Iterator over ``items`` that records how often it was pulled."""

    def __init__(self, items: Iterable[Any]) -> None:
        self._it = iter(items)
        self.pulls = 0

    def __iter__(self) -> "CountingIterator":
        return self

    def __next__(self) -> Any:
        self.pulls += 1
        return next(self._it)


def reusing_buffer(values: Iterable[Any]) -> Iterator[list]:
    """Yield the same list object over and over, overwritten with each value."""
    buf: list = []
    for value in values:
        buf[:] = [value]
        yield buf
