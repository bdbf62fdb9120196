from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Mapping, Optional, Protocol, runtime_checkable


@dataclass(frozen=True)
class DedupEvent:
    type: str
    payload: Mapping[str, object]


# Observer receives a structured event.
Observer = Callable[[DedupEvent], None]
# Factory builds an observer for a given logger (may return None if not active at current level).
ObserverFactory = Callable[[logging.Logger], Optional[Observer]]


@runtime_checkable
class SupportsObserver(Protocol):
    def set_observer(self, observer: Optional[Observer]) -> None:
        ...


class ObserverRegistry:
    def __init__(self, factories: Optional[Mapping[str, ObserverFactory]] = None) -> None:
        self._factories: dict[str, ObserverFactory] = dict(factories or {})

    def register(self, name: str, factory: ObserverFactory) -> None:
        self._factories[name] = factory

    def get(self, name: str, logger: logging.Logger) -> Optional[Observer]:
        factory = self._factories.get(name)
        if not factory:
            return None
        return factory(logger)


def _dedupe_observer_factory(logger: logging.Logger) -> Optional[Observer]:
    if not logger.isEnabledFor(logging.INFO):
        return None

    def _observer(event: DedupEvent) -> None:
        adapter = event.payload.get("adapter")
        if event.type == "duplicate_suppressed":
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(
                    "Suppressed consecutive duplicate: adapter=%s element=%r total=%s",
                    adapter,
                    event.payload.get("element"),
                    event.payload.get("suppressed"),
                )
        elif event.type == "exhausted":
            logger.info(
                "Source exhausted: adapter=%s emitted=%s suppressed=%s",
                adapter,
                event.payload.get("emitted"),
                event.payload.get("suppressed"),
            )

    return _observer


def default_observer_registry() -> ObserverRegistry:
    registry = ObserverRegistry()
    registry.register("dedupe", _dedupe_observer_factory)
    return registry
