from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, Optional

from dedupiter.config.pipeline import StreamPipelineConfig
from dedupiter.config.resolution import configure_logging
from dedupiter.observability import ObserverRegistry, SupportsObserver, default_observer_registry
from dedupiter.plugins import TRANSFORMS_EP
from dedupiter.utils.load import load_ep

logger = logging.getLogger(__name__)


def instantiate_transforms(clauses: list[dict] | None, group: str = TRANSFORMS_EP) -> list[Any]:
    ts = []
    for clause in clauses or []:
        if not isinstance(clause, dict) or len(clause) != 1:
            raise TypeError(f"Transform must be one-key mapping, got: {clause!r}")
        (name, params), = clause.items()
        cls = load_ep(group=group, name=name)
        if params is None:
            ts.append(cls())
        elif isinstance(params, dict):
            ts.append(cls(**params))
        elif isinstance(params, (list, tuple)):
            ts.append(cls(*params))
        else:
            ts.append(cls(params))
    return ts


def transform_stream(
    stream: Iterable[Any],
    clauses: list[dict] | None,
    *,
    observer_registry: Optional[ObserverRegistry] = None,
) -> Iterator[Any]:
    """Chain the named transforms over ``stream``; nothing is pulled until iterated."""
    out: Iterator[Any] = iter(stream)
    transforms = instantiate_transforms(clauses)
    for t in transforms:
        if observer_registry is not None and isinstance(t, SupportsObserver):
            t.set_observer(observer_registry.get("dedupe", logger))
        out = t.apply(out)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Built stream pipeline: %s",
            " -> ".join(type(t).__name__ for t in transforms) or "(passthrough)",
        )
    return out


def run_pipeline(
    stream: Iterable[Any],
    config: StreamPipelineConfig,
    *,
    log_level: Any = None,
    observer_registry: Optional[ObserverRegistry] = None,
) -> Iterator[Any]:
    configure_logging(log_level, config.log_level)
    return transform_stream(
        stream,
        config.clauses(),
        observer_registry=observer_registry or default_observer_registry(),
    )
