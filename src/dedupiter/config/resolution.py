from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional


def cascade(*values, fallback=None):
    """Return the first non-None value from a list, or fallback."""
    for value in values:
        if value is not None:
            return value
    return fallback


def _normalize_upper(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, int):
        return logging.getLevelName(value).upper()
    text = str(value).strip()
    return text.upper() if text else None


@dataclass(frozen=True)
class LogLevelDecision:
    name: str
    value: int


def resolve_log_level(
    *levels: Any,
    fallback: str = "WARNING",
) -> LogLevelDecision:
    name = cascade(
        *(_normalize_upper(level) for level in levels),
        fallback=_normalize_upper(fallback) or "WARNING",
    )
    value = logging._nameToLevel.get(name, logging.WARNING)
    return LogLevelDecision(name=name, value=value)


def configure_logging(*levels: Any, fallback: str = "WARNING") -> LogLevelDecision:
    """Apply the first configured level to the ``dedupiter`` logger."""
    decision = resolve_log_level(*levels, fallback=fallback)
    logging.getLogger("dedupiter").setLevel(decision.value)
    return decision
