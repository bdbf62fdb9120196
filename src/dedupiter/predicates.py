"""Built-in pairwise predicates for ``dedupe_by`` steps.

Each is called as ``same(last_emitted, candidate)``.
"""

from typing import Any


def both_whitespace(a: Any, b: Any) -> bool:
    """Both sides are whitespace strings, so whitespace runs collapse to their first character."""
    return isinstance(a, str) and isinstance(b, str) and a.isspace() and b.isspace()


def equal(a: Any, b: Any) -> bool:
    return a == b


def case_insensitive(a: Any, b: Any) -> bool:
    if isinstance(a, str) and isinstance(b, str):
        return a.casefold() == b.casefold()
    return a == b


def always(a: Any, b: Any) -> bool:
    return True
