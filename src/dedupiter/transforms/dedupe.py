from __future__ import annotations

import copy
from functools import partial
from typing import Any, Callable, Iterable, Iterator, Sequence

from dedupiter.adapters import Dedup, DedupBy, DedupByKey
from dedupiter.plugins import PREDICATES_EP
from dedupiter.transforms.interfaces import ObservedStreamTransformBase
from dedupiter.utils.fields import record_key
from dedupiter.utils.load import load_from_spec, resolve_callable


def _copied_key(record: Any, fields: str | list[str]) -> Any:
    """Project ``record`` onto ``fields`` and copy each projected value."""
    key = record_key(record, fields)
    if isinstance(fields, str):
        return copy.copy(key)
    return tuple(copy.copy(value) for value in key)


def _normalize_fields(fields: str | Sequence[str] | None) -> str | list[str] | None:
    if fields is None:
        return None
    if isinstance(fields, str):
        if not fields.strip():
            raise ValueError("field names must be non-empty")
        return fields
    names = list(fields)
    if not names or not all(isinstance(f, str) and f.strip() for f in names):
        raise ValueError(f"fields must be a non-empty list of names, got {fields!r}")
    return names


class DedupeTransform(ObservedStreamTransformBase):
    """Drop records equal to the previously emitted record.

    Parameters
    - fields: optional field name (or list of names); when given only that
      projection of each record is compared
    - snapshot: retain a shallow copy of each emitted record (or of its
      projected field values), for sources that mutate and re-yield the same
      object
    """

    def __init__(
        self,
        fields: str | Sequence[str] | None = None,
        snapshot: bool = False,
    ) -> None:
        super().__init__()
        self.fields = _normalize_fields(fields)
        self.snapshot = snapshot

    def apply(self, stream: Iterable[Any]) -> Iterator[Any]:
        if self.fields is not None:
            return DedupByKey(
                stream,
                partial(_copied_key if self.snapshot else record_key, fields=self.fields),
                observer=self._observer,
            )
        return Dedup(
            stream,
            snapshot=copy.copy if self.snapshot else None,
            observer=self._observer,
        )


class DedupeByTransform(ObservedStreamTransformBase):
    """Drop records for which ``same(last_emitted, record)`` holds.

    ``same`` is a callable, a built-in predicate name (``both_whitespace``,
    ``equal``, ``case_insensitive``, ``always``) or a ``module:attr`` path.
    """

    def __init__(self, same: str | Callable[[Any, Any], bool], snapshot: bool = False) -> None:
        super().__init__()
        self.same = resolve_callable(PREDICATES_EP, same)
        self.snapshot = snapshot

    def apply(self, stream: Iterable[Any]) -> Iterator[Any]:
        return DedupBy(
            stream,
            self.same,
            snapshot=copy.copy if self.snapshot else None,
            observer=self._observer,
        )


class DedupeByKeyTransform(ObservedStreamTransformBase):
    """Drop records whose key matches the key of the last emitted record.

    Exactly one of ``field``, ``fields`` or ``key`` (callable or
    ``module:attr``) selects the key.
    """

    def __init__(
        self,
        field: str | None = None,
        fields: Sequence[str] | None = None,
        key: str | Callable[[Any], Any] | None = None,
    ) -> None:
        super().__init__()
        given = [name for name, value in (("field", field), ("fields", fields), ("key", key)) if value is not None]
        if len(given) != 1:
            raise ValueError(
                f"dedupe_by_key expects exactly one of field, fields, key; got {given or 'none'}"
            )
        if key is not None:
            if not callable(key) and (not isinstance(key, str) or ":" not in key):
                raise ValueError(f"key must be a callable or a 'module:attr' path, got {key!r}")
            self.key = key if callable(key) else load_from_spec(key)
            if not callable(self.key):
                raise TypeError(f"{key!r} does not resolve to a callable")
        else:
            self.key = partial(record_key, fields=_normalize_fields(field if field is not None else fields))

    def apply(self, stream: Iterable[Any]) -> Iterator[Any]:
        return DedupByKey(stream, self.key, observer=self._observer)
