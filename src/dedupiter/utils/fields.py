from typing import Any, Mapping, Sequence


def get_field(record: Any, field: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(field)
    return getattr(record, field, None)


def record_key(record: Any, fields: str | Sequence[str] | None) -> Any:
    """Project ``record`` onto ``fields``.

    A single field name yields the bare value; a list yields a tuple; no
    fields yields the record itself.
    """
    if not fields:
        return record
    if isinstance(fields, str):
        return get_field(record, fields)
    return tuple(get_field(record, field) for field in fields)
