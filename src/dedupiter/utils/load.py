import importlib
import importlib.metadata as md
from functools import lru_cache
from pathlib import Path

import yaml


_BUILTIN_EP_FALLBACKS: dict[tuple[str, str], str] = {
    # Stream transforms
    ("dedupiter.transforms", "dedupe"): "dedupiter.transforms.dedupe:DedupeTransform",
    ("dedupiter.transforms", "dedupe_by"): "dedupiter.transforms.dedupe:DedupeByTransform",
    ("dedupiter.transforms", "dedupe_by_key"): "dedupiter.transforms.dedupe:DedupeByKeyTransform",
    # Pairwise predicates for dedupe_by
    ("dedupiter.predicates", "both_whitespace"): "dedupiter.predicates:both_whitespace",
    ("dedupiter.predicates", "equal"): "dedupiter.predicates:equal",
    ("dedupiter.predicates", "case_insensitive"): "dedupiter.predicates:case_insensitive",
    ("dedupiter.predicates", "always"): "dedupiter.predicates:always",
}


def load_from_spec(spec: str):
    """Import ``module:attr`` and return the attribute."""
    module_name, _, attr = spec.partition(":")
    if not module_name or not attr:
        raise ValueError(f"Invalid import spec (expected 'module:attr'): {spec!r}")
    module = importlib.import_module(module_name)
    try:
        return getattr(module, attr)
    except AttributeError as exc:
        raise ImportError(f"Attribute {attr!r} not found in {module_name!r}") from exc


@lru_cache
def load_ep(group: str, name: str):
    eps = md.entry_points().select(group=group, name=name)
    if not eps:
        # Fallback to built-in registry to support running from a source checkout
        # without requiring the package to be reinstalled after pyproject changes.
        spec = _BUILTIN_EP_FALLBACKS.get((group, name))
        if spec:
            return load_from_spec(spec)
        available_eps = md.entry_points().select(group=group)
        available_fallbacks = [n for (g, n), _ in _BUILTIN_EP_FALLBACKS.items() if g == group]
        available = ", ".join(sorted({ep.name for ep in available_eps} | set(available_fallbacks)))
        raise ValueError(
            f"No entry point '{name}' in '{group}'. Available: {available or '(none)'}")
    if len(eps) > 1:
        mods = ", ".join(sorted({ep.value for ep in eps}))
        if len({ep.value for ep in eps}) > 1:
            raise ValueError(
                f"Ambiguous entry point '{name}' in '{group}': {mods}")
    # EntryPoints in newer Python versions are mapping-like; avoid integer indexing
    ep = next(iter(eps))
    return ep.load()


def resolve_callable(group: str, ref):
    """Return ``ref`` if callable, else resolve it as ``module:attr`` or an entry point name."""
    if callable(ref):
        return ref
    if not isinstance(ref, str) or not ref.strip():
        raise TypeError(f"Expected a callable or a non-empty name, got {ref!r}")
    ref = ref.strip()
    fn = load_from_spec(ref) if ":" in ref else load_ep(group, ref)
    if not callable(fn):
        raise TypeError(f"{ref!r} does not resolve to a callable")
    return fn


def load_yaml(p: Path, *, require_mapping: bool = True):
    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise FileNotFoundError(f"YAML file not found: {p}") from e
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {p}: {e}") from e

    if data is None:
        return {}
    if require_mapping and not isinstance(data, dict):
        raise TypeError(
            f"Top-level YAML in {p} must be a mapping, got {type(data).__name__}")
    return data
