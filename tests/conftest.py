from __future__ import annotations

import pytest

from dedupiter.utils import load as dd_load


@pytest.fixture(autouse=True)
def _clear_entry_point_cache():
    """Entry-point lookups are cached per process; isolate tests from each other."""
    dd_load.load_ep.cache_clear()
    yield
    dd_load.load_ep.cache_clear()
