from __future__ import annotations

import logging

import pytest

from dedupiter.config import StreamPipelineConfig
from dedupiter.observability import ObserverRegistry
from dedupiter.pipeline import instantiate_transforms, run_pipeline, transform_stream
from dedupiter.transforms import DedupeByKeyTransform, DedupeByTransform, DedupeTransform
from tests.unit.helpers import CountingIterator, make_tick


def test_instantiate_transforms_param_shapes():
    transforms = instantiate_transforms(
        [
            {"dedupe": None},
            {"dedupe_by": "both_whitespace"},
            {"dedupe_by_key": {"field": "id"}},
            {"dedupe": [["id", "value"]]},
        ]
    )
    assert [type(t) for t in transforms] == [
        DedupeTransform,
        DedupeByTransform,
        DedupeByKeyTransform,
        DedupeTransform,
    ]
    assert transforms[3].fields == ["id", "value"]


def test_instantiate_transforms_rejects_bad_clause():
    with pytest.raises(TypeError, match="one-key mapping"):
        instantiate_transforms([{"dedupe": None, "dedupe_by": None}])


def test_unknown_transform_name():
    with pytest.raises(ValueError, match="No entry point 'uniq'"):
        instantiate_transforms([{"uniq": None}])


def test_transform_stream_chains_steps_lazily():
    source = CountingIterator("aa  bb    aa")
    out = transform_stream(source, [{"dedupe_by": "both_whitespace"}, {"dedupe": None}])
    assert source.pulls == 0
    assert "".join(out) == "a b a"


def test_transform_stream_without_steps_is_passthrough():
    assert list(transform_stream([1, 1, 2], None)) == [1, 1, 2]


def test_run_pipeline_from_config():
    config = StreamPipelineConfig.model_validate(
        {"steps": [{"dedupe_by_key": {"field": "id"}}]}
    )
    stream = [make_tick(1.0, 0, "a"), make_tick(2.0, 1, "a"), make_tick(3.0, 2, "b")]
    assert [t.value for t in run_pipeline(stream, config)] == [1.0, 3.0]


def test_run_pipeline_logs_summary(caplog):
    config = StreamPipelineConfig.model_validate({"log_level": "INFO", "steps": [{"dedupe": None}]})
    pkg_logger = logging.getLogger("dedupiter")
    previous = pkg_logger.level
    try:
        with caplog.at_level(logging.INFO, logger="dedupiter"):
            assert list(run_pipeline([1, 1, 2], config)) == [1, 2]
    finally:
        pkg_logger.setLevel(previous)
    assert "Source exhausted: adapter=Dedup emitted=2 suppressed=1" in caplog.text


def test_run_pipeline_uses_given_registry():
    events = []
    registry = ObserverRegistry({"dedupe": lambda logger: events.append})
    config = StreamPipelineConfig.model_validate({"steps": [{"dedupe": None}]})
    list(run_pipeline("xxy", config, observer_registry=registry))
    assert [e.type for e in events] == ["duplicate_suppressed", "exhausted"]
