import logging

from dedupiter.observability import DedupEvent, ObserverRegistry, default_observer_registry


def _logger(level: int) -> logging.Logger:
    logger = logging.getLogger(f"tests.observability.{logging.getLevelName(level)}")
    logger.setLevel(level)
    return logger


def test_dedupe_observer_inactive_below_info():
    registry = default_observer_registry()
    assert registry.get("dedupe", _logger(logging.WARNING)) is None


def test_unknown_observer_name():
    assert ObserverRegistry().get("dedupe", _logger(logging.DEBUG)) is None


def test_dedupe_observer_logs_suppressions_at_debug(caplog):
    logger = _logger(logging.DEBUG)
    observer = default_observer_registry().get("dedupe", logger)
    assert observer is not None
    with caplog.at_level(logging.DEBUG, logger=logger.name):
        observer(DedupEvent("duplicate_suppressed", {"adapter": "Dedup", "element": "a", "suppressed": 3}))
        observer(DedupEvent("exhausted", {"adapter": "Dedup", "emitted": 5, "suppressed": 3}))
    assert "Suppressed consecutive duplicate: adapter=Dedup element='a' total=3" in caplog.text
    assert "Source exhausted: adapter=Dedup emitted=5 suppressed=3" in caplog.text


def test_dedupe_observer_skips_suppressions_at_info(caplog):
    logger = _logger(logging.INFO)
    observer = default_observer_registry().get("dedupe", logger)
    with caplog.at_level(logging.INFO, logger=logger.name):
        observer(DedupEvent("duplicate_suppressed", {"adapter": "Dedup", "element": "a", "suppressed": 1}))
    assert caplog.text == ""
