import logging

import pytest

from halfsearch import logging_setup
from halfsearch.config import LoggingConfig


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_from_dict():
    resolved = logging_setup.setup_logging({"level": "debug"})
    assert isinstance(resolved, LoggingConfig)
    assert logging.getLogger().level == logging.DEBUG
    assert logging_setup.is_configured()


def test_setup_does_not_duplicate_handlers():
    logging_setup.setup_logging()
    logging_setup.setup_logging(LoggingConfig(json_format=True))
    assert len(logging.getLogger().handlers) == 1


def test_search_debug_logging(caplog):
    from halfsearch.searching.basic.binary_search import BoundedBinarySearch

    with caplog.at_level(logging.DEBUG, logger="halfsearch"):
        BoundedBinarySearch().execute([1, 2, 3], 3, 0, 9)
    messages = [r.getMessage() for r in caplog.records]
    assert any("Rejecting range [0, 9)" in m for m in messages)


def test_app_name_bound_to_context():
    import structlog

    logging_setup.setup_logging({"app_name": "bench"})
    assert structlog.contextvars.get_contextvars()["app"] == "bench"
    structlog.contextvars.clear_contextvars()
