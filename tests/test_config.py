"""test_config.py - Unit tests for configure() and resolve_level().

Covers:
    - resolve_level() accepts ints, names, aliases and numeric strings
    - resolve_level() rejects unknown names
    - configure() installs one handler and sets the root level
    - configure() reads LOGFACADE_LEVEL when no level is given
    - Calling configure() twice does not duplicate output
    - Integration: facade records end up in the configured stream
"""

import io
import logging

import pytest

from logfacade import configure, get_logger, resolve_level
from logfacade.config import LEVEL_ENV_VAR


@pytest.fixture
def root_logger():
    """Restore the root logger's handlers and level after the test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


# ---------------------------------------------------------------------------
# resolve_level()
# ---------------------------------------------------------------------------


class TestResolveLevel:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (None, logging.INFO),
            (logging.ERROR, logging.ERROR),
            ("debug", logging.DEBUG),
            ("INFO", logging.INFO),
            ("warn", logging.WARNING),
            ("Warning", logging.WARNING),
            ("fatal", logging.CRITICAL),
            (" error ", logging.ERROR),
            ("15", 15),
        ],
    )
    def test_resolves(self, value, expected):
        assert resolve_level(value) == expected

    def test_unknown_name_raises(self):
        with pytest.raises(ValueError, match="unknown log level"):
            resolve_level("loud")


# ---------------------------------------------------------------------------
# configure()
# ---------------------------------------------------------------------------


class TestConfigure:
    def test_sets_root_level_and_writes_to_stream(self, root_logger):
        stream = io.StringIO()
        configure(level="debug", stream=stream, fmt="%(levelname)s %(message)s")

        assert root_logger.level == logging.DEBUG
        logging.getLogger("logfacade.tests.config").debug("hello")
        assert "DEBUG hello" in stream.getvalue()

    def test_level_from_environment(self, root_logger, monkeypatch):
        monkeypatch.setenv(LEVEL_ENV_VAR, "error")
        configure(stream=io.StringIO())
        assert root_logger.level == logging.ERROR

    def test_default_level_without_environment(self, root_logger, monkeypatch):
        monkeypatch.delenv(LEVEL_ENV_VAR, raising=False)
        configure(stream=io.StringIO())
        assert root_logger.level == logging.INFO

    def test_unknown_environment_level_raises(self, root_logger, monkeypatch):
        monkeypatch.setenv(LEVEL_ENV_VAR, "chatty")
        with pytest.raises(ValueError):
            configure(stream=io.StringIO())

    def test_second_call_replaces_handler(self, root_logger):
        first = io.StringIO()
        second = io.StringIO()
        h1 = configure(level="info", stream=first, fmt="%(message)s")
        h2 = configure(level="info", stream=second, fmt="%(message)s")

        assert h1 not in root_logger.handlers
        assert h2 in root_logger.handlers
        logging.getLogger("logfacade.tests.config").info("once")
        assert first.getvalue() == ""
        assert second.getvalue() == "once\n"


# ---------------------------------------------------------------------------
# Integration
# ---------------------------------------------------------------------------


class TestIntegration:
    def test_facade_output_reaches_configured_stream(self, root_logger):
        stream = io.StringIO()
        configure(
            level="info",
            stream=stream,
            fmt="%(levelname)s %(filename)s %(message)s",
        )
        log = get_logger("logfacade.tests.integration")

        try:
            raise ConnectionError("refused\nretry later")
        except ConnectionError as exc:
            log.warn_debugf(exc, "sync of %s failed", "orders")

        log.debugf("hidden %s", "detail")

        output = stream.getvalue()
        assert (
            "WARNING test_config.py sync of orders failed "
            "(Switch to DEBUG for full stack trace): ConnectionError: refused"
        ) in output
        assert "Traceback" not in output
        assert "hidden" not in output
