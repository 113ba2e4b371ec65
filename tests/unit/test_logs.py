"""Unit tests for the logging facade."""

import logging
from typing import Any, List

import pytest

from web_omnihandler import logs
from web_omnihandler.exceptions import ConfigurationError
from web_omnihandler.logs import LogSinks


class TestLogFacade:
    """Tests for set_logs/reset_logs and the level functions."""

    def teardown_method(self) -> None:
        """Restore the default log sinks."""
        logs.reset_logs()

    def test_default_sinks_forward_to_standard_logger(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test that the defaults never fail and reach the std logger."""
        logs.reset_logs()

        with caplog.at_level(logging.DEBUG, logger="web_omnihandler"):
            logs.debug("Request", "{}")
            logs.info("info line")
            logs.warn("warn line")
            logs.error("error line")

        assert [(r.levelname, r.getMessage()) for r in caplog.records] == [
            ("DEBUG", "Request {}"),
            ("INFO", "info line"),
            ("WARNING", "warn line"),
            ("ERROR", "error line"),
        ]

    def test_single_function_for_every_level(self) -> None:
        """Test that one callable receives all four levels."""
        lines: List[tuple] = []
        logs.set_logs(lambda *parts: lines.append(parts))

        logs.debug("d")
        logs.info("i")
        logs.warn("w")
        logs.error("e")

        assert lines == [("d",), ("i",), ("w",), ("e",)]

    def test_mapping_per_level(self) -> None:
        """Test distinct sinks per level."""
        seen: List[Any] = []
        logs.set_logs(
            {
                "debug": lambda *p: seen.append(("debug",) + p),
                "info": lambda *p: seen.append(("info",) + p),
                "warn": lambda *p: seen.append(("warn",) + p),
                "error": lambda *p: seen.append(("error",) + p),
            }
        )

        logs.warn("careful")
        logs.error("broken")

        assert seen == [("warn", "careful"), ("error", "broken")]

    def test_partial_mapping_keeps_defaults(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test that levels missing from a mapping keep the default sink."""
        errors: List[tuple] = []
        logs.set_logs({"error": lambda *p: errors.append(p)})

        with caplog.at_level(logging.INFO, logger="web_omnihandler"):
            logs.info("still standard")
        logs.error("custom")

        assert errors == [("custom",)]
        assert caplog.records[-1].getMessage() == "still standard"

    def test_new_sinks_replace_old_ones(self) -> None:
        """Test that later set_logs calls win for every level."""
        old: List[tuple] = []
        new: List[tuple] = []
        logs.set_logs(lambda *p: old.append(p))
        logs.set_logs(lambda *p: new.append(p))

        for log in (logs.debug, logs.info, logs.warn, logs.error):
            log("x")

        assert old == []
        assert len(new) == 4

    def test_reset_restores_defaults(self) -> None:
        """Test that reset_logs reinstalls the standard-logger sinks."""
        logs.set_logs(lambda *p: None)
        logs.reset_logs()

        assert logs.get_logs().debug.__name__ == "default_debug"
        assert logs.get_logs().warn.__name__ == "default_warning"

    def test_unknown_level_rejected(self) -> None:
        """Test that misspelled levels are configuration errors."""
        with pytest.raises(ConfigurationError, match="Unknown log levels"):
            logs.set_logs({"warning": print})

    def test_non_callable_rejected(self) -> None:
        """Test that unusable values are configuration errors."""
        with pytest.raises(ConfigurationError):
            logs.set_logs(42)  # type: ignore[arg-type]
        with pytest.raises(ConfigurationError, match="not callable"):
            logs.set_logs({"info": "stdout"})

    def test_level_for(self) -> None:
        """Test the request-logging severity policy."""
        sinks = LogSinks.coerce(print)

        assert logs.level_for(sinks, True) is sinks.info
        assert logs.level_for(sinks, False) is sinks.debug
