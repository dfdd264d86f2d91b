"""Tests for the structlog-backed console logger."""

import io
import logging

import pytest
import structlog

from guard.config import UIOptions
from guard.logging import GuardLogger, GuardRenderer, build_logger, configure_logging, get_logger
from guard.severity import Severity
from guard.ui.pipeline import UI


class TestGuardRenderer:
    """Test template expansion."""

    def test_expands_placeholders(self) -> None:
        renderer = GuardRenderer(":time - :severity - :message")
        line = renderer(
            None, "info", {"timestamp": "12:00:01", "level": "info", "event": "Hello", "plugin": "Guard"}
        )
        assert line == "12:00:01 - INFO - Hello"

    def test_warning_rendered_as_warn(self) -> None:
        renderer = GuardRenderer(":severity")
        assert renderer(None, "warning", {"level": "warning", "event": "x"}) == "WARN"

    def test_plugin_and_progname(self) -> None:
        renderer = GuardRenderer(":plugin|:progname :message")
        line = renderer(None, "info", {"level": "info", "event": "done", "plugin": "Rspec"})
        assert line == "Rspec|Rspec done"

    def test_unknown_placeholder_left_alone(self) -> None:
        renderer = GuardRenderer(":message :unknown")
        assert renderer(None, "info", {"level": "info", "event": "hi"}) == "hi :unknown"

    def test_message_not_re_expanded(self) -> None:
        renderer = GuardRenderer(":message")
        assert renderer(None, "info", {"level": "info", "event": "at :time"}) == "at :time"

    def test_extra_keys_appended(self) -> None:
        renderer = GuardRenderer(":message")
        line = renderer(None, "debug", {"level": "debug", "event": "Clearing", "command": "clear", "_x": 1})
        assert line == "Clearing command=clear"

    def test_missing_timestamp_uses_now(self) -> None:
        renderer = GuardRenderer(":time", time_format="%Y")
        line = renderer(None, "info", {"level": "info", "event": ""})
        assert len(line) == 4
        assert line.isdigit()


class TestGuardLogger:
    """Test the leveled logger."""

    def test_writes_line(self) -> None:
        device = io.StringIO()
        logger = GuardLogger(device, template=":severity :plugin :message")
        logger.write("Guard is now watching", Severity.INFO, "Guard")
        assert device.getvalue() == "INFO Guard Guard is now watching\n"

    def test_level_threshold(self) -> None:
        device = io.StringIO()
        logger = GuardLogger(device, level=Severity.ERROR, template=":message")
        for severity in Severity:
            logger.write(severity.label, severity, "Guard")
        assert device.getvalue() == "ERROR\n"

    def test_debug_level_shows_everything(self) -> None:
        device = io.StringIO()
        logger = GuardLogger(device, level=Severity.DEBUG, template=":severity")
        for severity in Severity:
            logger.write("m", severity, "Guard")
        assert device.getvalue().split() == ["DEBUG", "INFO", "WARN", "ERROR"]

    def test_build_logger_from_options(self) -> None:
        device = io.StringIO()
        options = UIOptions.build(device=device, level="warn", template=":message", time_format="%H")
        logger = build_logger(options)
        assert logger.device is device
        assert logger.level is Severity.WARN
        logger.write("kept", Severity.WARN, "Guard")
        logger.write("dropped", Severity.INFO, "Guard")
        assert device.getvalue() == "kept\n"

    def test_default_device_is_stderr(self, capsys) -> None:
        logger = build_logger(UIOptions.build(template=":message"))
        logger.write("to stderr", Severity.INFO, "Guard")
        assert capsys.readouterr().err == "to stderr\n"


@pytest.mark.usefixtures("restore_logging")
class TestConfigureLogging:
    """Test internal diagnostics routing."""

    def test_unconfigured_debug_is_dropped(self, capsys) -> None:
        structlog.reset_defaults()
        get_logger("guard.tests").debug("quiet", key=1)
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "quiet" not in captured.err

    def test_debug_goes_to_stderr(self, capsys) -> None:
        configure_logging(level="DEBUG")
        get_logger("guard.tests").debug("Clearing screen", command="clear")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert " - DEBUG - Clearing screen command=clear" in captured.err

    def test_threshold_applies(self, capsys) -> None:
        configure_logging(level="WARNING")
        log = get_logger("guard.tests")
        log.info("hidden")
        log.warning("shown")
        err = capsys.readouterr().err
        assert "hidden" not in err
        assert " - WARN - shown" in err

    def test_options_replacement_logs_new_level(self, capsys) -> None:
        configure_logging(level="DEBUG")
        ui = UI({"device": io.StringIO()}, logger=None)
        ui.options = {"device": io.StringIO(), "level": "error"}
        assert "UI options replaced ui_level=ERROR" in capsys.readouterr().err
