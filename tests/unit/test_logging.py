"""Unit tests for the CLI logging setup."""

import logging
from logging.handlers import MemoryHandler

import pytest
from rich.logging import RichHandler

from clinicflow.logging import (
    LoggingSettings,
    configure_logging,
    describe_database,
    log_startup,
    tag_library_records,
)

# pylint: disable=magic-value-comparison


@pytest.fixture
def restore_logging():
    """Put the root logger and touched loggers back after the test."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    saved_levels = {
        name: logging.getLogger(name).level for name in ("sqlalchemy", "alembic")
    }
    yield
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
            if isinstance(handler, MemoryHandler) and handler.target is not None:
                handler.target.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)
    for name, level in saved_levels.items():
        logging.getLogger(name).setLevel(level)


class TestConsoleLevel:
    """Tests for LoggingSettings.console_level."""

    @staticmethod
    @pytest.mark.parametrize(
        ("verbosity", "expected"),
        [
            (0, logging.WARNING),
            (1, logging.INFO),
            (2, logging.DEBUG),
            (5, logging.DEBUG),
            (-1, logging.ERROR),
            (-9, logging.CRITICAL),
        ],
    )
    def test_steps_from_warning(verbosity, expected):
        assert LoggingSettings(verbosity=verbosity).console_level == expected

    @staticmethod
    def test_debug_wins_over_quiet():
        assert LoggingSettings(verbosity=-3, debug=True).console_level == logging.DEBUG


@pytest.mark.parametrize(
    ("name", "prefix"),
    [
        ("clinicflow.service_layer.messagebus", ""),
        ("clinicflow", ""),
        ("sqlalchemy.engine.Engine", "[sqlalchemy]"),
        ("alembic", "[alembic]"),
    ],
)
def test_tag_library_records(name, prefix):
    """Library records are labelled; project records are not; none are dropped."""
    record = logging.LogRecord(name, logging.INFO, __file__, 1, "msg", None, None)
    assert tag_library_records(record) is True
    assert record.prefix == prefix


@pytest.mark.usefixtures("restore_logging")
class TestConfigureLogging:
    """Tests for configure_logging."""

    @staticmethod
    def test_console_only_without_log_path():
        handlers = configure_logging(LoggingSettings(verbosity=1))
        assert len(handlers) == 1
        assert isinstance(handlers[0], RichHandler)
        assert handlers[0].level == logging.INFO
        assert logging.getLogger().handlers == handlers

    @staticmethod
    def test_recorder_writes_on_warning(tmp_path):
        log_path = tmp_path / "nested" / "latest.log"
        handlers = configure_logging(
            LoggingSettings(log_path=log_path, recorder_capacity=10)
        )
        recorder = handlers[1]
        assert isinstance(recorder, MemoryHandler)

        logger = logging.getLogger("clinicflow.tests")
        logger.debug("sample S-1 registered")
        assert log_path.read_text(encoding="utf-8") == ""
        logger.warning("sample S-1 rejected")
        text = log_path.read_text(encoding="utf-8")
        assert "DEBUG clinicflow.tests" in text
        assert "sample S-1 rejected" in text

    @staticmethod
    def test_logger_levels_are_applied():
        configure_logging(
            LoggingSettings(logger_levels={"sqlalchemy": logging.INFO})
        )
        assert logging.getLogger("sqlalchemy").level == logging.INFO


class TestDescribeDatabase:
    """Tests for describe_database."""

    @staticmethod
    def test_unset(monkeypatch):
        monkeypatch.delenv("CLINICFLOW_DB_URL", raising=False)
        assert describe_database() == "<unset>"

    @staticmethod
    def test_invalid(monkeypatch):
        monkeypatch.setenv("CLINICFLOW_DB_URL", "not a valid url")
        assert describe_database() == "<invalid>"

    @staticmethod
    def test_hides_password(monkeypatch):
        monkeypatch.setenv(
            "CLINICFLOW_DB_URL", "postgresql+psycopg://clinic:s3cr3t@db/clinicflow"
        )
        assert describe_database() == (
            "postgresql (postgresql+psycopg://clinic:***@db/clinicflow)"
        )


def test_log_startup_summary(monkeypatch, caplog):
    """The INFO line names the console level, recorder state and database."""
    monkeypatch.setenv("CLINICFLOW_DB_URL", "sqlite:///clinic.db")
    logger = logging.getLogger("clinicflow.tests.startup")
    settings = LoggingSettings(verbosity=1)

    with caplog.at_level(logging.DEBUG, logger="clinicflow.tests.startup"):
        log_startup(logger, settings, [], app_version="9.9.9")

    info = [r.getMessage() for r in caplog.records if r.levelno == logging.INFO]
    assert info == [
        "CLINICFLOW 9.9.9 - console=INFO, flight-recorder=OFF, "
        "database=sqlite (sqlite:///clinic.db)"
    ]
    assert "Per-logger levels: <none>" in caplog.text
