"""Unit tests for logging setup and filters."""

import logging
from pathlib import Path

import pytest

from university_api.core.logging import get_log_level, setup_logging
from university_api.core.logging_filters import AccessFilter, NonAccessFilter


def make_record(name: str, **extra) -> logging.LogRecord:
    record = logging.LogRecord(name, logging.INFO, __file__, 1, "msg", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.mark.unit
class TestLogFilters:
    """Tests for access log routing."""

    def test_access_logger_routed_to_access_log(self):
        record = make_record("http")

        assert AccessFilter().filter(record) is True
        assert NonAccessFilter().filter(record) is False

    def test_flagged_record_is_access(self):
        record = make_record("university_api.main", is_access=True)

        assert AccessFilter().filter(record) is True

    def test_application_logger_routed_to_backend_log(self):
        record = make_record("university_api.core.universities.service")

        assert AccessFilter().filter(record) is False
        assert NonAccessFilter().filter(record) is True


@pytest.mark.unit
class TestSetupLogging:
    """Tests for setup_logging."""

    def test_log_level_names(self):
        assert get_log_level("debug") == logging.DEBUG
        assert get_log_level("bogus") == logging.INFO

    def test_file_handlers_created(self, tmp_path):
        root = logging.getLogger()
        original_handlers = root.handlers[:]
        original_level = root.level
        try:
            setup_logging(log_level="INFO", logs_dir=str(tmp_path), log_to_file=True)

            filenames = sorted(
                Path(h.baseFilename).name
                for h in root.handlers
                if hasattr(h, "baseFilename")
            )
            assert filenames == ["access.log", "backend.log"]
        finally:
            for handler in root.handlers:
                handler.close()
            root.handlers = original_handlers
            root.setLevel(original_level)
