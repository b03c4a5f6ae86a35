"""Logging filters for access log routing.

Request-completion records emitted by the HTTP middleware go to a separate
access log. They are excluded from the main application log file.
"""

import logging

ACCESS_LOGGER_NAME = "http"


def _is_access_record(record: logging.LogRecord) -> bool:
    return record.name == ACCESS_LOGGER_NAME or getattr(record, "is_access", False)


class AccessFilter(logging.Filter):
    """Filter to capture only HTTP access logs.

    Access records are identified by:
    - Logger name equal to "http"
    - Record having is_access=True attribute
    """

    def filter(self, record: logging.LogRecord) -> bool:
        """Return True only for access logs.

        Args:
            record: Log record to filter

        Returns:
            True if record is an access log, False otherwise
        """
        return _is_access_record(record)


class NonAccessFilter(logging.Filter):
    """Filter to exclude access logs from the main application log."""

    def filter(self, record: logging.LogRecord) -> bool:
        return not _is_access_record(record)
