import logging

import pytest

from blockwise.core import config


class RecordingHandler(logging.Handler):
    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.records = []

    def emit(self, record):
        self.records.append(record)

    def messages(self, level=logging.DEBUG):
        return [r.getMessage() for r in self.records if r.levelno == level]


@pytest.fixture
def package_records():
    """Attach a handler to the package logger, left at its configured level."""
    handler = RecordingHandler()
    package_logger = logging.getLogger("blockwise")
    package_logger.addHandler(handler)
    try:
        yield handler
    finally:
        package_logger.removeHandler(handler)


@pytest.fixture
def tracing(monkeypatch, package_records):
    monkeypatch.setattr(config.settings, "trace", True)
    return package_records
