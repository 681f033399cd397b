"""
Pytest configuration and fixtures for ff-chainlog tests.
"""

import threading

import pytest
from ff_chainlog import HandlerError, Logger


class CountingHandler:
    """Counts and keeps every record it is given."""

    def __init__(self):
        self.records = []
        self.threads = set()
        self._lock = threading.Lock()

    def handle(self, record):
        with self._lock:
            self.records.append(record)
            self.threads.add(threading.current_thread().name)

    @property
    def count(self):
        return len(self.records)


class FailingHandler(CountingHandler):
    """Counts records, then fails as if the sink were broken."""

    def handle(self, record):
        super().handle(record)
        raise HandlerError("disk full", handler="FailingHandler")


class BlockingHandler(CountingHandler):
    """Blocks inside handle() until released."""

    def __init__(self):
        super().__init__()
        self.entered = threading.Event()
        self.release = threading.Event()

    def handle(self, record):
        self.entered.set()
        self.release.wait(timeout=10)
        super().handle(record)


class ExitRecorder:
    """Stands in for process termination."""

    def __init__(self):
        self.calls = []

    def __call__(self, status):
        self.calls.append(status)


@pytest.fixture
def counting_handler():
    return CountingHandler()


@pytest.fixture
def failing_handler():
    return FailingHandler()


@pytest.fixture
def blocking_handler():
    handler = BlockingHandler()
    yield handler
    handler.release.set()


@pytest.fixture
def exit_recorder():
    return ExitRecorder()


@pytest.fixture
def make_logger(exit_recorder):
    """Create loggers that are always closed at teardown and never exit the process."""
    loggers = []

    def _make(**kwargs):
        kwargs.setdefault("exit_func", exit_recorder)
        logger = Logger(**kwargs)
        loggers.append(logger)
        return logger

    yield _make

    for logger in loggers:
        logger.close()
