"""Root conftest: shared test configuration."""

import logging
import os

import pytest

# Tests never talk to a real MongoDB; routes get an in-memory database injected
os.environ.setdefault("DB_BASE_URL", "mongodb://localhost:27017/")


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """Undo root-logger handlers/level installed by app startup in a test."""
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    logging.root.handlers[:] = handlers
    logging.root.setLevel(level)
