import logging
import os
import sys

import pytest

# Add the project root to the path so we can import from the package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from timecorrect.storage.memory import InMemoryHistoryStore  # noqa: E402
from timecorrect.utils.config import CorrectionSettings  # noqa: E402


@pytest.fixture
def settings():
    return CorrectionSettings()


@pytest.fixture
def memory_store():
    return InMemoryHistoryStore()


@pytest.fixture
def test_logger():
    """Create a logger for testing."""
    logger = logging.getLogger("test_logger")
    logger.setLevel(logging.DEBUG)
    return logger
