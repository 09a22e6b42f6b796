# tests/conftest.py
import pytest

from two_stack_queue import TwoStackQueue
from reference_queue import ReferenceQueue


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "simulation: tests that run an asimpy environment")


@pytest.fixture
def queue():
    """Empty two-stack queue."""
    return TwoStackQueue()


@pytest.fixture
def reference():
    """Empty deque-backed reference queue."""
    return ReferenceQueue()
