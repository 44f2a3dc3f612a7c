"""
Pytest configuration file for the combinator tests.

This file ensures that the project root is in the Python path
so that test files can import exotic, alternate, lazy and utils.
"""

import sys
from pathlib import Path

# Add the parent directory to the Python path
parent_dir = Path(__file__).parent.parent
if str(parent_dir) not in sys.path:
    sys.path.insert(0, str(parent_dir))

import pytest
from utils import clear_performance_metrics


@pytest.fixture(autouse=True)
def reset_performance_metrics():
    """Every test starts with an empty traversal log"""
    clear_performance_metrics()
    yield
    clear_performance_metrics()


@pytest.fixture
def stateful_first_only():
    """Predicate that passes only the first item it is ever called with"""
    seen = []

    def first_only(x):
        seen.append(x)
        return len(seen) == 1

    first_only.seen = seen
    return first_only
