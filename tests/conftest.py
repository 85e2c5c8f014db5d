"""
Shared test fixtures and utilities for the pagepath test suite.
"""

from unittest.mock import Mock

import pytest


@pytest.fixture
def reporter():
    """Mock reporter recording every error() and log() call.

    Usage:
        def test_something(reporter):
            derive_path("a/{M.missing}", {}, reporter=reporter)
            assert reporter.error.call_count == 1
    """
    return Mock(spec_set=["error", "log"])
