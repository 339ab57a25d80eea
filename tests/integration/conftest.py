"""Shared fixtures for integration tests."""

import os

import pytest

from sidemail import Sidemail

# Skip all integration tests unless RUN_SIDEMAIL_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_SIDEMAIL_NETWORK_TESTS") != "1" or not os.environ.get("SIDEMAIL_API_KEY"),
    reason="Requires network access and an API key. "
    "Set RUN_SIDEMAIL_NETWORK_TESTS=1 and SIDEMAIL_API_KEY to run",
)


@pytest.fixture
def client():
    with Sidemail(timeout=30.0) as client:
        yield client
