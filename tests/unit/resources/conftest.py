"""Fixtures for resource group tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from sidemail import Sidemail


@pytest.fixture
def client():
    """Mock client; perform_request answers with an empty object by default."""
    client = MagicMock(spec=Sidemail)
    client.perform_request.return_value = {}
    return client


@pytest.fixture
def list_page():
    return {
        "data": [{"id": "a"}, {"id": "b"}],
        "hasMore": False,
        "paginationCursorNext": None,
        "paginationCursorPrev": None,
    }
