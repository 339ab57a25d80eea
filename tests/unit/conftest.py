"""Shared fixtures."""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from sidemail import Sidemail

API_KEY = "test_api_key"
BASE_URL = "https://api.sidemail.io/v1"


@pytest.fixture(autouse=True)
def _clear_api_key_env(monkeypatch):
    """Keep a developer's SIDEMAIL_API_KEY out of the tests."""
    monkeypatch.delenv("SIDEMAIL_API_KEY", raising=False)


@pytest.fixture
def api_key() -> str:
    return API_KEY


@pytest.fixture
def make_client() -> Callable[..., Sidemail]:
    """Build a client whose requests are answered by ``handler``."""

    def _make(handler: Callable[[httpx.Request], httpx.Response], **options) -> Sidemail:
        http_client = httpx.Client(transport=httpx.MockTransport(handler))
        return Sidemail(api_key=API_KEY, http_client=http_client, **options)

    return _make


@pytest.fixture
def recorded() -> list[httpx.Request]:
    return []


@pytest.fixture
def json_handler(recorded):
    """Handler factory that records requests and answers with a JSON body."""

    def _factory(body=None, status_code: int = 200):
        def handler(request: httpx.Request) -> httpx.Response:
            recorded.append(request)
            return httpx.Response(status_code, json={} if body is None else body)

        return handler

    return _factory
