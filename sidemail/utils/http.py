"""HTTP client helper."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

import httpx


def _param_name(key: Any) -> str:
    return key.value if isinstance(key, Enum) else str(key)


def build_url(base_url: str, path: str, params: Mapping[Any, Any] | None = None) -> httpx.URL:
    """Join ``path`` onto ``base_url`` and append ``params`` to the query string.

    Query pairs already present in the URL are kept, new pairs are appended
    after them (duplicate names included). None values are left out.
    """
    base = base_url if base_url.endswith("/") else f"{base_url}/"
    url = httpx.URL(f"{base}{path}")
    if not params:
        return url

    pairs = list(url.params.multi_items())
    for key, value in params.items():
        name = _param_name(key)
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend((name, v) for v in value if v is not None)
        else:
            pairs.append((name, value))
    return url.copy_with(params=httpx.QueryParams(pairs))


class HTTPClient:
    """Sync HTTP client wrapper."""

    def __init__(
        self,
        timeout: float | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self.timeout = timeout
        self._client = client
        self._owns_client = client is None

    @property
    def client(self) -> httpx.Client:
        """Get or create the underlying httpx client.

        Only a client created here is replaced once closed; a closed injected
        client is returned as-is and httpx refuses to send with it.
        """
        if self._client is None or (self._owns_client and self._client.is_closed):
            if self.timeout is None:
                self._client = httpx.Client()
            else:
                self._client = httpx.Client(timeout=self.timeout)
            self._owns_client = True
        return self._client

    def request(
        self,
        method: str,
        url: httpx.URL | str,
        headers: Mapping[str, str] | None = None,
        json_body: Any = None,
    ) -> httpx.Response:
        """Send a request; ``json_body`` is encoded only when not None."""
        if json_body is None:
            return self.client.request(method, url, headers=headers)
        return self.client.request(method, url, headers=headers, json=json_body)

    def close(self) -> None:
        """Close the client if it was created here."""
        if self._owns_client and self._client is not None and not self._client.is_closed:
            self._client.close()

    def __enter__(self) -> HTTPClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
