"""Base class for API resource groups."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..core.enums import HTTPMethod
from ..core.pagination import PaginatedResponse, Requester
from ..core.resource import Resource


class BaseResource:
    """Resource group bound to a client."""

    def __init__(self, client: Requester) -> None:
        self._client = client

    def _request(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        method: HTTPMethod = HTTPMethod.GET,
    ) -> Resource:
        response = self._client.perform_request(path, params=params, method=method)
        return Resource(response)

    def _list(
        self,
        path: str,
        params: Mapping[str, Any] | None,
        method: HTTPMethod = HTTPMethod.GET,
    ) -> PaginatedResponse:
        params = dict(params or {})
        response = self._client.perform_request(path, params=params, method=method)
        return PaginatedResponse(response, self._client, path, params, method)
