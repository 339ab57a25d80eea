"""Messenger (newsletter) endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..core.enums import HTTPMethod
from ..core.pagination import PaginatedResponse
from ..core.resource import Resource
from .base import BaseResource


class Messenger(BaseResource):
    def list(self, params: Mapping[str, Any] | None = None) -> PaginatedResponse:
        return self._list("messenger", params)

    def get(self, messenger_id: str) -> Resource:
        return self._request(f"messenger/{messenger_id}")

    def create(self, params: Mapping[str, Any]) -> Resource:
        return self._request("messenger", params, HTTPMethod.POST)

    def update(self, messenger_id: str, params: Mapping[str, Any]) -> Resource:
        return self._request(f"messenger/{messenger_id}", params, HTTPMethod.PATCH)

    def delete(self, messenger_id: str) -> Resource:
        return self._request(f"messenger/{messenger_id}", method=HTTPMethod.DELETE)
