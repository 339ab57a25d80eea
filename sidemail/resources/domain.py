"""Sending domain endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..core.enums import HTTPMethod
from ..core.pagination import PaginatedResponse
from ..core.resource import Resource
from .base import BaseResource


class Domain(BaseResource):
    def list(self, params: Mapping[str, Any] | None = None) -> PaginatedResponse:
        return self._list("domains", params)

    def create(self, params: Mapping[str, Any]) -> Resource:
        return self._request("domains", params, HTTPMethod.POST)

    def delete(self, domain_id: str) -> Resource:
        return self._request(f"domains/{domain_id}", method=HTTPMethod.DELETE)
