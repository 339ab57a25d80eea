"""Email endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..core.enums import HTTPMethod
from ..core.pagination import PaginatedResponse
from ..core.resource import Resource
from .base import BaseResource


class Email(BaseResource):
    def send(self, params: Mapping[str, Any]) -> Resource:
        """Send a transactional email."""
        return self._request("email/send", params, HTTPMethod.POST)

    def search(self, params: Mapping[str, Any] | None = None) -> PaginatedResponse:
        """Search sent emails. The query travels in a POST body."""
        return self._list("email/search", params, HTTPMethod.POST)

    def get(self, email_id: str) -> Resource:
        return self._request(f"email/{email_id}")

    def delete(self, email_id: str) -> Resource:
        """Delete a scheduled email."""
        return self._request(f"email/{email_id}", method=HTTPMethod.DELETE)
