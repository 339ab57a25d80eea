"""Contact endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..core.enums import HTTPMethod
from ..core.exceptions import ValidationError
from ..core.pagination import PaginatedResponse
from ..core.resource import Resource
from .base import BaseResource


class Contact(BaseResource):
    """Contacts, keyed by email address."""

    def create_or_update(self, params: Mapping[str, Any]) -> Resource:
        """Create a contact, or update it if the email address already exists.

        Raises:
            ValidationError: If no contact data is given.
        """
        if not params:
            raise ValidationError("Missing contact data")
        return self._request("contacts", params, HTTPMethod.POST)

    def find(self, email_address: str) -> Resource:
        """Fetch a contact by email address.

        Raises:
            ValidationError: If no email address is given.
        """
        if not email_address:
            raise ValidationError("Missing emailAddress")
        return self._request(f"contacts/{email_address}")

    def list(self, params: Mapping[str, Any] | None = None) -> PaginatedResponse:
        return self._list("contacts", params)

    def query(self, params: Mapping[str, Any] | None = None) -> PaginatedResponse:
        """Alias of ``list``."""
        return self.list(params)

    def delete(self, email_address: str) -> Resource:
        return self._request(f"contacts/{email_address}", method=HTTPMethod.DELETE)
