"""Project endpoints.

The API key identifies the project, so none of these take an id.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..core.enums import HTTPMethod
from ..core.resource import Resource
from .base import BaseResource


class Project(BaseResource):
    def create(self, params: Mapping[str, Any]) -> Resource:
        return self._request("project", params, HTTPMethod.POST)

    def get(self) -> Resource:
        return self._request("project")

    def update(self, params: Mapping[str, Any]) -> Resource:
        return self._request("project", params, HTTPMethod.PATCH)

    def delete(self) -> Resource:
        return self._request("project", method=HTTPMethod.DELETE)
