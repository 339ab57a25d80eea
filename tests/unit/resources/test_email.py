"""Unit tests for the Email resource group."""

from __future__ import annotations

import pytest

from sidemail.core.enums import HTTPMethod, ParamKey
from sidemail.core.pagination import PaginatedResponse
from sidemail.core.resource import Resource
from sidemail.resources import Email


class TestEmail:
    """Test email endpoints."""

    @pytest.fixture
    def email(self, client):
        return Email(client)

    def test_send(self, email, client):
        client.perform_request.return_value = {"id": "123", "status": "queued"}
        params = {"toAddress": "user@example.com", "templateName": "Welcome"}

        response = email.send(params)

        client.perform_request.assert_called_once_with(
            "email/send", params=params, method=HTTPMethod.POST
        )
        assert isinstance(response, Resource)
        assert response.status == "queued"

    def test_search(self, email, client, list_page):
        client.perform_request.return_value = list_page
        params = {"query": {"toAddress": "user@example.com"}}

        response = email.search(params)

        client.perform_request.assert_called_once_with(
            "email/search", params=params, method=HTTPMethod.POST
        )
        assert isinstance(response, PaginatedResponse)
        assert response.method == HTTPMethod.POST
        assert [item.id for item in response] == ["a", "b"]

    def test_search_without_params(self, email, client, list_page):
        client.perform_request.return_value = list_page
        email.search()
        client.perform_request.assert_called_once_with(
            "email/search", params={}, method=HTTPMethod.POST
        )

    def test_search_auto_paginate_uses_post(self, email, client):
        client.perform_request.side_effect = [
            {"data": [{"id": 1}], "hasMore": True, "paginationCursorNext": "c2"},
            {"data": [{"id": 2}], "hasMore": False, "paginationCursorNext": None},
        ]

        ids = [item.id for item in email.search({"limit": 1}).auto_paginate()]

        assert ids == [1, 2]
        follow_up = client.perform_request.call_args_list[1]
        assert follow_up.args == ("email/search",)
        assert follow_up.kwargs["method"] == HTTPMethod.POST
        assert follow_up.kwargs["params"] == {"limit": 1, "paginationCursorNext": "c2"}
        assert not any(isinstance(k, ParamKey) for k in follow_up.kwargs["params"])

    def test_get(self, email, client):
        client.perform_request.return_value = {"email": {"id": "123"}}

        response = email.get("123")

        client.perform_request.assert_called_once_with(
            "email/123", params=None, method=HTTPMethod.GET
        )
        assert response.email.id == "123"

    def test_delete(self, email, client):
        client.perform_request.return_value = {"deleted": True}

        response = email.delete("123")

        client.perform_request.assert_called_once_with(
            "email/123", params=None, method=HTTPMethod.DELETE
        )
        assert response.deleted is True
