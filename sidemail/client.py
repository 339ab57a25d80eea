"""Sidemail API client.

Architecture:
    Sidemail owns the configuration and the HTTP session and executes every
    API call through ``perform_request``. Resource groups (email, contacts,
    project, messenger, domains) are thin wrappers that build paths and hand
    the decoded body to Resource or PaginatedResponse.

Example:
    >>> client = Sidemail(api_key="...")
    >>> client.send_email({"toAddress": "user@example.com", ...})
    >>> for contact in client.contacts.list().auto_paginate():
    ...     print(contact.emailAddress)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import cached_property
from typing import Any

import httpx

from .core.enums import HTTPMethod
from .core.exceptions import APIError
from .core.resource import Resource
from .models.config import DEFAULT_BASE_URL, ClientConfig
from .resources import Contact, Domain, Email, Messenger, Project
from .utils.http import HTTPClient, build_url
from .version import __version__

logger = logging.getLogger(__name__)

USER_AGENT = f"sidemail-sdk-python/{__version__}"


class Sidemail:
    """Client for the Sidemail API."""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: API key; defaults to the SIDEMAIL_API_KEY environment variable
            base_url: API root URL
            timeout: Connect/read timeout in seconds for the default HTTP client
            http_client: Optional preconfigured httpx.Client to send requests with

        Raises:
            ConfigurationError: If no API key is available.
        """
        self.config = ClientConfig.resolve(api_key=api_key, base_url=base_url, timeout=timeout)
        self.http_client = http_client
        self._http = HTTPClient(timeout=self.config.timeout, client=http_client)

    @property
    def api_key(self) -> str:
        return self.config.api_key

    @property
    def base_url(self) -> str:
        return self.config.base_url

    @property
    def timeout(self) -> float | None:
        return self.config.timeout

    @cached_property
    def email(self) -> Email:
        return Email(self)

    @cached_property
    def contacts(self) -> Contact:
        return Contact(self)

    @cached_property
    def project(self) -> Project:
        return Project(self)

    @cached_property
    def messenger(self) -> Messenger:
        return Messenger(self)

    @cached_property
    def domains(self) -> Domain:
        return Domain(self)

    def send_email(self, params: Mapping[str, Any]) -> Resource:
        """Shortcut for ``client.email.send(params)``."""
        return self.email.send(params)

    def perform_request(
        self,
        path: str,
        params: Mapping[Any, Any] | None = None,
        method: HTTPMethod | str = HTTPMethod.GET,
    ) -> Any:
        """Execute one API call.

        GET params are appended to the query string; POST/PATCH params are sent
        as a JSON body; DELETE sends neither.

        Args:
            path: Path relative to the base URL (may carry its own query string)
            params: Request parameters
            method: HTTP method

        Returns:
            Decoded JSON for JSON responses, response text otherwise.

        Raises:
            ValueError: If the method is not supported (raised before any I/O).
            APIError: If the API answers with a non-2xx status.
        """
        http_method = HTTPMethod.from_value(method)

        if http_method == HTTPMethod.GET:
            url = build_url(self.base_url, path, params)
        else:
            url = build_url(self.base_url, path)

        json_body = None
        if http_method.sends_body and params is not None:
            json_body = dict(params)

        logger.debug(
            "Sending request", extra={"method": http_method.value, "path": path}
        )
        response = self._http.request(
            http_method.value.upper(), url, headers=self._headers(), json_body=json_body
        )
        body = self._decode(response)

        if not response.is_success:
            error = self._build_error(response, body)
            logger.debug(
                "Request failed",
                extra={"path": path, "status": error.http_status, "error_code": error.error_code},
            )
            raise error

        return body

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
        }

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        content_type = response.headers.get("content-type", "")
        if "application/json" in content_type:
            return response.json()
        return response.text

    @staticmethod
    def _build_error(response: httpx.Response, body: Any) -> APIError:
        error_code = None
        more_info = None
        message = None
        if isinstance(body, Mapping):
            message = body.get("developerMessage")
            error_code = body.get("errorCode")
            more_info = body.get("moreInfo")
        if not message:
            message = response.text or response.reason_phrase
        return APIError(
            message,
            http_status=response.status_code,
            error_code=error_code,
            more_info=more_info,
        )

    def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        self._http.close()

    def __enter__(self) -> Sidemail:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
