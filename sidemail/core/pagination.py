"""Cursor-paginated list responses.

Architecture:
    PaginatedResponse wraps one page of a list endpoint and keeps the shape
    of the request that produced it (path, params, method). Iterating the
    object walks the current page only. ``auto_paginate()`` returns a
    generator that walks every page, re-issuing the original request with
    the next-page cursor as the consumer advances.

Design Decisions:
    - Traversal state lives in the generator, never on the instance, so each
      ``auto_paginate()`` call starts from the page the object was built with
      and independent walks cannot interfere
    - GET follow-ups carry the cursor under ``ParamKey.PAGINATION_CURSOR_NEXT``;
      POST/PATCH follow-ups carry it under the plain string key
      ``"paginationCursorNext"``
    - An empty page that still reports ``hasMore`` continues the walk
    - Envelope lookups return raw values; items are Resource instances

Envelope shape::

    {
        "data": [{...}, ...],
        "hasMore": true,
        "paginationCursorNext": "...",
        "paginationCursorPrev": null
    }
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any, Protocol

from .enums import HTTPMethod, ParamKey
from .resource import Resource

logger = logging.getLogger(__name__)

CURSOR_NEXT_FIELD = ParamKey.PAGINATION_CURSOR_NEXT.value


class Requester(Protocol):
    """Anything able to execute an API request (normally the Sidemail client)."""

    def perform_request(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        method: HTTPMethod | str = HTTPMethod.GET,
    ) -> Any: ...


def _page_items(envelope: Mapping[str, Any]) -> list[Any]:
    return envelope.get("data") or []


class PaginatedResponse:
    """One page of a list endpoint, with lazy access to the following pages."""

    def __init__(
        self,
        response_body: Mapping[str, Any],
        client: Requester,
        path: str,
        params: Mapping[str, Any] | None,
        method: HTTPMethod | str,
    ) -> None:
        self.raw = response_body
        self._items = [Resource(item) for item in _page_items(response_body)]
        self.has_more = response_body.get("hasMore")
        self.pagination_cursor_next = response_body.get(CURSOR_NEXT_FIELD)
        self.pagination_cursor_prev = response_body.get("paginationCursorPrev")
        self._client = client
        self.path = path
        self.params = dict(params or {})
        self.method = HTTPMethod.from_value(method)

    @property
    def items(self) -> list[Resource]:
        """Items of the current page, in the order received."""
        return self._items

    @property
    def data(self) -> list[Resource]:
        return self._items

    def __iter__(self) -> Iterator[Resource]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def auto_paginate(self) -> Iterator[Resource]:
        """Yield every item of every page, fetching pages on demand.

        The current page is yielded first. While a next-page cursor is known,
        the original request is re-issued with the cursor added to a copy of
        the original params. The walk stops once a fetched page reports no
        cursor or ``hasMore`` is false. Errors from a fetch propagate to the
        consumer; items already yielded are not affected.
        """
        yield from self._items

        cursor = self.pagination_cursor_next
        page = 1
        while cursor is not None:
            next_params = self._next_page_params(cursor)
            page += 1
            logger.debug(
                "Fetching next page",
                extra={"path": self.path, "method": self.method.value, "page": page},
            )
            envelope = self._client.perform_request(
                self.path, params=next_params, method=self.method
            )

            for item in _page_items(envelope):
                yield Resource(item)

            cursor = envelope.get(CURSOR_NEXT_FIELD)
            if not envelope.get("hasMore"):
                break

        logger.debug("Pagination finished", extra={"path": self.path, "pages": page})

    def _next_page_params(self, cursor: str) -> dict[Any, Any]:
        next_params: dict[Any, Any] = dict(self.params)
        # The injected key replaces any caller-supplied cursor.
        next_params.pop(CURSOR_NEXT_FIELD, None)
        if self.method == HTTPMethod.GET:
            next_params[ParamKey.PAGINATION_CURSOR_NEXT] = cursor
        else:
            next_params[CURSOR_NEXT_FIELD] = cursor
        return next_params

    def supports(self, key: str) -> bool:
        """Return True if the raw envelope contains ``key``."""
        return key in self.raw

    def __contains__(self, key: object) -> bool:
        return key in self.raw

    def __getitem__(self, key: str) -> Any:
        return self.raw[key]

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails.
        if name.startswith("_"):
            raise AttributeError(name)
        raw = self.__dict__.get("raw")
        if raw is not None and name in raw:
            return raw[name]
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def __str__(self) -> str:
        return str(self.raw)

    def __repr__(self) -> str:
        return repr(self.raw)
