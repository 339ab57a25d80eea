"""Core enumerations shared by the client, resources and pagination.

Design Decisions:
    - String enums: members compare equal to their wire values, so they can be
      used anywhere a plain string is accepted
    - ParamKey marks parameter names the SDK injects itself, as opposed to
      names supplied by the caller
"""

from enum import Enum


class HTTPMethod(str, Enum):
    """HTTP methods supported by the Sidemail API."""

    GET = "get"
    POST = "post"
    PATCH = "patch"
    DELETE = "delete"

    @classmethod
    def from_value(cls, value: "HTTPMethod | str") -> "HTTPMethod":
        """Coerce a method name to an HTTPMethod.

        Raises:
            ValueError: If the method is not supported.
        """
        if isinstance(value, HTTPMethod):
            return value
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass
        raise ValueError(f"Unknown method: {value!r}")

    @property
    def sends_body(self) -> bool:
        """Whether params travel as a JSON body rather than a query string."""
        return self in (HTTPMethod.POST, HTTPMethod.PATCH)


class ParamKey(str, Enum):
    """Parameter names injected by the SDK into follow-up requests."""

    PAGINATION_CURSOR_NEXT = "paginationCursorNext"
