"""Read-only wrapper giving attribute-style access to API response data.

Architecture:
    Resource wraps the decoded JSON of a single-entity response. Nested
    objects are wrapped lazily on access, lists are rebuilt with every
    element wrapped, and scalars pass through unchanged. The raw structure
    is never modified.

Design Decisions:
    - Item access (``resource["key"]``) is the primary API and raises KeyError
      for absent keys
    - Attribute access (``resource.key``) is sugar over item access and raises
      AttributeError for absent keys, so getattr()/hasattr() behave as usual
    - A key present with a null value returns None, it is not a lookup failure
    - Keys shadowed by wrapper members (``raw``, ``to_dict``, ``supports``) or
      that are not identifiers are reachable through item access only
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def wrap(value: Any) -> Any:
    """Wrap a JSON-like value.

    Dicts become Resource, lists are copied with each element wrapped, and
    everything else is returned as-is.
    """
    if isinstance(value, Mapping):
        return Resource(value)
    if isinstance(value, list):
        return [wrap(v) for v in value]
    return value


class Resource:
    """Attribute-style view over a decoded JSON value."""

    __slots__ = ("_data",)

    def __init__(self, data: Any) -> None:
        object.__setattr__(self, "_data", data)

    @property
    def raw(self) -> Any:
        """The wrapped value, unmodified."""
        return self._data

    def to_dict(self) -> Any:
        return self._data

    def supports(self, key: str) -> bool:
        """Return True if the raw object contains ``key``."""
        return isinstance(self._data, Mapping) and key in self._data

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.supports(key)

    def __getitem__(self, key: str) -> Any:
        if not isinstance(self._data, Mapping):
            raise KeyError(key)
        return wrap(self._data[key])

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails.
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__!r} object has no attribute {name!r}"
            ) from None

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __dir__(self) -> list[str]:
        keys = []
        if isinstance(self._data, Mapping):
            keys = [k for k in self._data if isinstance(k, str) and k.isidentifier()]
        return sorted(set(super().__dir__()) | set(keys))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Resource):
            return self._data == other._data
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __reduce__(self) -> tuple[type[Resource], tuple[Any]]:
        return (type(self), (self._data,))

    def __str__(self) -> str:
        return str(self._data)

    def __repr__(self) -> str:
        return repr(self._data)
