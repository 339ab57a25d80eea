"""Core components."""

from .enums import HTTPMethod, ParamKey
from .exceptions import APIError, ConfigurationError, SidemailError, ValidationError
from .pagination import PaginatedResponse, Requester
from .resource import Resource, wrap

__all__ = [
    "HTTPMethod",
    "ParamKey",
    "SidemailError",
    "ConfigurationError",
    "ValidationError",
    "APIError",
    "PaginatedResponse",
    "Requester",
    "Resource",
    "wrap",
]
