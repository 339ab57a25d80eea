"""Sidemail - Python SDK for the Sidemail transactional email API."""

from typing import Any

from .client import USER_AGENT, Sidemail
from .core import (
    APIError,
    ConfigurationError,
    HTTPMethod,
    PaginatedResponse,
    ParamKey,
    Resource,
    SidemailError,
    ValidationError,
)
from .models import API_KEY_ENV_VAR, DEFAULT_BASE_URL, Attachment, ClientConfig
from .version import __version__


def new(api_key: str | None = None, **options: Any) -> Sidemail:
    """Create a client; same arguments as ``Sidemail``."""
    return Sidemail(api_key=api_key, **options)


def file_to_attachment(name: str, content: bytes | str) -> dict[str, str]:
    """Build the attachment payload for ``email.send``.

    Example:
        >>> with open("invoice.pdf", "rb") as f:
        ...     attachment = file_to_attachment("invoice.pdf", f.read())
        >>> client.send_email({..., "attachments": [attachment]})
    """
    return Attachment.from_content(name, content).model_dump()


__all__ = [
    "__version__",
    # Client
    "Sidemail",
    "new",
    "file_to_attachment",
    "USER_AGENT",
    # Config
    "ClientConfig",
    "DEFAULT_BASE_URL",
    "API_KEY_ENV_VAR",
    # Models
    "Attachment",
    "Resource",
    "PaginatedResponse",
    "HTTPMethod",
    "ParamKey",
    # Exceptions
    "SidemailError",
    "ConfigurationError",
    "ValidationError",
    "APIError",
]
