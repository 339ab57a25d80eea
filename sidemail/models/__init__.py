"""Data models."""

from .attachment import Attachment
from .config import API_KEY_ENV_VAR, DEFAULT_BASE_URL, ClientConfig

__all__ = [
    "Attachment",
    "ClientConfig",
    "DEFAULT_BASE_URL",
    "API_KEY_ENV_VAR",
]
