"""Utility functions."""

from .http import HTTPClient, build_url

__all__ = ["HTTPClient", "build_url"]
