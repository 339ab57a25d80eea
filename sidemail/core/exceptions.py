"""Custom exception hierarchy."""

from __future__ import annotations


class SidemailError(Exception):
    """Base exception for all SDK errors."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(SidemailError):
    """Client cannot be built from the given options.

    Raised at construction time, before any request is possible, e.g. when
    no API key is passed and ``SIDEMAIL_API_KEY`` is unset.
    """

    pass


class ValidationError(SidemailError):
    """Required resource argument is missing."""

    pass


class APIError(SidemailError):
    """Non-2xx response from the Sidemail API."""

    def __init__(
        self,
        message: str | None,
        http_status: int | None = None,
        error_code: str | None = None,
        more_info: str | None = None,
    ) -> None:
        super().__init__(message)
        self.http_status = http_status
        self.error_code = error_code
        self.more_info = more_info

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"http_status={self.http_status!r}, error_code={self.error_code!r})"
        )
