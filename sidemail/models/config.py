"""Client configuration model."""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from ..core.exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://api.sidemail.io/v1"
API_KEY_ENV_VAR = "SIDEMAIL_API_KEY"


class ClientConfig(BaseModel):
    """Validated settings for a Sidemail client."""

    api_key: str = Field(..., min_length=1)
    base_url: str = Field(DEFAULT_BASE_URL, min_length=1)
    timeout: float | None = Field(None, gt=0)

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @classmethod
    def resolve(
        cls,
        api_key: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = None,
    ) -> ClientConfig:
        """Build a config, reading the API key from the environment if needed.

        A blank key counts as missing.

        Raises:
            ConfigurationError: If no API key is given or found in
                ``SIDEMAIL_API_KEY``, or an option is invalid.
        """
        api_key = (api_key or "").strip() or os.environ.get(API_KEY_ENV_VAR, "").strip()
        if not api_key:
            raise ConfigurationError(
                "apiKey missing. Provide it as an option or set "
                f"{API_KEY_ENV_VAR} environment variable."
            )
        try:
            return cls(api_key=api_key, base_url=base_url, timeout=timeout)
        except PydanticValidationError as exc:
            raise ConfigurationError(f"Invalid client configuration: {exc}") from exc
