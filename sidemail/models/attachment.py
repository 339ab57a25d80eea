"""Email attachment model."""

from __future__ import annotations

import base64

from pydantic import BaseModel, ConfigDict, Field


class Attachment(BaseModel):
    """File attachment in the shape the email endpoints expect."""

    name: str = Field(..., min_length=1)
    content: str  # base64

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_content(cls, name: str, content: bytes | str) -> Attachment:
        """Build an attachment from raw file content; str is UTF-8 encoded."""
        if isinstance(content, str):
            content = content.encode("utf-8")
        return cls(name=name, content=base64.b64encode(content).decode("ascii"))
