"""User preferences model for clipbridge.

``ClipboardSettings`` controls which native clipboard tool is used and how
long a single tool invocation may take.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from clipbridge.domain.models.enums import BackendName


class ClipboardSettings(BaseModel):
    """Root settings — persisted to ``settings.json``."""

    backend: BackendName = Field(
        default=BackendName.AUTO,
        description="Clipboard tool to use, or auto-detect for this session.",
    )
    timeout: float = Field(
        default=5.0,
        gt=0,
        le=60,
        description="Seconds allowed for one native clipboard call.",
    )
    strip_trailing_newline: bool = Field(
        default=False,
        description="Drop one trailing newline from text read off the clipboard.",
    )
