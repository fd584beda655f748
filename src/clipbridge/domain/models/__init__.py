"""Domain models — public API."""

from clipbridge.domain.models.enums import BackendName, ClipboardOperation
from clipbridge.domain.models.settings import ClipboardSettings

__all__ = [
    "BackendName",
    "ClipboardOperation",
    "ClipboardSettings",
]
