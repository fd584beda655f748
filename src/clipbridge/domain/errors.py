"""Domain errors — custom exceptions for clipbridge.

Clipboard failures are tagged by kind (initialization vs. operation) and
carry the platform's own description. They are converted to display strings
only at the command boundary.
"""

from __future__ import annotations

from clipbridge.domain.models.enums import ClipboardOperation


class ClipbridgeError(Exception):
    """Base exception for all clipbridge errors."""


class ClipboardError(ClipbridgeError):
    """Raised when a clipboard operation fails."""

    def __init__(self, details: str) -> None:
        super().__init__(details)
        self.details = details


class ClipboardInitError(ClipboardError):
    """Raised when the clipboard could not be accessed at all."""


class ClipboardOperationError(ClipboardError):
    """Raised when the clipboard was reached but a get/set call failed."""

    def __init__(self, operation: ClipboardOperation, details: str) -> None:
        super().__init__(details)
        self.operation = operation


class HandleClosedError(ClipbridgeError):
    """Raised when a clipboard handle is used after it was released."""


class ConfigurationError(ClipbridgeError):
    """Raised when settings are invalid."""
