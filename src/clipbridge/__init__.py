"""clipbridge — copy and read system clipboard text for a desktop backend."""

from clipbridge.application.dto.command_result import CommandResult
from clipbridge.bootstrap import Container
from clipbridge.commands import (
    copy_to_clipboard,
    copy_to_clipboard_async,
    read_from_clipboard,
    read_from_clipboard_async,
)
from clipbridge.domain.errors import (
    ClipboardError,
    ClipboardInitError,
    ClipboardOperationError,
    ClipbridgeError,
)
from clipbridge.domain.models.settings import ClipboardSettings

__version__ = "0.1.0"

__all__ = [
    "ClipboardError",
    "ClipboardInitError",
    "ClipboardOperationError",
    "ClipboardSettings",
    "ClipbridgeError",
    "CommandResult",
    "Container",
    "copy_to_clipboard",
    "copy_to_clipboard_async",
    "read_from_clipboard",
    "read_from_clipboard_async",
]
