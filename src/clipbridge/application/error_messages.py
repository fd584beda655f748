"""User-facing clipboard error messages.

Belongs to the Application layer — the one place where tagged clipboard
errors become the display strings returned by the command boundary.
"""

from __future__ import annotations

from clipbridge.domain.errors import (
    ClipboardError,
    ClipboardInitError,
    ClipboardOperationError,
)
from clipbridge.domain.models.enums import ClipboardOperation

INIT_FAILED = "Failed to initialize clipboard"
COPY_FAILED = "Failed to copy to clipboard"
READ_FAILED = "Failed to read from clipboard"

_OPERATION_PREFIXES: dict[ClipboardOperation, str] = {
    ClipboardOperation.COPY: COPY_FAILED,
    ClipboardOperation.READ: READ_FAILED,
}


def format_clipboard_error(error: ClipboardError) -> str:
    """Return the display string for a clipboard failure.

    Args:
        error: An initialization or operation error.

    Returns:
        ``"<prefix>: <platform details>"``.

    Raises:
        TypeError: *error* is neither an init nor an operation error.
    """
    if isinstance(error, ClipboardInitError):
        prefix = INIT_FAILED
    elif isinstance(error, ClipboardOperationError):
        prefix = _OPERATION_PREFIXES[error.operation]
    else:
        raise TypeError(f"Unclassified clipboard error: {error!r}")
    return f"{prefix}: {error.details}"
