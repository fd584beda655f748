"""Use Case: Copy Text to Clipboard.

Places text on the system clipboard through an injected ClipboardPort,
using one freshly acquired handle per call.
"""

from clipbridge.domain.errors import (
    ClipboardInitError,
    ClipboardOperationError,
)
from clipbridge.domain.models.enums import ClipboardOperation
from clipbridge.domain.ports.clipboard_port import ClipboardPort


class CopyTextUseCase:
    """Replace the clipboard content with a given text."""

    def __init__(self, clipboard: ClipboardPort) -> None:
        self._clipboard = clipboard

    def execute(self, text: str) -> None:
        """Copy *text* to the clipboard.

        Args:
            text: Any string, including the empty string.

        Raises:
            TypeError: *text* is not a string.
            ClipboardInitError: The clipboard could not be accessed.
            ClipboardOperationError: The write failed.
        """
        if not isinstance(text, str):
            raise TypeError(f"text must be str, not {type(text).__name__}")

        try:
            handle = self._clipboard.open()
        except ClipboardInitError:
            raise
        except Exception as exc:
            raise ClipboardInitError(str(exc)) from exc

        with handle:
            try:
                handle.set_text(text)
            except (ClipboardInitError, ClipboardOperationError):
                raise
            except Exception as exc:
                raise ClipboardOperationError(ClipboardOperation.COPY, str(exc)) from exc
