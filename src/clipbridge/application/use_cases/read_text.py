"""Use Case: Read Text from Clipboard."""

from clipbridge.domain.errors import (
    ClipboardInitError,
    ClipboardOperationError,
)
from clipbridge.domain.models.enums import ClipboardOperation
from clipbridge.domain.ports.clipboard_port import ClipboardPort


class ReadTextUseCase:
    """Return the current clipboard text."""

    def __init__(self, clipboard: ClipboardPort) -> None:
        self._clipboard = clipboard

    def execute(self) -> str:
        """Read the clipboard text verbatim.

        Raises:
            ClipboardInitError: The clipboard could not be accessed.
            ClipboardOperationError: The clipboard holds no text or the read failed.
        """
        try:
            handle = self._clipboard.open()
        except ClipboardInitError:
            raise
        except Exception as exc:
            raise ClipboardInitError(str(exc)) from exc

        with handle:
            try:
                return handle.get_text()
            except (ClipboardInitError, ClipboardOperationError):
                raise
            except Exception as exc:
                raise ClipboardOperationError(ClipboardOperation.READ, str(exc)) from exc
