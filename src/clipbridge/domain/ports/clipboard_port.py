"""Port: Clipboard — scoped access to the system clipboard."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType

from clipbridge.domain.errors import HandleClosedError


class ClipboardHandle(ABC):
    """Ephemeral accessor for one clipboard get or set.

    A handle is released on every exit path when used as a context manager.
    ``close()`` may be called more than once.
    """

    def __init__(self) -> None:
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def get_text(self) -> str:
        """Return the current clipboard text.

        Raises:
            ClipboardOperationError: The clipboard holds no text or the read failed.
        """
        self._ensure_open()
        return self._get_text()

    def set_text(self, text: str) -> None:
        """Replace the clipboard content with *text*.

        Raises:
            ClipboardOperationError: The write was rejected.
        """
        self._ensure_open()
        self._set_text(text)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._release()

    def _ensure_open(self) -> None:
        if self._closed:
            raise HandleClosedError("Clipboard handle has already been released")

    @abstractmethod
    def _get_text(self) -> str: ...

    @abstractmethod
    def _set_text(self, text: str) -> None: ...

    def _release(self) -> None:
        """Free platform resources held by the handle."""

    def __enter__(self) -> ClipboardHandle:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class ClipboardPort(ABC):
    """Contract for acquiring clipboard handles."""

    @abstractmethod
    def open(self) -> ClipboardHandle:
        """Acquire a fresh handle to the system clipboard.

        Raises:
            ClipboardInitError: The clipboard is not reachable from this session.
        """
        ...
