"""Shared fixtures — an in-memory clipboard so no test touches the real one."""

from __future__ import annotations

import threading
from pathlib import Path

import pytest

from clipbridge.bootstrap import Container, reset_container
from clipbridge.domain.errors import ClipboardInitError, ClipboardOperationError
from clipbridge.domain.models.enums import ClipboardOperation
from clipbridge.domain.models.settings import ClipboardSettings
from clipbridge.domain.ports.clipboard_port import ClipboardHandle, ClipboardPort


class MemoryClipboardHandle(ClipboardHandle):
    def __init__(self, board: MemoryClipboard) -> None:
        super().__init__()
        self._board = board

    def _get_text(self) -> str:
        with self._board.lock:
            text = self._board.text
        if text is None:
            raise ClipboardOperationError(ClipboardOperation.READ, "clipboard contains no text")
        return text

    def _set_text(self, text: str) -> None:
        if self._board.reject_writes:
            raise ClipboardOperationError(ClipboardOperation.COPY, self._board.reject_writes)
        with self._board.lock:
            self._board.text = text

    def _release(self) -> None:
        with self._board.lock:
            self._board.released += 1


class MemoryClipboard(ClipboardPort):
    """Process-local stand-in for the OS clipboard."""

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.text: str | None = None
        self.opened = 0
        self.released = 0
        self.unavailable: str | None = None
        self.reject_writes: str | None = None

    def open(self) -> MemoryClipboardHandle:
        if self.unavailable:
            raise ClipboardInitError(self.unavailable)
        with self.lock:
            self.opened += 1
        return MemoryClipboardHandle(self)


@pytest.fixture(autouse=True)
def _fresh_container():
    """Ensure no process-wide container leaks between tests."""
    reset_container()
    yield
    reset_container()


@pytest.fixture()
def board() -> MemoryClipboard:
    return MemoryClipboard()


@pytest.fixture()
def container(board: MemoryClipboard, tmp_path: Path) -> Container:
    """Container wired to the in-memory clipboard."""
    return Container(settings=ClipboardSettings(), config_dir=tmp_path, clipboard=board)
