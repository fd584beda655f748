"""System clipboard — implements ClipboardPort using subprocess."""

from __future__ import annotations

import logging
import subprocess
import tempfile

from clipbridge.domain.errors import ClipboardOperationError
from clipbridge.domain.models.enums import BackendName, ClipboardOperation
from clipbridge.domain.ports.clipboard_port import ClipboardHandle, ClipboardPort
from clipbridge.infrastructure.clipboard.tools import ClipboardTool, resolve_tool

logger = logging.getLogger(__name__)


class SubprocessClipboardHandle(ClipboardHandle):
    """Clipboard handle bound to one resolved native tool.

    Output is collected through temporary files rather than pipes: ``xclip``
    and ``wl-copy`` fork a child that keeps serving the selection, and that
    child would hold a pipe open until the clipboard changes owner.
    """

    def __init__(
        self,
        tool: ClipboardTool,
        timeout: float,
        strip_trailing_newline: bool = False,
    ) -> None:
        super().__init__()
        self._tool = tool
        self._timeout = timeout
        self._strip_trailing_newline = strip_trailing_newline

    @property
    def tool(self) -> ClipboardTool:
        return self._tool

    def _set_text(self, text: str) -> None:
        try:
            data = text.encode(self._tool.write_encoding)
        except UnicodeEncodeError as exc:
            raise ClipboardOperationError(ClipboardOperation.COPY, str(exc)) from exc
        self._run(self._tool.copy_cmd, ClipboardOperation.COPY, data=data)

    def _get_text(self) -> str:
        raw = self._run(self._tool.paste_cmd, ClipboardOperation.READ)
        if self._tool.output_newline:
            if not raw.endswith(b"\n"):
                raise ClipboardOperationError(
                    ClipboardOperation.READ,
                    f"{self._tool.paste_cmd[0]} returned no clipboard text",
                )
            raw = raw[:-1]
        try:
            text = raw.decode(self._tool.read_encoding)
        except UnicodeDecodeError as exc:
            raise ClipboardOperationError(
                ClipboardOperation.READ,
                f"clipboard content is not valid {self._tool.read_encoding} text: {exc}",
            ) from exc
        if self._strip_trailing_newline:
            text = _strip_one_newline(text)
        return text

    def _run(
        self,
        cmd: tuple[str, ...],
        operation: ClipboardOperation,
        data: bytes | None = None,
    ) -> bytes:
        """Run one native clipboard command and return its stdout."""
        logger.debug("Running %s for %s", cmd[0], operation.value)
        with tempfile.TemporaryFile() as out, tempfile.TemporaryFile() as err:
            try:
                completed = subprocess.run(
                    list(cmd),
                    input=data,
                    stdout=out if operation is ClipboardOperation.READ else subprocess.DEVNULL,
                    stderr=err,
                    timeout=self._timeout,
                    env=self._tool.env(),
                    check=False,
                )
            except subprocess.TimeoutExpired as exc:
                raise ClipboardOperationError(
                    operation,
                    f"{cmd[0]} did not finish within {self._timeout:g} seconds",
                ) from exc
            except OSError as exc:
                raise ClipboardOperationError(operation, str(exc)) from exc

            if completed.returncode != 0:
                err.seek(0)
                details = err.read().decode("utf-8", errors="replace").strip()
                raise ClipboardOperationError(
                    operation,
                    details or f"{cmd[0]} exited with status {completed.returncode}",
                )

            out.seek(0)
            return out.read()

    def _release(self) -> None:
        logger.debug("Released clipboard handle for %s", self._tool.name.value)


def _strip_one_newline(text: str) -> str:
    if text.endswith("\r\n"):
        return text[:-2]
    if text.endswith("\n"):
        return text[:-1]
    return text


class SystemClipboard(ClipboardPort):
    """Clipboard adapter using OS-level subprocess commands.

    Parameters
    ----------
    backend : BackendName
        Tool to use, or ``BackendName.AUTO`` to detect one per handle.
    timeout : float
        Seconds allowed for one native command.
    strip_trailing_newline : bool
        Drop one trailing newline from read text.
    """

    def __init__(
        self,
        backend: BackendName = BackendName.AUTO,
        timeout: float = 5.0,
        strip_trailing_newline: bool = False,
    ) -> None:
        self._backend = backend
        self._timeout = timeout
        self._strip_trailing_newline = strip_trailing_newline

    def open(self) -> SubprocessClipboardHandle:
        """Resolve a clipboard tool for this session and bind a handle to it."""
        tool = resolve_tool(self._backend)
        logger.debug("Opened clipboard handle for %s", tool.name.value)
        return SubprocessClipboardHandle(
            tool,
            timeout=self._timeout,
            strip_trailing_newline=self._strip_trailing_newline,
        )
