"""Native clipboard tools and their detection.

Each supported platform exposes the clipboard through small command-line
programs. ``resolve_tool`` picks the one usable from the current session,
which is what acquiring a clipboard handle means for this adapter.
"""

from __future__ import annotations

import logging
import os
import shutil
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field

from clipbridge.domain.errors import ClipboardInitError
from clipbridge.domain.models.enums import BackendName

logger = logging.getLogger(__name__)

_MACOS_PASTE_SCRIPT = "the clipboard as text"

# Clipboard bytes cross the PowerShell boundary as raw UTF-8 without a BOM,
# so neither console code pages nor $OutputEncoding touch them.
_WINDOWS_COPY_SCRIPT = (
    "Add-Type -AssemblyName System.Windows.Forms; "
    "$ms = New-Object System.IO.MemoryStream; "
    "[Console]::OpenStandardInput().CopyTo($ms); "
    "$t = (New-Object System.Text.UTF8Encoding $false).GetString($ms.ToArray()); "
    "$d = New-Object System.Windows.Forms.DataObject; "
    "$d.SetData([System.Windows.Forms.DataFormats]::UnicodeText, $t); "
    "[System.Windows.Forms.Clipboard]::SetDataObject($d, $true)"
)
_WINDOWS_PASTE_SCRIPT = (
    "Add-Type -AssemblyName System.Windows.Forms; "
    "if (-not [System.Windows.Forms.Clipboard]::ContainsText()) "
    "{ [Console]::Error.Write('clipboard contains no text'); exit 1 }; "
    "$b = (New-Object System.Text.UTF8Encoding $false).GetBytes("
    "[System.Windows.Forms.Clipboard]::GetText()); "
    "[Console]::OpenStandardOutput().Write($b, 0, $b.Length)"
)
_POWERSHELL = ("powershell", "-NoProfile", "-NonInteractive", "-Sta", "-Command")


@dataclass(frozen=True)
class ClipboardTool:
    """A pair of commands that write and read clipboard text."""

    name: BackendName
    copy_cmd: tuple[str, ...]
    paste_cmd: tuple[str, ...]
    write_encoding: str = "utf-8"
    read_encoding: str = "utf-8"
    session_var: str | None = None
    extra_env: tuple[tuple[str, str], ...] = field(default_factory=tuple)
    # paste command terminates its output with one extra newline
    output_newline: bool = False

    @property
    def executables(self) -> tuple[str, ...]:
        return tuple(dict.fromkeys((self.copy_cmd[0], self.paste_cmd[0])))

    def env(self) -> dict[str, str] | None:
        """Process environment for the tool, or ``None`` to inherit ours."""
        if not self.extra_env:
            return None
        return {**os.environ, **dict(self.extra_env)}


TOOLS: dict[BackendName, ClipboardTool] = {
    BackendName.PBCOPY: ClipboardTool(
        name=BackendName.PBCOPY,
        copy_cmd=("pbcopy",),
        # pbpaste prints nothing for an empty or non-text clipboard; AppleScript
        # fails with -1700 instead
        paste_cmd=("osascript", "-e", _MACOS_PASTE_SCRIPT),
        # pbcopy falls back to MacRoman without a UTF-8 locale
        extra_env=(("LANG", "en_US.UTF-8"),),
        output_newline=True,
    ),
    BackendName.WL_CLIPBOARD: ClipboardTool(
        name=BackendName.WL_CLIPBOARD,
        copy_cmd=("wl-copy",),
        paste_cmd=("wl-paste", "--no-newline", "--type", "text"),
        session_var="WAYLAND_DISPLAY",
    ),
    BackendName.XCLIP: ClipboardTool(
        name=BackendName.XCLIP,
        copy_cmd=("xclip", "-selection", "clipboard", "-in"),
        paste_cmd=("xclip", "-selection", "clipboard", "-out"),
        session_var="DISPLAY",
    ),
    BackendName.WINDOWS: ClipboardTool(
        name=BackendName.WINDOWS,
        copy_cmd=(*_POWERSHELL, _WINDOWS_COPY_SCRIPT),
        paste_cmd=(*_POWERSHELL, _WINDOWS_PASTE_SCRIPT),
    ),
}

# Auto-detection order for X11/Wayland desktops
# xsel is not offered: it prints nothing for an empty or non-text selection
_UNIX_CANDIDATES = (BackendName.WL_CLIPBOARD, BackendName.XCLIP)


def _missing_executables(tool: ClipboardTool) -> list[str]:
    return [exe for exe in tool.executables if shutil.which(exe) is None]


def _check_tool(tool: ClipboardTool, environ: Mapping[str, str]) -> None:
    """Raise ClipboardInitError if *tool* cannot be used from this session."""
    if tool.session_var and not environ.get(tool.session_var):
        raise ClipboardInitError(
            f"{tool.name.value} needs a display session but {tool.session_var} is not set"
        )
    missing = _missing_executables(tool)
    if missing:
        raise ClipboardInitError(
            f"{tool.name.value} is not available: {', '.join(missing)} not found on PATH"
        )


def resolve_tool(
    backend: BackendName = BackendName.AUTO,
    platform: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> ClipboardTool:
    """Return the clipboard tool to use for this session.

    Args:
        backend: A specific tool, or ``BackendName.AUTO`` to detect one.
        platform: Override for ``sys.platform`` (useful for testing).
        environ: Override for ``os.environ`` (useful for testing).

    Raises:
        ClipboardInitError: No usable clipboard tool for this session.
    """
    platform = platform or sys.platform
    environ = os.environ if environ is None else environ

    if backend != BackendName.AUTO:
        tool = TOOLS[backend]
        _check_tool(tool, environ)
        logger.debug("Using configured clipboard tool %s", tool.name.value)
        return tool

    if platform == "darwin":
        candidates: tuple[BackendName, ...] = (BackendName.PBCOPY,)
    elif platform == "win32":
        candidates = (BackendName.WINDOWS,)
    elif platform.startswith(("linux", "freebsd", "openbsd", "netbsd")):
        if not environ.get("WAYLAND_DISPLAY") and not environ.get("DISPLAY"):
            raise ClipboardInitError(
                "no display session available (DISPLAY and WAYLAND_DISPLAY are unset)"
            )
        candidates = _UNIX_CANDIDATES
    else:
        raise ClipboardInitError(f"unsupported platform: {platform}")

    failures: list[str] = []
    for name in candidates:
        tool = TOOLS[name]
        try:
            _check_tool(tool, environ)
        except ClipboardInitError as exc:
            failures.append(exc.details)
            continue
        logger.debug("Detected clipboard tool %s", tool.name.value)
        return tool

    if len(failures) == 1:
        raise ClipboardInitError(failures[0])
    raise ClipboardInitError(
        "no clipboard tool found; install wl-clipboard or xclip"
    )
