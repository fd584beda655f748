"""Enumerations for clipboard access."""

from enum import Enum


class ClipboardOperation(str, Enum):
    """The single get or set performed with a clipboard handle."""

    COPY = "copy"
    READ = "read"


class BackendName(str, Enum):
    """Native clipboard tools that can back a handle."""

    AUTO = "auto"
    PBCOPY = "pbcopy"  # macOS pbcopy / osascript
    WL_CLIPBOARD = "wl-clipboard"  # Wayland wl-copy / wl-paste
    XCLIP = "xclip"
    WINDOWS = "windows"  # PowerShell + System.Windows.Forms.Clipboard
