"""Clipboard adapters."""

from clipbridge.infrastructure.clipboard.system_clipboard import SystemClipboard
from clipbridge.infrastructure.clipboard.tools import ClipboardTool, resolve_tool

__all__ = [
    "ClipboardTool",
    "SystemClipboard",
    "resolve_tool",
]
