"""Clipboard commands — the boundary invoked by the desktop frontend.

Every clipboard failure is converted here into a single display string;
no clipboard exception escapes these functions.
"""

from __future__ import annotations

import asyncio
import logging

from clipbridge.application.dto.command_result import CommandResult
from clipbridge.application.error_messages import format_clipboard_error
from clipbridge.bootstrap import Container, get_container
from clipbridge.domain.errors import ClipboardError

logger = logging.getLogger(__name__)


def copy_to_clipboard(text: str, container: Container | None = None) -> CommandResult[None]:
    """Place *text* on the system clipboard.

    Returns:
        ``CommandResult(ok=True)`` on success, otherwise a result whose
        ``error`` starts with ``"Failed to initialize clipboard"`` or
        ``"Failed to copy to clipboard"``.
    """
    container = container or get_container()
    try:
        container.copy_text().execute(text)
    except ClipboardError as exc:
        message = format_clipboard_error(exc)
        logger.warning("copy_to_clipboard failed: %s", message)
        return CommandResult[None].failure(message)
    return CommandResult[None].success()


def read_from_clipboard(container: Container | None = None) -> CommandResult[str]:
    """Return the current clipboard text.

    Returns:
        ``CommandResult(ok=True, value=text)`` on success, otherwise a result
        whose ``error`` starts with ``"Failed to initialize clipboard"`` or
        ``"Failed to read from clipboard"``.
    """
    container = container or get_container()
    try:
        text = container.read_text().execute()
    except ClipboardError as exc:
        message = format_clipboard_error(exc)
        logger.warning("read_from_clipboard failed: %s", message)
        return CommandResult[str].failure(message)
    return CommandResult[str].success(text)


async def copy_to_clipboard_async(
    text: str, container: Container | None = None
) -> CommandResult[None]:
    """Run :func:`copy_to_clipboard` on a worker thread."""
    return await asyncio.to_thread(copy_to_clipboard, text, container)


async def read_from_clipboard_async(container: Container | None = None) -> CommandResult[str]:
    """Run :func:`read_from_clipboard` on a worker thread."""
    return await asyncio.to_thread(read_from_clipboard, container)
