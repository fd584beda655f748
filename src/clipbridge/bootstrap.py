"""Composition Root — Dependency Injection Container.

This module is the ONLY place where concrete infrastructure classes are
imported and wired together.  All other layers refer to ports (interfaces).
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from clipbridge.application.use_cases.copy_text import CopyTextUseCase
from clipbridge.application.use_cases.read_text import ReadTextUseCase
from clipbridge.domain.errors import ConfigurationError
from clipbridge.domain.models.settings import ClipboardSettings
from clipbridge.domain.ports.clipboard_port import ClipboardPort
from clipbridge.domain.ports.settings_port import SettingsPort
from clipbridge.infrastructure.clipboard.system_clipboard import SystemClipboard
from clipbridge.infrastructure.config.settings_manager import SettingsManager

logger = logging.getLogger(__name__)


def _coerce_settings(settings: ClipboardSettings | Mapping[str, Any]) -> ClipboardSettings:
    if isinstance(settings, ClipboardSettings):
        return settings
    try:
        return ClipboardSettings.model_validate(dict(settings))
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid clipboard settings: {exc}") from exc


class Container:
    """Simple dependency injection container.

    Wires the clipboard adapter to its port and provides pre-configured
    use cases.

    Usage::

        container = Container()
        container.copy_text().execute("hello")
        text = container.read_text().execute()

    Parameters
    ----------
    settings : ClipboardSettings | Mapping | None
        Explicit settings. When omitted they are loaded from disk.
    config_dir : Path | None
        Directory holding ``settings.json`` (defaults to the platform config dir).
    clipboard : ClipboardPort | None
        Replacement clipboard adapter, e.g. an in-memory fake in tests.
        An injected adapter is kept when settings change.
    """

    def __init__(
        self,
        settings: ClipboardSettings | Mapping[str, Any] | None = None,
        config_dir: Path | None = None,
        clipboard: ClipboardPort | None = None,
    ) -> None:
        self._settings_manager = SettingsManager(config_dir)
        self._injected_clipboard = clipboard

        if settings is None:
            settings = self._settings_manager.load()
        self._apply(_coerce_settings(settings))

    def _apply(self, settings: ClipboardSettings) -> None:
        self._settings = settings
        self._clipboard = self._injected_clipboard or SystemClipboard(
            backend=settings.backend,
            timeout=settings.timeout,
            strip_trailing_newline=settings.strip_trailing_newline,
        )
        logger.info(
            "Clipboard container ready (backend=%s, timeout=%ss)",
            settings.backend.value,
            settings.timeout,
        )

    # -- Port accessors ------------------------------------------------------

    @property
    def settings(self) -> ClipboardSettings:
        return self._settings

    @property
    def settings_manager(self) -> SettingsPort:
        return self._settings_manager

    @property
    def clipboard(self) -> ClipboardPort:
        return self._clipboard

    # -- Settings ------------------------------------------------------------

    def save_settings(self, settings: ClipboardSettings | Mapping[str, Any]) -> ClipboardSettings:
        """Persist *settings* and use them for every later command.

        Raises:
            ConfigurationError: The settings are invalid or cannot be written.
        """
        settings = _coerce_settings(settings)
        try:
            self._settings_manager.save(settings)
        except OSError as exc:
            raise ConfigurationError(f"Cannot save clipboard settings: {exc}") from exc
        self._apply(settings)
        return settings

    def reset_settings(self) -> ClipboardSettings:
        """Forget persisted settings and fall back to the defaults."""
        try:
            settings = self._settings_manager.reset_to_defaults()
        except OSError as exc:
            raise ConfigurationError(f"Cannot reset clipboard settings: {exc}") from exc
        self._apply(settings)
        return settings

    # -- Use Case factories --------------------------------------------------

    def copy_text(self) -> CopyTextUseCase:
        """Create a use case for copying text to the clipboard."""
        return CopyTextUseCase(clipboard=self._clipboard)

    def read_text(self) -> ReadTextUseCase:
        """Create a use case for reading text from the clipboard."""
        return ReadTextUseCase(clipboard=self._clipboard)


_default_container: Container | None = None
_default_lock = threading.Lock()


def get_container() -> Container:
    """Return the process-wide container, building it on first use."""
    global _default_container
    with _default_lock:
        if _default_container is None:
            _default_container = Container()
        return _default_container


def reset_container() -> None:
    """Forget the process-wide container — useful for testing."""
    global _default_container
    with _default_lock:
        _default_container = None
