"""Port (ABC) for settings persistence.

Domain layer interface — infrastructure provides the concrete implementation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from clipbridge.domain.models.settings import ClipboardSettings


class SettingsPort(ABC):
    """Abstract interface for loading / saving clipboard settings."""

    @abstractmethod
    def load(self) -> ClipboardSettings:
        """Load persisted settings (or defaults if none exist)."""

    @abstractmethod
    def save(self, settings: ClipboardSettings) -> None:
        """Persist the given settings."""

    @abstractmethod
    def reset_to_defaults(self) -> ClipboardSettings:
        """Delete persisted settings and return factory defaults."""
