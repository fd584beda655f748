"""Infrastructure layer — external framework adapters."""

from clipbridge.infrastructure.clipboard.system_clipboard import SystemClipboard
from clipbridge.infrastructure.config.settings_manager import SettingsManager

__all__ = [
    "SystemClipboard",
    "SettingsManager",
]
