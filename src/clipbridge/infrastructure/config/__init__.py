"""Settings persistence."""

from clipbridge.infrastructure.config.settings_manager import SettingsManager

__all__ = ["SettingsManager"]
