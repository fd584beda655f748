"""Settings manager — ClipboardSettings persisted as JSON.

The file lives in the platform config directory from ``platformdirs``
(``~/.config/clipbridge/settings.json`` on Linux).
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

import platformdirs
from pydantic import ValidationError

from clipbridge.domain.models.settings import ClipboardSettings
from clipbridge.domain.ports.settings_port import SettingsPort

logger = logging.getLogger(__name__)

_APP_NAME = "clipbridge"
_SETTINGS_FILENAME = "settings.json"


class SettingsManager(SettingsPort):
    """JSON file implementation of :class:`SettingsPort`.

    Parameters
    ----------
    config_dir : Path | None
        Override the default config directory (useful for testing).
    """

    def __init__(self, config_dir: Path | None = None) -> None:
        self._config_dir = config_dir or Path(platformdirs.user_config_dir(_APP_NAME))
        self._settings_path = self._config_dir / _SETTINGS_FILENAME

    @property
    def settings_path(self) -> Path:
        return self._settings_path

    def load(self) -> ClipboardSettings:
        """Read settings, or return defaults when the file is absent or unusable."""
        try:
            payload = self._settings_path.read_bytes()
        except FileNotFoundError:
            return ClipboardSettings()
        except OSError as exc:
            logger.warning("Cannot read settings file %s: %s", self._settings_path, exc)
            return ClipboardSettings()

        try:
            return ClipboardSettings.model_validate_json(payload)
        except ValidationError as exc:
            logger.warning(
                "Ignoring invalid settings file %s (%d error(s))",
                self._settings_path,
                exc.error_count(),
            )
            return ClipboardSettings()

    def save(self, settings: ClipboardSettings) -> None:
        """Replace the settings file in one rename so readers never see half a file."""
        self._config_dir.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self._config_dir, prefix=".settings-", suffix=".tmp")
        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(settings.model_dump_json(indent=2))
            tmp_path.replace(self._settings_path)
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise
        logger.debug("Saved settings to %s", self._settings_path)

    def reset_to_defaults(self) -> ClipboardSettings:
        self._settings_path.unlink(missing_ok=True)
        return ClipboardSettings()
