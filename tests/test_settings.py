"""Tests for clipboard settings.

Covers:
- ClipboardSettings model defaults and validation
- SettingsManager load / save / reset with a temp directory
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from clipbridge.domain.models.enums import BackendName
from clipbridge.domain.models.settings import ClipboardSettings
from clipbridge.infrastructure.config.settings_manager import SettingsManager


# ── Fixtures ──────────────────────────────────────────────────────────────


@pytest.fixture()
def tmp_config_dir(tmp_path: Path) -> Path:
    """Return a temporary directory for settings files."""
    return tmp_path / "clipbridge_config"


@pytest.fixture()
def manager(tmp_config_dir: Path) -> SettingsManager:
    """SettingsManager pointing at a temp directory."""
    return SettingsManager(config_dir=tmp_config_dir)


# ── Model Tests ───────────────────────────────────────────────────────────


class TestClipboardSettingsModel:
    """Tests for ClipboardSettings Pydantic model."""

    def test_defaults(self) -> None:
        settings = ClipboardSettings()
        assert settings.backend == BackendName.AUTO
        assert settings.timeout == 5.0
        assert settings.strip_trailing_newline is False

    def test_backend_from_string(self) -> None:
        settings = ClipboardSettings(backend="wl-clipboard")
        assert settings.backend == BackendName.WL_CLIPBOARD

    def test_unknown_backend_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ClipboardSettings(backend="klipper")

    @pytest.mark.parametrize("timeout", [0, -1, 61])
    def test_timeout_bounds(self, timeout: float) -> None:
        with pytest.raises(ValidationError):
            ClipboardSettings(timeout=timeout)


# ── Manager Tests ─────────────────────────────────────────────────────────


class TestSettingsManager:
    """Tests for SettingsManager persistence."""

    def test_load_returns_defaults_when_missing(self, manager: SettingsManager) -> None:
        assert manager.load() == ClipboardSettings()

    def test_save_and_load(self, manager: SettingsManager) -> None:
        settings = ClipboardSettings(backend=BackendName.XCLIP, timeout=2.5)
        manager.save(settings)
        assert manager.settings_path.exists()
        assert manager.load() == settings

    def test_saved_file_is_json(self, manager: SettingsManager) -> None:
        manager.save(ClipboardSettings(strip_trailing_newline=True))
        raw = json.loads(manager.settings_path.read_text(encoding="utf-8"))
        assert raw == {"backend": "auto", "timeout": 5.0, "strip_trailing_newline": True}

    def test_no_temp_files_left(self, manager: SettingsManager, tmp_config_dir: Path) -> None:
        manager.save(ClipboardSettings())
        assert [p.name for p in tmp_config_dir.iterdir()] == ["settings.json"]

    def test_corrupted_file_falls_back(
        self, manager: SettingsManager, tmp_config_dir: Path, caplog
    ) -> None:
        tmp_config_dir.mkdir(parents=True)
        manager.settings_path.write_text("{not json", encoding="utf-8")
        with caplog.at_level("WARNING"):
            assert manager.load() == ClipboardSettings()
        assert "Ignoring invalid settings file" in caplog.text

    def test_invalid_values_fall_back(self, manager: SettingsManager, tmp_config_dir: Path) -> None:
        tmp_config_dir.mkdir(parents=True)
        manager.settings_path.write_text('{"timeout": "soon"}', encoding="utf-8")
        assert manager.load() == ClipboardSettings()

    def test_reset_to_defaults(self, manager: SettingsManager) -> None:
        manager.save(ClipboardSettings(backend=BackendName.WL_CLIPBOARD))
        assert manager.reset_to_defaults() == ClipboardSettings()
        assert not manager.settings_path.exists()

    def test_reset_without_file(self, manager: SettingsManager) -> None:
        assert manager.reset_to_defaults() == ClipboardSettings()
