"""Tests for the host settings manager."""

import json
from pathlib import Path

from mastervolume.settings.config_manager import DEFAULT_FIELDS, ConfigManager


class TestConfigManager:
    """Test suite for ConfigManager."""

    def test_defaults(self, config_manager: ConfigManager) -> None:
        """Test native fields start at their defaults."""
        assert config_manager.values == DEFAULT_FIELDS
        assert config_manager.get("bgmVolume") == 100

    def test_save_and_load(self, tmp_path: Path) -> None:
        """Test native fields survive a save/load cycle."""
        path = tmp_path / "config.json"
        manager = ConfigManager(path=path)
        manager.set("alwaysDash", True)
        manager.set("seVolume", 40)
        assert manager.save()

        reloaded = ConfigManager(path=path)
        assert reloaded.load()
        assert reloaded.get("alwaysDash") is True
        assert reloaded.get("seVolume") == 40

    def test_load_missing_file(self, config_manager: ConfigManager) -> None:
        """Test a missing file applies defaults."""
        config_manager.set("bgmVolume", 20)

        assert not config_manager.load()
        assert config_manager.get("bgmVolume") == 100

    def test_load_corrupt_file(self, tmp_path: Path) -> None:
        """Test a corrupt file applies defaults."""
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")
        manager = ConfigManager(path=path)

        assert not manager.load()
        assert manager.values == DEFAULT_FIELDS

    def test_load_non_object(self, tmp_path: Path) -> None:
        """Test a JSON array is ignored."""
        path = tmp_path / "config.json"
        path.write_text("[1, 2]", encoding="utf-8")

        assert not ConfigManager(path=path).load()

    def test_unknown_fields_preserved_on_disk(self, tmp_path: Path) -> None:
        """Test the saved blob is the output of the make_data chain."""
        path = tmp_path / "config.json"
        manager = ConfigManager({"alwaysDash": False}, path=path)

        def add_extra(next_handler):  # type: ignore[no-untyped-def]
            data = next_handler()
            data["extra"] = 1
            return data

        manager.make_data.use(add_extra)
        manager.save()

        assert json.loads(path.read_text(encoding="utf-8")) == {"alwaysDash": False, "extra": 1}

    def test_save_failure_reported(self, tmp_path: Path) -> None:
        """Test an unwritable path returns False."""
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        manager = ConfigManager(path=blocker / "config.json")

        assert not manager.save()
