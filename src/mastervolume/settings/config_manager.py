"""Host settings manager with a layered save/load pipeline.

This is the reference host side of settings persistence: a flat blob of named
fields stored as JSON. Plugins extend it through three extension points
instead of replacing methods:

    make_data()                       -> dict to write
    apply_data(config)                applies a loaded dict
    read_value(config, name, default) reads one field

Settings are stored in ~/.mastervolume/config.json by default.

Typical usage:
    manager = ConfigManager({"alwaysDash": False, "bgmVolume": 100})
    manager.load()
    manager.set("alwaysDash", True)
    manager.save()
"""

import json
from pathlib import Path
from typing import Any

from mastervolume.core.logging_system import get_logger
from mastervolume.core.pipeline import ExtensionPoint

logger = get_logger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".mastervolume" / "config.json"

# Native fields of the host options screen
DEFAULT_FIELDS: dict[str, Any] = {
    "alwaysDash": False,
    "commandRemember": False,
    "bgmVolume": 100,
    "bgsVolume": 100,
    "meVolume": 100,
    "seVolume": 100,
}


class ConfigManager:
    """Named-field settings blob with JSON persistence.

    Attributes:
        defaults: Native field name -> default value.
        values: Current native field values.
        make_data: Extension point building the blob to save.
        apply_data: Extension point applying a loaded blob.
        read_value: Extension point reading one field of a blob.
    """

    def __init__(
        self,
        defaults: dict[str, Any] | None = None,
        path: Path | str | None = None,
    ) -> None:
        """Initialize the settings manager.

        Args:
            defaults: Native fields and their defaults, DEFAULT_FIELDS if None.
            path: Settings file, defaults to ~/.mastervolume/config.json.
        """
        self.defaults = dict(DEFAULT_FIELDS if defaults is None else defaults)
        self.values: dict[str, Any] = dict(self.defaults)
        self.path = Path(path) if path is not None else DEFAULT_CONFIG_PATH

        self.make_data: ExtensionPoint[dict[str, Any]] = ExtensionPoint(
            "make_data", self._make_data
        )
        self.apply_data: ExtensionPoint[None] = ExtensionPoint("apply_data", self._apply_data)
        self.read_value: ExtensionPoint[Any] = ExtensionPoint("read_value", self._read_value)

    def get(self, name: str) -> Any:
        """Get a native field value."""
        return self.values.get(name, self.defaults.get(name))

    def set(self, name: str, value: Any) -> None:
        """Set a native field value."""
        self.values[name] = value

    def _make_data(self) -> dict[str, Any]:
        return dict(self.values)

    def _apply_data(self, config: dict[str, Any]) -> None:
        for name, default in self.defaults.items():
            self.values[name] = self.read_value(config, name, default)

    def _read_value(self, config: dict[str, Any], name: str, default: Any) -> Any:
        value = config.get(name)
        return default if value is None else value

    def save(self) -> bool:
        """Write the current blob to disk.

        Returns:
            True if saved successfully, False otherwise.
        """
        data = self.make_data()
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            logger.error("Failed to save settings: %s", e)
            return False

        logger.info("Saved settings to %s", self.path)
        return True

    def load(self) -> bool:
        """Read the blob from disk and apply it.

        A missing or unreadable file applies an empty blob, so every field
        takes its default.

        Returns:
            True if a settings file was read, False if defaults were used.
        """
        config: dict[str, Any] = {}
        loaded = False
        if not self.path.exists():
            logger.info("No settings file found, using defaults")
        else:
            try:
                with open(self.path, encoding="utf-8") as f:
                    data = json.load(f)
                if isinstance(data, dict):
                    config = data
                    loaded = True
                else:
                    logger.warning("Settings file %s is not an object, using defaults", self.path)
            except (OSError, json.JSONDecodeError) as e:
                logger.error("Failed to load settings: %s", e)

        self.apply_data(config)
        if loaded:
            logger.info("Loaded settings from %s", self.path)
        return loaded
