"""Settings for the master volume subsystem.

This package holds the developer configuration, the reference host settings
manager and the adapter that persists the user master volume through it.
"""

from mastervolume.settings.config_manager import ConfigManager
from mastervolume.settings.persistence_adapter import (
    USER_LEVEL_FIELD,
    SettingsPersistenceAdapter,
    UserVolumeState,
)
from mastervolume.settings.plugin_settings import (
    MasterVolumeSettings,
    OptionPosition,
    load_settings,
)

__all__ = [
    # Configuration
    "MasterVolumeSettings",
    "OptionPosition",
    "load_settings",
    # Persistence
    "ConfigManager",
    "SettingsPersistenceAdapter",
    "UserVolumeState",
    "USER_LEVEL_FIELD",
]
