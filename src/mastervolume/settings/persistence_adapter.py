"""Persisted user master volume.

The user level rides along in the host's settings blob as one extra field,
``userLevel``. The adapter layers three middlewares onto the host's settings
pipeline: saving adds the field, loading reads it back, and the field reader
knows how to coerce it. Blobs written before the field existed simply load
the configured default.

The ``user_level`` property is the only way to change the value. Every write
is clamped and immediately re-applies the composed gain.

Typical usage:
    adapter = SettingsPersistenceAdapter(UserVolumeState(90, 200), composer)
    adapter.install(config_manager)
    adapter.user_level = 120
    config_manager.save()
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from mastervolume.audio.volume_composer import VolumeComposer
from mastervolume.core.host import SettingsPipeline
from mastervolume.core.logging_system import get_logger
from mastervolume.settings.plugin_settings import coerce_number

logger = get_logger(__name__)

USER_LEVEL_FIELD = "userLevel"


@dataclass
class UserVolumeState:
    """Settings state owned by the adapter.

    Attributes:
        default_level: Level used while nothing has been set or loaded.
        max_level: Upper bound of the level (lower bound is 0).
        level: Current level, None until first set.
    """

    default_level: int | float
    max_level: int | float
    level: int | float | None = None

    @property
    def value(self) -> int | float:
        """Current level, or the default when unset."""
        return self.default_level if self.level is None else self.level

    def clamp(self, value: int | float) -> int | float:
        """Clamp a level to [0, max_level]."""
        return max(0, min(self.max_level, value))


class SettingsPersistenceAdapter:
    """Carries the user level through the host's settings save/load pipeline."""

    def __init__(self, state: UserVolumeState, composer: VolumeComposer) -> None:
        """Initialize the adapter.

        Args:
            state: User volume state to own.
            composer: Composer re-applied on every change.
        """
        self.state = state
        self._composer = composer
        self._pipeline: SettingsPipeline | None = None

    @property
    def user_level(self) -> int | float:
        """User master volume percentage."""
        return self.state.value

    @user_level.setter
    def user_level(self, value: Any) -> None:
        level = self.state.clamp(coerce_number(value))
        self.state.level = level
        self._composer.apply(self._composer.effective_gain(level, active=True))

    @property
    def installed(self) -> bool:
        """Whether the adapter is layered onto a settings pipeline."""
        return self._pipeline is not None

    def install(self, pipeline: SettingsPipeline) -> None:
        """Layer the user level onto the host's settings pipeline.

        Args:
            pipeline: Host settings pipeline.

        Raises:
            RuntimeError: If the adapter is already installed.
        """
        if self._pipeline is not None:
            raise RuntimeError("SettingsPersistenceAdapter is already installed")

        pipeline.make_data.use(self._make_data, "master_volume.make_data")
        pipeline.apply_data.use(self._apply_data, "master_volume.apply_data")
        pipeline.read_value.use(self._read_value, "master_volume.read_value")
        self._pipeline = pipeline
        logger.debug("User master volume persistence installed")

    def _make_data(self, next_handler: Callable[[], dict[str, Any]]) -> dict[str, Any]:
        config = next_handler()
        try:
            config[USER_LEVEL_FIELD] = self.user_level
        except Exception:
            logger.exception("Failed to add %s to settings data", USER_LEVEL_FIELD)
        return config

    def _apply_data(
        self, next_handler: Callable[[dict[str, Any]], None], config: dict[str, Any]
    ) -> None:
        next_handler(config)
        if self._pipeline is None:
            return
        value = self._pipeline.read_value(config, USER_LEVEL_FIELD, self.state.default_level)
        try:
            self.user_level = value
        except Exception:
            logger.exception("Failed to apply saved %s %r", USER_LEVEL_FIELD, value)
        else:
            logger.debug("Loaded user master volume: %s%%", self.user_level)

    def _read_value(
        self,
        next_handler: Callable[[dict[str, Any], str, Any], Any],
        config: dict[str, Any],
        name: str,
        default: Any,
    ) -> Any:
        if name != USER_LEVEL_FIELD:
            return next_handler(config, name, default)

        value = config.get(name)
        if value is None:
            return default
        try:
            return coerce_number(value)
        except ValueError:
            logger.warning("Invalid saved %s %r, using default %s", name, value, default)
            return default
