"""Start-up wiring for the master volume subsystem.

The installer decides once whether the user control is allowed, then either
applies the developer level alone or layers the persisted user level onto the
host settings and the master volume item onto the options window, in that
order, before applying the composed gain.

Typical usage:
    plugin = MasterVolumePlugin(settings, PygameAudioOutput(), loaded_extensions=names)
    plugin.install(config_manager, options_window)
    config_manager.load()

    while running:
        plugin.update(dt)
"""

from collections.abc import Iterable

from mastervolume.audio.volume_composer import VolumeComposer
from mastervolume.core.compatibility import CompatibilityGate, detect_conflicting_extension
from mastervolume.core.host import AudioOutput, OptionsMenu, SettingsPipeline
from mastervolume.core.logging_system import get_logger, set_debug
from mastervolume.core.scheduler import DeferredScheduler
from mastervolume.settings.persistence_adapter import SettingsPersistenceAdapter, UserVolumeState
from mastervolume.settings.plugin_settings import MasterVolumeSettings
from mastervolume.ui.menus.master_volume_options import MasterVolumeOptions

logger = get_logger(__name__)


class MasterVolumePlugin:
    """Installs the layered master volume into a host.

    Attributes:
        settings: Resolved configuration.
        scheduler: Scheduler pumping audio retries.
        composer: Gain composer bound to the host audio output.
        adapter: User level persistence, None until installed or when inactive.
        options: Options menu controller, None until installed or when inactive.
    """

    def __init__(
        self,
        settings: MasterVolumeSettings,
        output: AudioOutput,
        loaded_extensions: Iterable[str] = (),
        scheduler: DeferredScheduler | None = None,
    ) -> None:
        """Initialize the plugin.

        Args:
            settings: Resolved configuration.
            output: Host audio entry point.
            loaded_extensions: Names of the other extensions the host loaded.
            scheduler: Scheduler for retries, a new one if None.
        """
        self.settings = settings
        self.scheduler = scheduler or DeferredScheduler()
        self.composer = VolumeComposer(
            output,
            self.scheduler,
            settings.dev_master_volume,
            max_attempts=settings.apply_retry_limit,
        )
        self._loaded_extensions = tuple(loaded_extensions)
        self.gate: CompatibilityGate | None = None
        self.adapter: SettingsPersistenceAdapter | None = None
        self.options: MasterVolumeOptions | None = None

    @property
    def installed(self) -> bool:
        """Whether install() has run."""
        return self.gate is not None

    @property
    def active(self) -> bool:
        """Whether the user control is installed."""
        return self.gate is not None and self.gate.active

    @property
    def user_level(self) -> int | float | None:
        """Current user level, None when the user control is inactive."""
        return self.adapter.user_level if self.adapter is not None else None

    def install(self, config: SettingsPipeline, window: OptionsMenu) -> bool:
        """Wire the subsystem into the host and apply the start-up gain.

        Args:
            config: Host settings pipeline.
            window: Host options window.

        Returns:
            True if the user control was installed.
        """
        if self.gate is not None:
            logger.warning("Master volume plugin already installed, ignoring")
            return self.gate.active

        set_debug(self.settings.debug_logs)
        logger.debug("Master volume initialization started")
        logger.debug("Configuration: %s", self.settings.to_dict())

        conflict = detect_conflicting_extension(self._loaded_extensions)
        self.gate = CompatibilityGate(self.settings.show_user_volume, conflict)

        if not self.gate.active:
            gain = self.composer.effective_gain(0, active=False)
            logger.debug("Dev volume applied: %.2f", gain)
            self.composer.apply(gain)
            return False

        state = UserVolumeState(
            self.settings.user_master_volume,
            self.settings.user_volume_max,
        )
        self.adapter = SettingsPersistenceAdapter(state, self.composer)
        self.adapter.install(config)

        self.options = MasterVolumeOptions(self.adapter, self.settings)
        self.options.install(window)

        self.composer.apply(self.composer.effective_gain(self.adapter.user_level, active=True))
        logger.debug("Master volume initialization complete")
        return True

    def update(self, dt: float) -> None:
        """Pump deferred work; call once per frame.

        Args:
            dt: Seconds since the previous frame.
        """
        self.scheduler.update(dt)
