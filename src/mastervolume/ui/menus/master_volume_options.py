"""Master volume item for the host options window.

Adds one item to the options list and reacts to it:
- Left/Right: Adjust by the arrow step (clamped to 0 and the maximum)
- Enter: Cycle through presets spaced by the click step, wrapping to 0

Every other item keeps the host's behaviour. All changes go through
``SettingsPersistenceAdapter.user_level``, which clamps and re-applies the
composed gain.

Typical usage:
    options = MasterVolumeOptions(adapter, settings)
    options.install(window)
"""

from collections.abc import Callable

from mastervolume.core.host import OptionsMenu
from mastervolume.core.logging_system import get_logger
from mastervolume.settings.persistence_adapter import SettingsPersistenceAdapter
from mastervolume.settings.plugin_settings import MasterVolumeSettings, OptionPosition

logger = get_logger(__name__)

MASTER_VOLUME_SYMBOL = "userMasterVolume"

# Decimal places kept for levels reached by fractional steps
LEVEL_PRECISION = 6


def preset_ladder(click_step: int | float, maximum: int | float) -> list[int | float]:
    """Build the presets cycled by the confirm key.

    Args:
        click_step: Spacing between presets.
        maximum: Highest allowed level.

    Returns:
        Ascending presets from 0 up to at most ``maximum``.

    Examples:
        >>> preset_ladder(25, 100)
        [0, 25, 50, 75, 100]
    """
    if click_step <= 0:
        raise ValueError(f"click_step must be positive, got {click_step}")
    presets = []
    value: int | float = 0
    count = 0
    while value <= maximum:
        presets.append(value)
        count += 1
        value = round(count * click_step, LEVEL_PRECISION)
    return presets


class MasterVolumeOptions:
    """Options menu controller for the user master volume.

    Attributes:
        symbol: Identifier of the master volume item.
        presets: Levels cycled by the confirm key.
    """

    def __init__(
        self,
        adapter: SettingsPersistenceAdapter,
        settings: MasterVolumeSettings,
        symbol: str = MASTER_VOLUME_SYMBOL,
    ) -> None:
        """Initialize the controller.

        Args:
            adapter: Owner of the user level.
            settings: Resolved configuration.
            symbol: Identifier bound into the options list.
        """
        self._adapter = adapter
        self._settings = settings
        self.symbol = symbol
        self.presets = preset_ladder(settings.click_step, adapter.state.max_level)
        self._window: OptionsMenu | None = None

    def install(self, window: OptionsMenu) -> None:
        """Layer the master volume item onto the host options window.

        Args:
            window: Host options window.

        Raises:
            RuntimeError: If the controller is already installed.
        """
        if self._window is not None:
            raise RuntimeError("MasterVolumeOptions is already installed")

        window.make_command_list.use(self._make_command_list, "master_volume.make_command_list")
        if self._settings.volume_labels:
            window.add_volume_options.use(
                self._add_volume_options, "master_volume.add_volume_options"
            )
        window.status_text.use(self._status_text, "master_volume.status_text")
        window.process_ok.use(self._process_ok, "master_volume.process_ok")
        window.cursor_right.use(self._cursor_right, "master_volume.cursor_right")
        window.cursor_left.use(self._cursor_left, "master_volume.cursor_left")
        self._window = window
        logger.debug(
            "Master volume option installed at %s (hide stock volume: %s)",
            self._settings.option_position.value,
            self._settings.hide_stock_volume,
        )

    # Value changes

    def next_preset(self, current: int | float) -> int | float:
        """Preset following ``current``; off-ladder values go to the first."""
        try:
            index = self.presets.index(current)
        except ValueError:
            index = -1
        return self.presets[(index + 1) % len(self.presets)]

    def increase(self) -> None:
        """Raise the user level by the arrow step."""
        level = round(self._adapter.user_level + self._settings.arrow_step, LEVEL_PRECISION)
        self._adapter.user_level = min(level, self._adapter.state.max_level)

    def decrease(self) -> None:
        """Lower the user level by the arrow step."""
        level = round(self._adapter.user_level - self._settings.arrow_step, LEVEL_PRECISION)
        self._adapter.user_level = max(level, 0)

    def cycle_preset(self) -> None:
        """Move the user level to the next preset."""
        self._adapter.user_level = self.next_preset(self._adapter.user_level)

    # Middlewares

    def _make_command_list(self, next_handler: Callable[[], None]) -> None:
        """Rebuild the whole list from the host primitives.

        Once installed this replaces earlier make_command_list layers instead of
        calling them, so the master item is placed exactly once.
        """
        window = self._window
        if window is None:
            next_handler()
            return

        label = self._settings.slider_name
        position = self._settings.option_position

        if self._settings.hide_stock_volume:
            window.add_general_options()
            window.add_command(label, self.symbol)
        elif position is OptionPosition.TOP_ALL:
            window.add_command(label, self.symbol)
            window.add_general_options()
            window.add_volume_options()
        elif position is OptionPosition.TOP_VOLUME:
            window.add_general_options()
            window.add_command(label, self.symbol)
            window.add_volume_options()
        else:
            window.add_general_options()
            window.add_volume_options()
            window.add_command(label, self.symbol)

    def _add_volume_options(self, next_handler: Callable[[], None]) -> None:
        next_handler()
        if self._window is None:
            return
        for symbol, label in self._settings.volume_labels.items():
            if not self._window.relabel_command(symbol, label):
                logger.debug("No %s item to relabel", symbol)

    def _status_text(self, next_handler: Callable[[str], str], symbol: str) -> str:
        if symbol == self.symbol:
            return f"{self._adapter.user_level}%"
        return next_handler(symbol)

    def _process_ok(self, next_handler: Callable[[], None]) -> None:
        if not self._is_current():
            next_handler()
            return
        self._adjust(self.cycle_preset)

    def _cursor_right(self, next_handler: Callable[[bool], None], wrap: bool = False) -> None:
        if not self._is_current():
            next_handler(wrap)
            return
        self._adjust(self.increase)

    def _cursor_left(self, next_handler: Callable[[bool], None], wrap: bool = False) -> None:
        if not self._is_current():
            next_handler(wrap)
            return
        self._adjust(self.decrease)

    def _is_current(self) -> bool:
        return self._window is not None and self._window.current_symbol() == self.symbol

    def _adjust(self, change: Callable[[], None]) -> None:
        window = self._window
        if window is None:
            return
        try:
            change()
        except Exception:
            logger.exception("Failed to adjust master volume")
            return
        window.redraw_current_item()
        window.play_cursor_sound()
        logger.debug("User master volume now %s%%", self._adapter.user_level)
