"""Options menu pieces: the host options window and the master volume item."""

from mastervolume.ui.menus.master_volume_options import (
    MASTER_VOLUME_SYMBOL,
    MasterVolumeOptions,
    preset_ladder,
)
from mastervolume.ui.menus.options_window import MenuItem, OptionsWindow

__all__ = [
    "MASTER_VOLUME_SYMBOL",
    "MasterVolumeOptions",
    "MenuItem",
    "OptionsWindow",
    "preset_ladder",
]
