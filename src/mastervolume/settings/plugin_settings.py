"""Master volume configuration.

The developer configures the subsystem once, either in a YAML file or through
the host's plugin parameter table (where every value arrives as a string).
Both forms are accepted, and keys may use the snake_case names below or the
display names shown in the parameter table ("Dev Master Volume").

Bad values never stop the game from starting: a missing or malformed value
falls back to its default and an out-of-range number is clamped, each with a
warning.

Typical usage:
    from mastervolume.settings.plugin_settings import load_settings

    settings = load_settings("config/master_volume.yaml")
    settings.dev_master_volume  # 70
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

from mastervolume.core.logging_system import get_logger

logger = get_logger(__name__)

DEFAULT_DEV_MASTER_VOLUME = 70
DEFAULT_USER_MASTER_VOLUME = 90
DEFAULT_USER_VOLUME_MAX = 200
WIDE_USER_VOLUME_MAX = 900
DEFAULT_SLIDER_NAME = "Master Volume"
DEFAULT_ARROW_STEP = 5
DEFAULT_CLICK_STEP = 25

# Native volume symbols whose labels can be overridden
VOLUME_LABEL_KEYS = {
    "bgm_volume_name": "bgmVolume",
    "bgs_volume_name": "bgsVolume",
    "me_volume_name": "meVolume",
    "se_volume_name": "seVolume",
}

# Display names from the plugin parameter table -> snake_case keys
PARAMETER_ALIASES = {
    "Debug Logs": "debug_logs",
    "Dev Master Volume": "dev_master_volume",
    "Show User Volume": "show_user_volume",
    "User Master Volume": "user_master_volume",
    "User Volume Max": "user_volume_max",
    "Slider Name": "slider_name",
    "Option Position": "option_position",
    "Hide Stock Volume": "hide_stock_volume",
    "Arrow volume step size": "arrow_step",
    "Click volume step size": "click_step",
    "BGM Volume Name": "bgm_volume_name",
    "BGS Volume Name": "bgs_volume_name",
    "ME Volume Name": "me_volume_name",
    "SE Volume Name": "se_volume_name",
    "Apply Retry Limit": "apply_retry_limit",
}


class OptionPosition(str, Enum):
    """Where the master volume item goes in the options list."""

    TOP_ALL = "TopAll"
    TOP_VOLUME = "TopVolume"
    BOTTOM_VOLUME = "BottomVolume"


def coerce_number(value: Any) -> int | float:
    """Convert a value to a number, keeping whole numbers as ints.

    Args:
        value: Number or numeric string.

    Returns:
        The value as int when whole, else float.

    Raises:
        ValueError: If the value is not a finite number.

    Examples:
        >>> coerce_number("90")
        90
        >>> coerce_number(92.5)
        92.5
    """
    if isinstance(value, bool):
        raise ValueError(f"Not a number: {value!r}")
    if isinstance(value, int):
        return value
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Not a number: {value!r}") from e
    if not math.isfinite(number):
        raise ValueError(f"Not a finite number: {value!r}")
    return int(number) if number.is_integer() else number


def _read_bool(data: Mapping[str, Any], key: str, default: bool) -> bool:
    value = data.get(key)
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in ("true", "on", "yes", "1"):
        return True
    if text in ("false", "off", "no", "0"):
        return False
    logger.warning("Invalid %s %r, using default %s", key, value, default)
    return default


def _read_number(
    data: Mapping[str, Any],
    key: str,
    default: int | float,
    minimum: int | float,
    maximum: int | float,
) -> int | float:
    value = data.get(key)
    if value is None or value == "":
        return default
    try:
        number = coerce_number(value)
    except ValueError:
        logger.warning("Invalid %s %r, using default %s", key, value, default)
        return default
    if number < minimum or number > maximum:
        clamped = max(minimum, min(maximum, number))
        logger.warning(
            "%s %s out of range [%s, %s], clamped to %s", key, number, minimum, maximum, clamped
        )
        return clamped
    return number


def _read_text(data: Mapping[str, Any], key: str, default: str | None) -> str | None:
    value = data.get(key)
    if value is None:
        return default
    text = str(value).strip()
    return text or default


@dataclass(frozen=True)
class MasterVolumeSettings:
    """Resolved master volume configuration.

    Attributes:
        debug_logs: Enable debug logging for the package.
        dev_master_volume: Developer percentage applied on every start (0-100).
        show_user_volume: Offer the user control in the options menu.
        user_master_volume: User percentage used until one is saved.
        user_volume_max: Upper bound of the user percentage.
        slider_name: Label of the options menu item.
        option_position: Where the item goes in the options list.
        hide_stock_volume: Drop the host's own volume items from the list.
        arrow_step: Left/right adjustment step.
        click_step: Spacing of the presets cycled by the confirm key.
        volume_labels: Native volume symbol -> replacement label.
        apply_retry_limit: Attempt cap while the audio output is not ready,
            None to keep retrying.
    """

    debug_logs: bool = False
    dev_master_volume: int | float = DEFAULT_DEV_MASTER_VOLUME
    show_user_volume: bool = True
    user_master_volume: int | float = DEFAULT_USER_MASTER_VOLUME
    user_volume_max: int | float = DEFAULT_USER_VOLUME_MAX
    slider_name: str = DEFAULT_SLIDER_NAME
    option_position: OptionPosition = OptionPosition.TOP_VOLUME
    hide_stock_volume: bool = False
    arrow_step: int | float = DEFAULT_ARROW_STEP
    click_step: int | float = DEFAULT_CLICK_STEP
    volume_labels: dict[str, str] = field(default_factory=dict)
    apply_retry_limit: int | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "MasterVolumeSettings":
        """Resolve settings from YAML data or a plugin parameter table.

        Args:
            data: Raw configuration values, typed or strings.

        Returns:
            Settings with defaults filled in for anything missing or invalid.
        """
        raw = {PARAMETER_ALIASES.get(key, key): value for key, value in (data or {}).items()}

        position_value = raw.get("option_position")
        try:
            option_position = (
                OptionPosition(position_value)
                if position_value is not None
                else OptionPosition.TOP_VOLUME
            )
        except ValueError:
            logger.warning("Unknown option_position %r, using TopVolume", position_value)
            option_position = OptionPosition.TOP_VOLUME

        user_volume_max = _read_number(
            raw, "user_volume_max", DEFAULT_USER_VOLUME_MAX, 100, WIDE_USER_VOLUME_MAX
        )

        volume_labels = {}
        for key, symbol in VOLUME_LABEL_KEYS.items():
            label = _read_text(raw, key, None)
            if label:
                volume_labels[symbol] = label

        # 0 (also the fallback for malformed values) means no cap
        apply_retry_limit = int(_read_number(raw, "apply_retry_limit", 0, 0, 1_000_000)) or None

        return cls(
            debug_logs=_read_bool(raw, "debug_logs", False),
            dev_master_volume=_read_number(
                raw, "dev_master_volume", DEFAULT_DEV_MASTER_VOLUME, 0, 100
            ),
            show_user_volume=_read_bool(raw, "show_user_volume", True),
            user_master_volume=_read_number(
                raw, "user_master_volume", DEFAULT_USER_MASTER_VOLUME, 0, user_volume_max
            ),
            user_volume_max=user_volume_max,
            slider_name=_read_text(raw, "slider_name", DEFAULT_SLIDER_NAME) or DEFAULT_SLIDER_NAME,
            option_position=option_position,
            hide_stock_volume=_read_bool(raw, "hide_stock_volume", False),
            arrow_step=_read_number(raw, "arrow_step", DEFAULT_ARROW_STEP, 1, 25),
            click_step=_read_number(raw, "click_step", DEFAULT_CLICK_STEP, 1, 100),
            volume_labels=volume_labels,
            apply_retry_limit=apply_retry_limit,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary for logging and display."""
        return {
            "debug_logs": self.debug_logs,
            "dev_master_volume": self.dev_master_volume,
            "show_user_volume": self.show_user_volume,
            "user_master_volume": self.user_master_volume,
            "user_volume_max": self.user_volume_max,
            "slider_name": self.slider_name,
            "option_position": self.option_position.value,
            "hide_stock_volume": self.hide_stock_volume,
            "arrow_step": self.arrow_step,
            "click_step": self.click_step,
            "volume_labels": dict(self.volume_labels),
            "apply_retry_limit": self.apply_retry_limit,
        }


def load_settings(path: Path | str | None = None) -> MasterVolumeSettings:
    """Load settings from a YAML file.

    Args:
        path: YAML file path. None or a missing file yields the defaults.

    Returns:
        Resolved settings.
    """
    if path is None:
        return MasterVolumeSettings()

    settings_path = Path(path)
    if not settings_path.exists():
        logger.info("No master volume config at %s, using defaults", settings_path)
        return MasterVolumeSettings()

    try:
        with open(settings_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.error("Failed to load master volume config: %s", e)
        return MasterVolumeSettings()

    if not isinstance(data, dict):
        logger.warning("Master volume config %s is not a mapping, using defaults", settings_path)
        return MasterVolumeSettings()

    # Allow the settings to live under a "master_volume" section
    section = data.get("master_volume", data)
    if not isinstance(section, dict):
        section = data
    logger.info("Loaded master volume config from %s", settings_path)
    return MasterVolumeSettings.from_mapping(section)
