"""Start-up gate that disables the user volume control on conflicts.

Some options-menu extensions rebuild the whole options window and manage
volume on their own. When one of them is loaded the user control would be
applied twice, so the subsystem limits itself to the developer level.

Typical usage:
    present = detect_conflicting_extension(host.loaded_plugins)
    gate = CompatibilityGate(settings.show_user_volume, present)
    if gate.active:
        ...
"""

from collections.abc import Iterable

from mastervolume.core.logging_system import get_logger

logger = get_logger(__name__)

# Options extensions known to take over the options window
CONFLICTING_EXTENSIONS = frozenset({"yep_optionscore"})

_EXTENSION_SUFFIXES = (".js", ".py")


def _normalize(name: str) -> str:
    name = name.strip().lower()
    for suffix in _EXTENSION_SUFFIXES:
        if name.endswith(suffix):
            return name[: -len(suffix)]
    return name


def detect_conflicting_extension(
    loaded_extensions: Iterable[str],
    conflicting: Iterable[str] = CONFLICTING_EXTENSIONS,
) -> bool:
    """Check whether a conflicting options extension is loaded.

    Names are compared case-insensitively and a trailing ``.js``/``.py`` is
    ignored, so ``"YEP_OptionsCore.js"`` matches ``"YEP_OptionsCore"``.

    Args:
        loaded_extensions: Names of the extensions the host loaded.
        conflicting: Names that conflict with the user volume control.

    Returns:
        True if any loaded extension conflicts.
    """
    known = {_normalize(name) for name in conflicting}
    return any(_normalize(name) in known for name in loaded_extensions)


def is_active(show_user_control: bool, conflicting_extension_present: bool) -> bool:
    """Decide whether the user-adjustable path is active."""
    return show_user_control and not conflicting_extension_present


class CompatibilityGate:
    """One-shot decision on whether to install the user volume control.

    The decision is taken in the constructor and never re-evaluated.
    """

    def __init__(self, show_user_control: bool, conflicting_extension_present: bool) -> None:
        self.show_user_control = show_user_control
        self.conflict = conflicting_extension_present
        self._active = is_active(show_user_control, conflicting_extension_present)

        if self.conflict and show_user_control:
            logger.warning(
                "Conflicting options extension detected, user master volume disabled"
            )
        logger.debug(
            "Compatibility gate: show_user_control=%s conflict=%s active=%s",
            show_user_control,
            conflicting_extension_present,
            self._active,
        )

    @property
    def active(self) -> bool:
        """Whether the user control, its menu item and its saved field are installed."""
        return self._active
