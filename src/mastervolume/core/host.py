"""Protocols for the host collaborators the subsystem plugs into.

The subsystem never owns the audio engine, the settings file or the options
window. It only needs the narrow surfaces below, which the reference host
classes in this package implement and which a real game can implement too.
"""

from typing import Any, Protocol

from mastervolume.core.pipeline import ExtensionPoint


class AudioOutput(Protocol):
    """Host audio entry point.

    ``set_output_gain`` raises ``AudioNotReadyError`` (or any other error)
    while the audio subsystem is still initializing.
    """

    def set_output_gain(self, gain: float) -> None: ...


class Scheduler(Protocol):
    """Deferred call facility used for retries."""

    def call_later(self, delay: float, callback: Any) -> Any: ...


class SettingsPipeline(Protocol):
    """Host settings persistence with layered extension points.

    Attributes:
        make_data: ``() -> dict`` builds the blob to save.
        apply_data: ``(config) -> None`` applies a loaded blob.
        read_value: ``(config, name, default) -> Any`` reads one field.
    """

    make_data: ExtensionPoint[dict[str, Any]]
    apply_data: ExtensionPoint[None]
    read_value: ExtensionPoint[Any]


class OptionsMenu(Protocol):
    """Host options window primitives and extension points."""

    make_command_list: ExtensionPoint[None]
    add_volume_options: ExtensionPoint[None]
    status_text: ExtensionPoint[str]
    process_ok: ExtensionPoint[None]
    cursor_right: ExtensionPoint[None]
    cursor_left: ExtensionPoint[None]

    def add_command(self, label: str, symbol: str) -> None: ...

    def add_general_options(self) -> None: ...

    def relabel_command(self, symbol: str, label: str) -> bool: ...

    def current_symbol(self) -> str | None: ...

    def redraw_current_item(self) -> None: ...

    def play_cursor_sound(self) -> None: ...
