"""Host options window with layered command callbacks.

A keyboard-driven list of options, in the style of a classic RPG options
screen. The window owns the cursor and the item list. Building the list,
status text and the confirm/left/right reactions are extension points, so a
plugin can add its own item without replacing the window.

Navigation:
- Up/Down: Move between options
- Left/Right: Adjust the current option
- Enter: Confirm (toggle or cycle the current option)

Typical usage:
    window = OptionsWindow(config_manager, speak=tts.speak, play_sound=sfx.play)
    window.open()
    window.handle_key(pygame.K_RIGHT)
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import pygame

from mastervolume.core.logging_system import get_logger
from mastervolume.core.pipeline import ExtensionPoint
from mastervolume.settings.config_manager import ConfigManager

logger = get_logger(__name__)

# Native option symbols and labels
GENERAL_OPTIONS = [
    ("alwaysDash", "Always Dash"),
    ("commandRemember", "Command Remember"),
]
VOLUME_OPTIONS = [
    ("bgmVolume", "BGM Volume"),
    ("bgsVolume", "BGS Volume"),
    ("meVolume", "ME Volume"),
    ("seVolume", "SE Volume"),
]

# Native volume step (percent)
VOLUME_STEP = 20

CURSOR_SOUND = "cursor"


@dataclass
class MenuItem:
    """An options window entry.

    Attributes:
        symbol: Identifier bound to the entry.
        label: Display text.
        data: Additional item-specific data.
    """

    symbol: str
    label: str
    data: dict[str, Any] = field(default_factory=dict)


class OptionsWindow:
    """Options list bound to the host settings manager.

    Attributes:
        items: Current option entries.
        index: Cursor position.
        is_open: Whether the window is showing.
    """

    def __init__(
        self,
        config: ConfigManager,
        speak: Callable[[str], None] | None = None,
        play_sound: Callable[[str], None] | None = None,
    ) -> None:
        """Initialize the options window.

        Args:
            config: Settings manager holding the native option values.
            speak: Announces redrawn items (TTS or screen reader).
            play_sound: Plays a named UI sound.
        """
        self.config = config
        self.items: list[MenuItem] = []
        self.index = 0
        self.is_open = False
        self._speak_callback = speak
        self._play_sound_callback = play_sound

        self.make_command_list: ExtensionPoint[None] = ExtensionPoint(
            "make_command_list", self._make_command_list
        )
        self.add_volume_options: ExtensionPoint[None] = ExtensionPoint(
            "add_volume_options", self._add_volume_options
        )
        self.status_text: ExtensionPoint[str] = ExtensionPoint("status_text", self._status_text)
        self.process_ok: ExtensionPoint[None] = ExtensionPoint("process_ok", self._process_ok)
        self.cursor_right: ExtensionPoint[None] = ExtensionPoint(
            "cursor_right", self._cursor_right
        )
        self.cursor_left: ExtensionPoint[None] = ExtensionPoint("cursor_left", self._cursor_left)

    # Primitives

    def add_command(self, label: str, symbol: str) -> None:
        """Append a selectable item."""
        self.items.append(MenuItem(symbol, label))

    def relabel_command(self, symbol: str, label: str) -> bool:
        """Change the label of an existing item.

        Returns:
            True if an item with that symbol exists.
        """
        for item in self.items:
            if item.symbol == symbol:
                item.label = label
                return True
        return False

    def symbols(self) -> list[str]:
        """Symbols of all items in list order."""
        return [item.symbol for item in self.items]

    def current_symbol(self) -> str | None:
        """Symbol of the item under the cursor."""
        if not self.items:
            return None
        return self.items[self.index].symbol

    def item_text(self, symbol: str) -> str:
        """Label and status text of an item, as it is drawn."""
        for item in self.items:
            if item.symbol == symbol:
                return f"{item.label}: {self.status_text(symbol)}"
        raise KeyError(symbol)

    def redraw_current_item(self) -> None:
        """Refresh the item under the cursor."""
        symbol = self.current_symbol()
        if symbol is not None:
            self._speak(self.item_text(symbol))

    def play_cursor_sound(self) -> None:
        """Play the cursor confirmation sound."""
        if self._play_sound_callback:
            self._play_sound_callback(CURSOR_SOUND)

    def add_general_options(self) -> None:
        """Append the host's general (non-volume) items."""
        for symbol, label in GENERAL_OPTIONS:
            self.add_command(label, symbol)

    # Window lifecycle

    def open(self) -> None:
        """Build the item list and show the window."""
        self.items = []
        self.make_command_list()
        self.index = 0
        self.is_open = True
        logger.debug("Options opened with %d items", len(self.items))

    def close(self) -> None:
        """Hide the window and persist the settings."""
        self.is_open = False
        self.config.save()

    def handle_key(self, key: int) -> bool:
        """Handle keyboard input.

        Args:
            key: pygame key code.

        Returns:
            True if the key was consumed.
        """
        if not self.is_open or not self.items:
            return False

        if key == pygame.K_DOWN:
            self.index = (self.index + 1) % len(self.items)
            self.redraw_current_item()
            return True
        if key == pygame.K_UP:
            self.index = (self.index - 1) % len(self.items)
            self.redraw_current_item()
            return True
        if key == pygame.K_RETURN:
            self.process_ok()
            return True
        if key == pygame.K_RIGHT:
            self.cursor_right(False)
            return True
        if key == pygame.K_LEFT:
            self.cursor_left(False)
            return True
        if key == pygame.K_ESCAPE:
            self.close()
            return True
        return False

    # Native behaviour (innermost handlers)

    def _make_command_list(self) -> None:
        self.add_general_options()
        self.add_volume_options()

    def _add_volume_options(self) -> None:
        for symbol, label in VOLUME_OPTIONS:
            self.add_command(label, symbol)

    def _is_volume_symbol(self, symbol: str | None) -> bool:
        return symbol is not None and symbol.endswith("Volume")

    def _status_text(self, symbol: str) -> str:
        value = self.config.get(symbol)
        if self._is_volume_symbol(symbol):
            return f"{value}%"
        return "ON" if value else "OFF"

    def _process_ok(self) -> None:
        symbol = self.current_symbol()
        if symbol is None:
            return
        value = self.config.get(symbol)
        if self._is_volume_symbol(symbol):
            value = value + VOLUME_STEP
            self._change_value(symbol, 0 if value > 100 else value)
        else:
            self._change_value(symbol, not value)

    def _cursor_right(self, wrap: bool) -> None:
        symbol = self.current_symbol()
        if symbol is None:
            return
        if self._is_volume_symbol(symbol):
            self._change_value(symbol, min(100, self.config.get(symbol) + VOLUME_STEP))
        else:
            self._change_value(symbol, True)

    def _cursor_left(self, wrap: bool) -> None:
        symbol = self.current_symbol()
        if symbol is None:
            return
        if self._is_volume_symbol(symbol):
            self._change_value(symbol, max(0, self.config.get(symbol) - VOLUME_STEP))
        else:
            self._change_value(symbol, False)

    def _change_value(self, symbol: str, value: Any) -> None:
        if self.config.get(symbol) != value:
            self.config.set(symbol, value)
            self.redraw_current_item()
            self.play_cursor_sound()

    def _speak(self, text: str) -> None:
        if self._speak_callback:
            self._speak_callback(text)
