"""Tests for the host options window."""

from unittest.mock import MagicMock

import pygame
import pytest

from mastervolume.settings.config_manager import ConfigManager
from mastervolume.ui.menus.options_window import OptionsWindow


class TestOptionsWindow:
    """Test suite for OptionsWindow."""

    @pytest.fixture
    def window(self, config_manager: ConfigManager) -> OptionsWindow:
        """Create an opened options window."""
        window = OptionsWindow(config_manager, speak=MagicMock(), play_sound=MagicMock())
        window.open()
        return window

    def test_native_list(self, window: OptionsWindow) -> None:
        """Test the native list has general then volume items."""
        assert window.symbols() == [
            "alwaysDash",
            "commandRemember",
            "bgmVolume",
            "bgsVolume",
            "meVolume",
            "seVolume",
        ]
        assert window.current_symbol() == "alwaysDash"

    def test_navigation_wraps(self, window: OptionsWindow) -> None:
        """Test up from the first item wraps to the last."""
        window.handle_key(pygame.K_UP)
        assert window.current_symbol() == "seVolume"
        window.handle_key(pygame.K_DOWN)
        assert window.current_symbol() == "alwaysDash"

    def test_volume_cycle(self, window: OptionsWindow, config_manager: ConfigManager) -> None:
        """Test confirm on a volume item wraps past 100 to 0."""
        window.index = window.symbols().index("bgmVolume")
        window.handle_key(pygame.K_RETURN)

        assert config_manager.get("bgmVolume") == 0

    def test_toggle(self, window: OptionsWindow, config_manager: ConfigManager) -> None:
        """Test right and left switch a toggle on and off."""
        window.handle_key(pygame.K_RIGHT)
        assert config_manager.get("alwaysDash") is True
        window.handle_key(pygame.K_LEFT)
        assert config_manager.get("alwaysDash") is False

    def test_item_text(self, window: OptionsWindow) -> None:
        """Test drawn text combines label and status."""
        assert window.item_text("seVolume") == "SE Volume: 100%"
        with pytest.raises(KeyError):
            window.item_text("missing")

    def test_escape_saves(self, window: OptionsWindow, config_manager: ConfigManager) -> None:
        """Test closing the window persists the settings."""
        assert window.handle_key(pygame.K_ESCAPE)

        assert not window.is_open
        assert config_manager.path.exists()

    def test_closed_window_ignores_keys(self, config_manager: ConfigManager) -> None:
        """Test keys are not consumed before open."""
        window = OptionsWindow(config_manager)
        assert not window.handle_key(pygame.K_RETURN)
