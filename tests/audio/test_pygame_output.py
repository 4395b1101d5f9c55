"""Tests for the pygame audio output."""

from unittest.mock import MagicMock, patch

import pytest

from mastervolume.audio.pygame_output import PygameAudioOutput
from mastervolume.core.errors import AudioNotReadyError


class TestPygameAudioOutput:
    """Test suite for PygameAudioOutput."""

    @pytest.fixture
    def mock_pygame(self) -> MagicMock:
        """Create mock pygame module with an initialized mixer."""
        mock = MagicMock()
        mock.mixer.get_init.return_value = (44100, -16, 2)
        mock.mixer.get_num_channels.return_value = 3
        return mock

    def test_not_ready_before_mixer_init(self, mock_pygame: MagicMock) -> None:
        """Test gain is refused while pygame.mixer is not initialized."""
        mock_pygame.mixer.get_init.return_value = None
        output = PygameAudioOutput()

        with patch("mastervolume.audio.pygame_output.pygame", mock_pygame):
            assert not output.is_ready
            with pytest.raises(AudioNotReadyError):
                output.set_output_gain(0.5)

        mock_pygame.mixer.music.set_volume.assert_not_called()
        assert output.gain is None

    def test_sets_music_and_channels(self, mock_pygame: MagicMock) -> None:
        """Test gain reaches music and every channel."""
        output = PygameAudioOutput()

        with patch("mastervolume.audio.pygame_output.pygame", mock_pygame):
            output.set_output_gain(0.63)

        mock_pygame.mixer.music.set_volume.assert_called_once_with(0.63)
        assert mock_pygame.mixer.Channel.call_count == 3
        assert mock_pygame.mixer.Channel.return_value.set_volume.call_count == 3
        assert output.gain == 0.63

    def test_gain_above_one_plays_at_full(self, mock_pygame: MagicMock) -> None:
        """Test boosted gains are capped for pygame but remembered."""
        output = PygameAudioOutput()

        with patch("mastervolume.audio.pygame_output.pygame", mock_pygame):
            output.set_output_gain(1.4)

        mock_pygame.mixer.music.set_volume.assert_called_once_with(1.0)
        assert output.gain == 1.4
