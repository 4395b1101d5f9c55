"""Audio output backed by pygame.mixer.

pygame has no global volume, so the gain is pushed to the music stream and
to every mixer channel. pygame clamps volumes to 1.0; gains above that are
kept in ``gain`` but play at full volume.

Typical usage:
    output = PygameAudioOutput()
    output.set_output_gain(0.63)  # raises AudioNotReadyError before mixer init
"""


import pygame

from mastervolume.core.errors import AudioNotReadyError
from mastervolume.core.logging_system import get_logger

logger = get_logger(__name__)


class PygameAudioOutput:
    """Host audio entry point for pygame games.

    Attributes:
        gain: Last gain accepted, or None before the first success.
    """

    def __init__(self) -> None:
        """Initialize without touching the mixer."""
        self.gain: float | None = None

    @property
    def is_ready(self) -> bool:
        """Whether pygame.mixer has been initialized."""
        return pygame.mixer.get_init() is not None

    def set_output_gain(self, gain: float) -> None:
        """Apply a gain to music and all mixer channels.

        Args:
            gain: Effective gain (1.0 is nominal volume).

        Raises:
            AudioNotReadyError: If pygame.mixer is not initialized yet.
        """
        if not self.is_ready:
            raise AudioNotReadyError("pygame.mixer is not initialized")

        volume = max(0.0, min(1.0, gain))
        if gain > 1.0:
            logger.debug("Gain %.2f exceeds pygame's maximum, playing at 1.0", gain)

        pygame.mixer.music.set_volume(volume)
        for index in range(pygame.mixer.get_num_channels()):
            pygame.mixer.Channel(index).set_volume(volume)

        self.gain = gain
