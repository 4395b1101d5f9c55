"""Layered master volume composition.

Two independent levels feed the final output gain: the developer level, fixed
when the game is built, and the user level, adjusted in the options menu and
persisted between sessions. Both are percentages. When the user control is
inactive only the developer level counts.

    gain = (developer_level / 100) * (user_level / 100)   # user control active
    gain = developer_level / 100                          # otherwise

The host audio engine may still be initializing when the gain is first
applied, so ``VolumeComposer.apply`` keeps retrying on the scheduler until the
output accepts the value.

Typical usage example:
    from mastervolume.audio.volume_composer import VolumeComposer

    composer = VolumeComposer(output, scheduler, developer_level=70)
    composer.apply(composer.effective_gain(90, active=True))  # 0.63
"""


from mastervolume.core.host import AudioOutput, Scheduler
from mastervolume.core.logging_system import get_logger

logger = get_logger(__name__)

# Delay between attempts while the audio output is not ready (seconds)
RETRY_INTERVAL = 0.1


def compose_gain(developer_level: float, user_level: float, active: bool) -> float:
    """Combine developer and user levels into one output gain.

    Args:
        developer_level: Developer percentage, 0 to 100.
        user_level: User percentage, 0 to the configured maximum.
        active: Whether the user control is active.

    Returns:
        Effective gain, where 1.0 is the engine's nominal volume.

    Examples:
        >>> compose_gain(50, 50, True)
        0.25
        >>> compose_gain(70, 90, False)
        0.7
    """
    if active:
        return (developer_level / 100) * (user_level / 100)
    return developer_level / 100


class VolumeComposer:
    """Computes the effective gain and pushes it to the host audio output.

    Attributes:
        developer_level: Developer percentage, immutable after start-up.
        retry_interval: Seconds between attempts while the output is not ready.
        max_attempts: Attempt cap per apply, or None to retry without bound.
    """

    def __init__(
        self,
        output: AudioOutput,
        scheduler: Scheduler,
        developer_level: float,
        retry_interval: float = RETRY_INTERVAL,
        max_attempts: int | None = None,
    ) -> None:
        """Initialize the composer.

        Args:
            output: Host audio entry point.
            scheduler: Scheduler used to defer retries.
            developer_level: Developer percentage (0 to 100).
            retry_interval: Seconds between attempts.
            max_attempts: Attempt cap, None for unbounded retries.
        """
        self._output = output
        self._scheduler = scheduler
        self.developer_level = developer_level
        self.retry_interval = retry_interval
        self.max_attempts = max_attempts
        self.last_applied_gain: float | None = None
        self._pending = None

    def effective_gain(self, user_level: float, active: bool) -> float:
        """Compose the gain for the given user level.

        Args:
            user_level: User percentage.
            active: Whether the user control is active.

        Returns:
            Effective gain.
        """
        gain = compose_gain(self.developer_level, user_level, active)
        if active:
            logger.debug(
                "Applying volume calculation: Dev(%.2f) x User(%.2f) = %.2f",
                self.developer_level / 100,
                user_level / 100,
                gain,
            )
        return gain

    @property
    def pending(self) -> bool:
        """Whether a retry is still waiting for the audio output."""
        return self._pending is not None

    def apply(self, gain: float) -> None:
        """Send a gain to the audio output, retrying until it is ready.

        A newer apply replaces an older one that is still retrying. Failures
        are logged, never raised.

        Args:
            gain: Effective gain to apply.
        """
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
        self._attempt(gain, 1)

    def _attempt(self, gain: float, attempt: int) -> None:
        self._pending = None
        try:
            self._output.set_output_gain(gain)
        except Exception as e:
            if self.max_attempts is not None and attempt >= self.max_attempts:
                logger.warning(
                    "Audio output still unavailable after %d attempts, gain %.2f dropped: %s",
                    attempt,
                    gain,
                    e,
                )
                return
            logger.debug("Audio output not ready (attempt %d): %s, retrying...", attempt, e)
            self._pending = self._scheduler.call_later(
                self.retry_interval, lambda: self._attempt(gain, attempt + 1)
            )
            return

        self.last_applied_gain = gain
        logger.debug("Master volume applied: %.2f", gain)
