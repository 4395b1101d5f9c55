"""Audio side of the master volume: gain composition and host outputs."""

from mastervolume.audio.volume_composer import RETRY_INTERVAL, VolumeComposer, compose_gain

__all__ = ["RETRY_INTERVAL", "VolumeComposer", "compose_gain"]
