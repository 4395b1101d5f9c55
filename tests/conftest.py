"""Shared fixtures for mastervolume tests."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from mastervolume.audio.pygame_output import PygameAudioOutput
from mastervolume.audio.volume_composer import VolumeComposer
from mastervolume.core.scheduler import DeferredScheduler
from mastervolume.settings.config_manager import ConfigManager


@pytest.fixture
def audio_output() -> MagicMock:
    """Create a ready mock audio output."""
    return MagicMock(spec=PygameAudioOutput)


@pytest.fixture
def scheduler() -> DeferredScheduler:
    """Create a scheduler at time zero."""
    return DeferredScheduler()


@pytest.fixture
def composer(audio_output: MagicMock, scheduler: DeferredScheduler) -> VolumeComposer:
    """Create a composer with developer level 70."""
    return VolumeComposer(audio_output, scheduler, developer_level=70)


@pytest.fixture
def config_manager(tmp_path: Path) -> ConfigManager:
    """Create a settings manager writing to a temporary file."""
    return ConfigManager(path=tmp_path / "config.json")
