"""Exceptions raised by the master volume subsystem."""


class MasterVolumeError(Exception):
    """Base class for master volume errors."""


class AudioNotReadyError(MasterVolumeError):
    """The host audio output has not finished initializing.

    Raised by audio outputs when ``set_output_gain`` is called too early.
    The volume composer treats it as a reason to retry, never as a failure.
    """
