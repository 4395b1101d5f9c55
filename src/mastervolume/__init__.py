"""Layered master volume for games.

A developer-fixed volume applied on every start, optionally multiplied by a
user master volume that is adjustable in the options menu and persisted with
the game settings.
"""

from mastervolume.version import __version__

__all__ = ["__version__"]
