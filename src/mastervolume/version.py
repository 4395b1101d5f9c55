"""Version information for mastervolume.

This module provides version information read from the VERSION file
in the project root, with fallback for packaged distributions.
"""

from pathlib import Path

__version__ = "1.0.0"  # Fallback version
__license__ = "GPL-3.0-or-later"


def get_version() -> str:
    """Get the current version string.

    Reads from VERSION file in project root or falls back to __version__.

    Returns:
        Version string (e.g., "1.0.0").
    """
    version_path = Path(__file__).parent.parent.parent / "VERSION"  # src/mastervolume -> root
    if version_path.exists():
        try:
            return version_path.read_text(encoding="utf-8").strip()
        except OSError:
            pass

    return __version__
