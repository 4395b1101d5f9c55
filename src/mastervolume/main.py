"""Command line report of a master volume configuration.

Resolves a configuration file the same way the game does at start-up and
prints what players will get: whether the user control is offered, the
presets reachable with the confirm key and the effective output gain.

Typical usage:
    python -m mastervolume.main --config config/master_volume.yaml
    python -m mastervolume.main --config config/master_volume.yaml --user-level 115
    python -m mastervolume.main --extension YEP_OptionsCore
"""

import argparse
import sys
from pathlib import Path

from mastervolume.audio.volume_composer import compose_gain
from mastervolume.core.compatibility import CompatibilityGate, detect_conflicting_extension
from mastervolume.core.logging_system import initialize_logging
from mastervolume.settings.plugin_settings import coerce_number, load_settings
from mastervolume.ui.menus.master_volume_options import preset_ladder
from mastervolume.version import get_version


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="mastervolume",
        description="Show the effective master volume for a configuration",
    )
    parser.add_argument("--config", type=Path, help="Path to master volume YAML file")
    parser.add_argument(
        "--extension",
        action="append",
        default=[],
        metavar="NAME",
        help="Name of another loaded extension (repeatable)",
    )
    parser.add_argument(
        "--user-level",
        help="User master volume to evaluate instead of the configured default",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {get_version()}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Args:
        argv: Arguments, defaults to sys.argv[1:].

    Returns:
        Process exit code.
    """
    args = build_parser().parse_args(argv)
    initialize_logging(debug=args.debug)

    settings = load_settings(args.config)
    gate = CompatibilityGate(
        settings.show_user_volume, detect_conflicting_extension(args.extension)
    )

    user_level = settings.user_master_volume
    if args.user_level is not None:
        try:
            user_level = coerce_number(args.user_level)
        except ValueError as e:
            print(f"error: {e}", file=sys.stderr)
            return 2
        user_level = max(0, min(settings.user_volume_max, user_level))

    print(f"mastervolume {get_version()}")
    for key, value in settings.to_dict().items():
        print(f"  {key}: {value}")
    print(f"User control: {'active' if gate.active else 'inactive'}")
    if gate.active:
        presets = preset_ladder(settings.click_step, settings.user_volume_max)
        print(f"User level: {user_level}%")
        print(f"Presets: {', '.join(f'{p}%' for p in presets)}")

    gain = compose_gain(settings.dev_master_volume, user_level, gate.active)
    print(f"Effective gain: {gain:.3f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
