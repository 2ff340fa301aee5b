#!/usr/bin/env python3
# --- START OF FILE src/main.py ---
import sys
import argparse
from typing import Optional, Sequence

from config_manager import ConfigError, load_config
from debug_logging import log, set_debug_mode
from navigation import NavigationEngine
from theme import Theme
from tui_app import ZfNavApp
from version import __app_description__, __app_name__, __version__
from zfs_inventory import ZfsError, load_local_box


def _show_startup_error(title, message):
    print(f"STARTUP ERROR: {title}\n{message}", file=sys.stderr)


def build_arg_parser() -> argparse.ArgumentParser:
    class RawDefaultsHelpFormatter(argparse.ArgumentDefaultsHelpFormatter, argparse.RawDescriptionHelpFormatter):
        pass

    parser = argparse.ArgumentParser(
        prog="zfnav",
        description=f"{__app_name__}: {__app_description__}",
        formatter_class=RawDefaultsHelpFormatter,
        epilog=(
            "Keys:\n"
            "  h/left  back     l/right/enter  open\n"
            "  k/up    up       j/down         down\n"
            "  q       quit\n\n"
            "Colours are read from --config, else ./config.toml, else ~/.config/ZfNav/config.toml."
        ),
    )
    parser.add_argument('-c', '--config', metavar='PATH', default=None,
                        help='Colour configuration file (TOML)')
    parser.add_argument('--debug', action='store_true',
                        help='Print executed commands and other debug output while loading')
    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    set_debug_mode(args.debug)

    try:
        colors = load_config(args.config)
    except ConfigError as e:
        _show_startup_error("Configuration", str(e))
        return 1

    try:
        box = load_local_box()
    except ZfsError as e:
        _show_startup_error("Failed to load ZFS inventory", str(e))
        return 1

    log("MAIN", f"Starting browser with {len(box.pools)} pool(s)", "DEBUG")

    ZfNavApp(NavigationEngine([box]), Theme.from_config(colors)).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
