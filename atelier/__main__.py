"""
Entry point: python -m atelier [room_config] [--verbose]
"""

import argparse
import sys

from atelier.core.debug.debug_logger import DebugLogger
from atelier.core.errors import ConfigurationError
from atelier.core.runtime.game_settings import Room
from atelier.core.runtime.main_loop import MainLoop


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="zen-atelier", description="Decorate a room, one mini-activity at a time")
    parser.add_argument("config", nargs="?", default=Room.CONFIG_FILE,
                        help="Room layout file (.yaml, .json or .py)")
    parser.add_argument("--verbose", action="store_true",
                        help="Trace-level logging for every category")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        DebugLogger.configure(
            level="VERBOSE",
            categories={"loading": True, "input": True, "loop": True, "event_manager": True},
        )

    try:
        loop = MainLoop(args.config)
    except ConfigurationError as e:
        DebugLogger.fail(f"Room configuration invalid: {e}")
        return 1

    loop.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
