"""
Command-line entry point.

Usage:
    python -m gauntlet --seed 7 --delay 0 --no-sound
"""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from rpg_engine.config import GameConfig
from rpg_engine.logging_setup import configure_logging
from gauntlet.game import GameApp
from gauntlet.rules import DEFAULT_SAVE_FILE


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gauntlet",
        description="Turn-based console RPG: defeat every mage in the gauntlet.",
    )
    parser.add_argument("--save-file", default=DEFAULT_SAVE_FILE, help="Save file path")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible battles")
    parser.add_argument("--delay", type=float, default=1.0, help="Seconds to pause between actions")
    parser.add_argument("--no-sound", action="store_true", help="Disable the audio mixer")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Diagnostic log level",
    )
    parser.add_argument("--log-file", default=None, help="Write diagnostics to this file")
    return parser


def config_from_args(args: argparse.Namespace) -> GameConfig:
    return GameConfig(
        save_path=args.save_file,
        seed=args.seed,
        action_delay=args.delay,
        sound_enabled=not args.no_sound,
        log_level=args.log_level,
        log_file=args.log_file,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = config_from_args(args)
    configure_logging(config.log_level, config.log_file)

    GameApp(config).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
