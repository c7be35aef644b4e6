"""Application entry point."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from chessgame.ui.settings import AppSettings, default_save_path


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Two-player chess on one screen")
    parser.add_argument(
        "--save-file",
        type=Path,
        default=default_save_path(),
        help="Where the Save button writes the game (default: %(default)s)",
    )
    parser.add_argument(
        "--no-load",
        action="store_true",
        help="Start from the initial position even if a save file exists",
    )
    parser.add_argument(
        "--theme", choices=("Classic", "Green"), default="Classic", help="Board colours"
    )
    parser.add_argument(
        "--log-level", default="WARNING", help="Logging level (default: %(default)s)"
    )
    return parser.parse_args(argv)


def settings_from_args(args: argparse.Namespace) -> AppSettings:
    return AppSettings(
        save_path=args.save_file,
        load_on_start=not args.no_load,
        board_theme=args.theme,
    )


def main() -> None:
    """Launch the chess application."""
    from chessgame.ui.bootstrap import configure_logging, run_application

    args = parse_args(sys.argv[1:])
    configure_logging(args.log_level)
    sys.exit(run_application(sys.argv[:1], settings_from_args(args)))


if __name__ == "__main__":
    main()
