"""Command-line front door for lazyexplorer.

Flags only affect presentation; the explorer always starts in the working
directory. CLI values override the config file.
"""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version

from .app import run_explorer
from .config import load_config
from .logging_setup import setup_logging
from .ui_theme import available_theme_names, resolve_theme


def _package_version() -> str:
    try:
        return version("lazyexplorer")
    except PackageNotFoundError:
        return "unknown"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazyexplorer",
        description="Browse the current directory in a terminal table with a file preview pane.",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--style", default=None, help="Pygments style name for text previews.")
    parser.add_argument("--no-color", action="store_true", help="Disable colors and syntax highlighting.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments, configure logging, and run the explorer."""
    args = build_parser().parse_args(argv)
    config = load_config()
    setup_logging(level=config.log_level)

    no_color = args.no_color or config.no_color
    run_explorer(
        theme=resolve_theme(args.theme or config.theme, no_color=no_color),
        style=args.style or config.style,
        no_color=no_color,
        left_pane_percent=config.left_pane_percent,
    )


if __name__ == "__main__":
    main()
