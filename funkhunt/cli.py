"""Command-line front door for funkhunt.

Parses CLI options, configures logging, and scans the requested folders.
Then either prints the catalogue or dispatches into the interactive runtime.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .catalogue import CatalogueEntry, scan_locations
from .config import (
    LOG_LEVEL_NAMES,
    load_browser_start,
    load_extensions,
    load_log_level,
    load_theme_name,
    save_theme_name,
)
from .logs import configure_logging
from .render.help import CLI_EPILOG
from .runtime import run_app
from .ui_theme import available_theme_names, normalize_theme_name

logger = logging.getLogger(__name__)


def _log_level(value: str) -> str:
    """argparse type for case-insensitive log level names."""
    upper = value.strip().upper()
    if upper not in LOG_LEVEL_NAMES:
        raise argparse.ArgumentTypeError(
            f"invalid log level: {value!r} (choose from {', '.join(LOG_LEVEL_NAMES)})"
        )
    return upper


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="funkhunt",
        description="Browse a library of EPUB books in the terminal.",
        epilog=CLI_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("paths", nargs="*", metavar="PATH", help="Folders to scan for books.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--list", action="store_true", help="Print the scanned catalogue and exit.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}); remembered for later runs.",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument(
        "--log-level",
        type=_log_level,
        default=None,
        help=f"Diagnostic log level ({', '.join(LOG_LEVEL_NAMES)}).",
    )
    return parser


def format_catalogue(catalogue: list[CatalogueEntry]) -> str:
    """Render the catalogue as ``name<TAB>path`` lines for ``--list``."""
    return "".join(f"{entry.display_name}\t{entry.location}\n" for entry in catalogue)


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and launch funkhunt.

    Positional folders are scanned before the interface starts and recorded
    as the session's scanned locations even when they hold no books.
    """
    args = build_parser().parse_args(argv)

    configure_logging(args.log_level or load_log_level())
    extensions = load_extensions()
    locations = [Path(path).expanduser() for path in args.paths]
    for location in locations:
        if not location.is_dir():
            logger.warning("not a folder, nothing scanned: %s", location)
    catalogue = scan_locations(locations, extensions)

    if args.list:
        sys.stdout.write(format_catalogue(catalogue))
        return

    if args.theme is not None:
        theme_name = normalize_theme_name(args.theme)
        save_theme_name(theme_name)
    else:
        theme_name = load_theme_name()

    run_app(
        catalogue,
        [str(location) for location in locations],
        theme_name=theme_name,
        no_color=args.no_color,
        extensions=extensions,
        browser_start=load_browser_start(),
    )


if __name__ == "__main__":
    main()
