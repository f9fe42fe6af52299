"""Command line entry point of the extraction/sync tool.

Usage:
    trcatalog-sync --name app --dir src --locales de_AT,de,fr
    python -m trcatalog --name app --dir src --locales de --output-dir translations

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from trcatalog.constants import DEFAULT_MARKER
from trcatalog.diagnostics import TrCatalogError
from trcatalog.sync import SyncConfig, run_sync

if TYPE_CHECKING:
    from collections.abc import Sequence

__all__ = ["build_parser", "main"]

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for trcatalog-sync."""
    parser = argparse.ArgumentParser(
        prog="trcatalog-sync",
        description=(
            "Extract tr() call sites from a Python source tree and create or update "
            "one <name>-<locale>.tr catalog per locale, keeping existing translations."
        ),
    )
    parser.add_argument(
        "--name",
        required=True,
        help="The base name to use for catalog files",
    )
    parser.add_argument(
        "--dir",
        required=True,
        type=Path,
        help="The directory to recursively search for Python files",
    )
    parser.add_argument(
        "--locales",
        required=True,
        help='Comma-separated list of locales to create or update catalogs for, e.g. "de_AT,de,fr"',
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path(),
        help="Directory catalog files are written to (default: current directory)",
    )
    parser.add_argument(
        "--marker",
        default=DEFAULT_MARKER,
        help=f"Name of the translation marker function (default: {DEFAULT_MARKER})",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every scanned source file",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the sync tool.

    Returns:
        Process exit status: 0 on success, 1 if the run failed. Usage
        errors exit with status 2 through argparse.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = SyncConfig.from_locale_list(
            args.name,
            args.dir,
            args.locales,
            output_directory=args.output_dir,
            marker=args.marker,
        )
        summary = run_sync(config)
    except (TrCatalogError, OSError) as e:
        logger.error("Sync failed: %s", e)
        return 1

    logger.info(
        "Synced %d messages into %d catalog(s)",
        summary.messages,
        len(summary.results),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
