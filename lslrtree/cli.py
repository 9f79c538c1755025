"""Command-line entry point for lslrtree.

    lslrtree LISTING                 # interactive session on stdin
    lslrtree LISTING -c 'dfs -name "*.txt"' -c 'bfs -type d'
"""

import argparse
import io
import logging
import sys
from typing import List, Optional

from . import __version__
from .config import ListingConfig, ShellConfig
from .errors import LsLRError
from .shell import Shell

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    """Construct the argument parser for the lslrtree CLI."""
    parser = argparse.ArgumentParser(
        prog="lslrtree",
        description="Browse and search a saved 'ls -lR' listing with pwd/cd/ls and find-style dfs/bfs queries.",
    )
    parser.add_argument("listing", help="file containing ls -lR output")
    parser.add_argument(
        "--encoding",
        default="utf-8",
        help="encoding of the listing file (default: %(default)s)",
    )
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="skip blocks for directories that were never listed instead of failing",
    )
    parser.add_argument(
        "-c", "--command",
        dest="commands",
        action="append",
        metavar="COMMAND",
        help="run COMMAND instead of reading commands from stdin (repeatable)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="log progress to stderr (-v info, -vv debug)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(verbosity: int) -> None:
    """Route log records to stderr at a level chosen by -v."""
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbosity, logging.DEBUG)
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI.

    Returns:
        Process exit code: 0 on success, 1 if the listing cannot be loaded
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    listing_config = ListingConfig(encoding=args.encoding, strict=not args.lenient)
    if args.commands:
        stdin = io.StringIO("".join(command + "\n" for command in args.commands))
        config = ShellConfig(interactive=False, listing=listing_config)
    else:
        stdin = sys.stdin
        config = ShellConfig(listing=listing_config)

    try:
        shell = Shell.from_file(args.listing, config=config, stdin=stdin)
    except (OSError, LsLRError, ValueError) as e:
        logger.debug("Failed to load %s", args.listing, exc_info=True)
        print(f"lslrtree: {args.listing}: {e}", file=sys.stderr)
        return 1

    shell.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
