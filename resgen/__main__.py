"""Entry point: python -m resgen [path/to/Module/resources/File.resx]

With a path, generates the accessor class for that single file.
Without one, scans every sibling directory of the current one for
resources/*.resx and writes each class to the module's gen/ folder.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .discovery import DEFAULT_PATTERN, DEFAULT_ROOT, find_targets, run, single_file_target
from .loader import ResGenError
from .log import configure_logging

logger = logging.getLogger("resgen")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resgen",
        description="Generate strongly-typed C# accessor classes from .resx files.",
    )
    parser.add_argument(
        "path", nargs="?", type=Path,
        help="Single .resx file to process (Module/resources/File.resx)",
    )
    parser.add_argument(
        "--root", type=Path, default=DEFAULT_ROOT,
        help="Directory whose subdirectories are scanned as modules (default: ..)",
    )
    parser.add_argument(
        "--pattern", default=DEFAULT_PATTERN,
        help="Glob for resource files inside resources/ (default: *.resx)",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log warnings and errors")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        configure_logging(logging.DEBUG)
    elif args.quiet:
        configure_logging(logging.WARNING)
    else:
        configure_logging()

    try:
        if args.path is not None:
            targets = [single_file_target(args.path)]
        else:
            targets = find_targets(args.root, args.pattern)
        written = run(targets)
    except (ResGenError, OSError) as exc:
        logger.error("resgen failed: %s", exc)
        return 1

    logger.info("Generated %d file(s)", len(written))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
