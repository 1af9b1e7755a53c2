"""Command-line argument parsing for dircombine.

This module defines the command-line interface for dircombine,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path
from typing import Optional

from dircombine import __version__
from dircombine.types import IgnoreSet


def parse_ignore_patterns(value: Optional[str]) -> IgnoreSet:
    """Split a comma-separated ignore value into substring patterns.

    Every fragment is kept, including empty ones and surrounding whitespace. An
    empty fragment is a substring of every path, so ``"sub,"`` ignores everything.

    Example:
        >>> parse_ignore_patterns("target,.git,node_modules")
        ('target', '.git', 'node_modules')
        >>> parse_ignore_patterns("a,,b")
        ('a', '', 'b')
        >>> parse_ignore_patterns(None)
        ()
    """
    if value is None:
        return ()
    return tuple(value.split(","))


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with dircombine's options.
    """
    description = """
    dircombine: Combines text files from a directory into a single output file.

    The output starts with a tree diagram of the directory structure, followed by
    the full contents of every file, each headed by its path relative to the input
    directory. Entries can be excluded by substring (--ignore) or with
    gitignore-style rules files (--exclude); excluded entries are left out of both
    the diagram and the contents.
    """

    epilog = """
    Examples:
      # Combine a project into one file
      dircombine -i ./project -o combined.txt

      # Skip build output and version control metadata
      dircombine -i ./project -o out/combined.txt -x target,.git,node_modules

      # Also apply the project's .gitignore
      dircombine -i ./project -o combined.txt -e ./project/.gitignore

      # Display version information and exit
      dircombine --version
    """

    parser = argparse.ArgumentParser(
        prog="dircombine",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"dircombine {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "-i",
        "--input",
        type=str,
        required=True,
        metavar="PATH",
        help=(
            "Root directory to process. Paths in the contents section are relative to it. "
            "It is used exactly as typed when matching --ignore patterns."
        ),
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        required=True,
        metavar="PATH",
        help="Destination file. Missing parent directories are created.",
    )
    parser.add_argument(
        "-x",
        "--ignore",
        type=parse_ignore_patterns,
        default=(),
        metavar="PATTERNS",
        help=(
            "Comma-separated substrings. Any file or directory whose path contains one of them "
            "is left out of both the tree and the contents."
        ),
    )
    parser.add_argument(
        "-e",
        "--exclude",
        type=Path,
        action="append",
        default=[],
        metavar="FILE",
        help=(
            "Gitignore-style rules file, matched against paths relative to the input directory "
            "(can be specified multiple times)."
        ),
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.output.is_dir():
        raise ValueError(f"Output path is a directory: {args.output}")
