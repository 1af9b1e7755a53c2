"""Command-line interface for dircombine.

This module provides the command-line entry point. It parses arguments, runs the
combination and is the one place where errors are turned into messages and exit
codes. Library code below it only raises.

Exit Codes:
    0: Successful completion
    1: Configuration or runtime error (missing input directory, undecodable file, I/O failure)
    2: Command-line syntax error
    126: Permission denied

Example:
    $ dircombine -i ./project -o combined.txt -x target,.git
    Successfully combined files into: combined.txt
"""

import sys

from dircombine.cli.argparser import create_parser, validate_args
from dircombine.dircombine import combine_directory
from dircombine.exceptions import ConfigurationError


def main() -> None:
    """Main entry point for the dircombine command-line interface.

    Exit codes:
        0: Successful completion
        1: Configuration or runtime error
        2: Command-line syntax error
        126: Permission denied
    """
    # argparse exits with status 2 on syntax errors and 0 for --version
    parser = create_parser()
    args = parser.parse_args()

    try:
        validate_args(args)
        combine_directory(args.input, args.output, ignore=args.ignore, exclude_files=args.exclude)
    except ConfigurationError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)
    except PermissionError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(126)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    print(f"Successfully combined files into: {args.output}")


if __name__ == "__main__":
    main()
