"""
ccparse.cli - Command-line interface.

Main entry point for the ccparse CLI tool.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from ccparse import __version__
from ccparse.commands import parse_cmd
from ccparse.serialize import FIELD_CASES


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="ccparse",
        description="Parse a Conventional Commits message into JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ccparse .git/COMMIT_EDITMSG            # Parse a message file
  git log -1 --format=%B | ccparse -     # Parse from stdin
  ccparse --field-case snake --indent 2 msg.txt

Configuration:
  Options may also be set in .ccparse.toml (searched upward from the
  current directory):

    [output]
    field_case = "snake"
    indent = 2
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"ccparse {__version__}",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to configuration file",
        metavar="PATH",
    )
    parser.add_argument(
        "--field-case",
        choices=list(FIELD_CASES),
        help="JSON field naming: pascal (Header/Type) or snake (header/type)",
    )
    parser.add_argument(
        "--indent",
        type=int,
        help="Indent JSON output by N spaces (0 = compact)",
        metavar="N",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show a traceback on errors",
    )
    parser.add_argument(
        "message_file",
        help="Commit message file, or - for stdin",
        metavar="MESSAGE_FILE",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = create_parser()

    # Enable shell tab-completion if argcomplete is installed
    # Install with: pip install ccparse[completion]
    try:
        import argcomplete

        argcomplete.autocomplete(parser)
    except ImportError:
        pass

    args = parser.parse_args(argv)

    try:
        return parse_cmd.run(args)
    except KeyboardInterrupt:
        print("\nOperation cancelled.", file=sys.stderr)
        return 130
    except Exception as e:
        if args.verbose:
            raise
        print(f"Error: {e}", file=sys.stderr)
        return 1
