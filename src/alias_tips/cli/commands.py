"""
Command-line argument parser for Alias Tips.
"""

import argparse

from .. import __version__


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="alias-tips",
        description="Suggest a shorter alias for the command about to run",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
The shell's aliases and functions are read from standard input, one
definition per line, e.g.:

  { alias; functions } | alias-tips "git status"

Exit status:
  0   a tip was printed
  1   no tip (or the command is a shell function)
  10  a tip was printed and force mode is on
        """
    )

    parser.add_argument(
        "command",
        help="Command to check for aliases"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"Alias Tips {__version__}"
    )

    parser.add_argument(
        "--config",
        type=str,
        metavar="PATH",
        help="Path to configuration file"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging on stderr"
    )

    parser.add_argument(
        "--text",
        type=str,
        metavar="TEXT",
        help="Text printed before the tip"
    )

    expand_group = parser.add_mutually_exclusive_group()
    expand_group.add_argument(
        "--expand",
        dest="expand",
        action="store_true",
        default=None,
        help="Expand a leading alias before matching"
    )
    expand_group.add_argument(
        "--no-expand",
        dest="expand",
        action="store_false",
        help="Match the command exactly as typed"
    )

    parser.add_argument(
        "--exclude",
        action="append",
        metavar="NAME",
        default=[],
        help="Never suggest this alias (repeatable)"
    )

    parser.add_argument(
        "--force",
        action="store_true",
        default=None,
        help="Exit with status 10 when a tip is found"
    )

    parser.add_argument(
        "--no-git",
        action="store_true",
        help="Do not read git aliases"
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Print the tip without colors"
    )

    return parser


def parse_args(args=None):
    """Parse command line arguments."""
    parser = create_parser()
    return parser.parse_args(args)
