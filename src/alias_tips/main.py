"""
Main entry point for the Alias Tips CLI application.

Called from the installed ``alias-tips`` console script or with
``python -m alias_tips.main``.
"""

import sys

from .cli import parse_args, handle_cli_command


def main(argv=None) -> int:
    """Main entry point for Alias Tips."""
    args = parse_args(argv)
    try:
        return handle_cli_command(args)
    except KeyboardInterrupt:
        return 1


if __name__ == "__main__":
    sys.exit(main())
