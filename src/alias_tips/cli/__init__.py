"""
CLI module for Alias Tips.

Argument parsing lives in commands, the command implementation in handlers.
"""

from .commands import create_parser, parse_args
from .handlers import handle_cli_command

__all__ = ["create_parser", "parse_args", "handle_cli_command"]
