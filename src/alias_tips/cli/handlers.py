"""
CLI command handlers for Alias Tips.

Reads the shell dump, evaluates the command and prints the tip. The exit
status tells the zsh plugin what happened.
"""

import sys
from functools import partial
from typing import List, Optional, TextIO

from rich.console import Console
from rich.text import Text

from ..config import AliasTipsConfig, ConfigurationError, load_config
from ..core import TipOutcome, evaluate_command, get_git_aliases
from ..utils import get_logger, setup_logging


def handle_cli_command(args, stdin: Optional[TextIO] = None) -> int:
    """
    Handle the CLI invocation.

    Returns:
        int: Exit code, a TipOutcome value
    """
    try:
        config = load_config(args.config)
    except ConfigurationError as e:
        print(f"alias-tips: configuration error: {e}", file=sys.stderr)
        return int(TipOutcome.NO_TIP)

    setup_logging(config, verbose=args.verbose)
    logger = get_logger(__name__)

    try:
        apply_cli_overrides(config, args)
        shell_lines = read_shell_lines(stdin if stdin is not None else sys.stdin)

        sources = []
        if config.git.enabled:
            sources.append(partial(
                get_git_aliases,
                executable=config.git.executable,
                timeout=config.git.timeout_seconds,
            ))

        result = evaluate_command(args.command, shell_lines, config.tips, alias_sources=sources)

        if result.has_tip:
            print_tip(result.tip, config.tips.text, color=config.tips.color)
        return int(result.outcome)

    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=args.verbose)
        return int(TipOutcome.NO_TIP)


def apply_cli_overrides(config: AliasTipsConfig, args) -> None:
    """Apply command line flags on top of the loaded configuration."""
    if args.text is not None:
        config.tips.text = args.text
    if args.expand is not None:
        config.tips.expand = args.expand
    if args.force is not None:
        config.tips.force = args.force
    if args.exclude:
        config.tips.excludes = config.tips.excludes + args.exclude
    if args.no_git:
        config.git.enabled = False
    if args.no_color:
        config.tips.color = False


def read_shell_lines(stream: TextIO) -> List[str]:
    """Read the alias/function dump; an interactive terminal yields nothing."""
    if hasattr(stream, "isatty") and stream.isatty():
        return []
    return stream.read().splitlines()


def print_tip(tip: str, prefix: str, color: bool = True, file: Optional[TextIO] = None) -> None:
    """Print the tip line on stdout."""
    out = file or sys.stdout

    if not color:
        print(f"{prefix}{tip}", file=out)
        return

    console = Console(file=out, highlight=False, soft_wrap=True)
    console.print(Text.assemble((prefix, "blue"), (tip, "bright_blue")))
