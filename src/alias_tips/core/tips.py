"""
Tip evaluation for a single command line.

Ties the parser, the git alias registry and the matcher together and decides
whether a tip should be shown.
"""

from typing import Callable, Iterable, List, Sequence

from .matcher import expand_input, find_alias
from .parser import parse_aliases, split_input
from .types import Alias, TipOutcome, TipResult
from ..config.models import TipsConfig
from ..utils.error_handling import ExternalToolError
from ..utils.logging import get_logger, log_performance


logger = get_logger(__name__)

AliasSource = Callable[[], List[str]]


def collect_aliases(
    alias_lines: Sequence[str],
    alias_sources: Iterable[AliasSource] = (),
    excludes: Iterable[str] = (),
) -> List[Alias]:
    """
    Gather alias records from shell lines and additional line sources.

    A source failing with ExternalToolError contributes no aliases.
    Records whose name is excluded are dropped.
    """
    lines = list(alias_lines)
    for source in alias_sources:
        try:
            lines.extend(source())
        except ExternalToolError as e:
            logger.debug(f"Ignoring alias source failure: {e.message}")

    excluded = set(excludes)
    return [alias for alias in parse_aliases(lines) if alias.name not in excluded]


def evaluate_command(
    command: str,
    shell_lines: Iterable[str],
    config: TipsConfig,
    alias_sources: Iterable[AliasSource] = (),
) -> TipResult:
    """
    Decide whether a shorter alias form exists for a command.

    Args:
        command: The command line about to be run
        shell_lines: The shell's alias and function dump
        config: Tip settings (expand, excludes, force)
        alias_sources: Extra line producers such as the git alias registry

    Returns:
        TipResult describing the outcome
    """
    with log_performance(f"evaluating {command!r}"):
        alias_lines, functions = split_input(shell_lines)

        if command in functions:
            logger.debug(f"{command!r} is a shell function, no tip")
            return TipResult(outcome=TipOutcome.NO_TIP, command=command)

        aliases = collect_aliases(alias_lines, alias_sources, config.excludes)
        logger.debug(f"Loaded {len(aliases)} aliases")

        candidate = expand_input(command, aliases) if config.expand else command
        tip = find_alias(aliases, candidate)

        if len(tip) < len(candidate) and tip != candidate:
            outcome = TipOutcome.FORCED if config.force else TipOutcome.TIP_SHOWN
            return TipResult(outcome=outcome, command=candidate, tip=tip, aliases=len(aliases))

        return TipResult(outcome=TipOutcome.NO_TIP, command=candidate, aliases=len(aliases))
