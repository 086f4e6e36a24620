"""
Alias matching and expansion.

find_alias rewrites a command into its shortest alias form by repeatedly
substituting the longest matching expansion. expand_input performs the
reverse, single-step substitution of a leading alias name.
"""

from typing import List, Sequence, Set

from .types import Alias
from ..utils.logging import get_logger


logger = get_logger(__name__)


def _matches_prefix(command: str, prefix: str) -> bool:
    """True if prefix is a whole-token prefix of command."""
    return command == prefix or command.startswith(prefix + " ")


def find_alias(aliases: Sequence[Alias], command: str) -> str:
    """
    Find the shortest alias representation of a command.

    Aliases are tried longest expansion first (stable, so ties keep their
    extraction order). Each pass tests every alias against the current
    string; passes repeat until nothing changes.

    Args:
        aliases: Known alias records
        command: Literal command line

    Returns:
        The rewritten command, or the original when no alias applies
    """
    ordered: List[Alias] = sorted(aliases, key=lambda a: len(a.expanded), reverse=True)

    result = command
    seen: Set[str] = {result}

    # A lengthening alias can keep matching its own output; cap the passes.
    max_passes = len(ordered) + 1
    for _ in range(max_passes):
        previous = result
        for alias in ordered:
            if _matches_prefix(result, alias.expanded):
                result = alias.name + result[len(alias.expanded):]
                logger.debug(f"Substituted {alias.expanded!r} -> {alias.name!r}: {result!r}")

        if result == previous:
            break
        if result in seen:
            logger.debug(f"Rewrite cycle detected at {result!r}, stopping")
            break
        seen.add(result)
    else:
        logger.debug(f"Stopped rewriting after {max_passes} passes at {result!r}")

    return result


def expand_input(command: str, aliases: Sequence[Alias]) -> str:
    """
    Expand a leading alias name into its full command.

    Only aliases whose expansion is longer than their name qualify; the
    longest expansion wins and, on equal length, the first alias in
    extraction order is kept. A single substitution is performed.
    """
    best = None

    for alias in aliases:
        if (
            command.startswith(alias.name + " ")
            and len(alias.expanded) > len(alias.name)
            and (best is None or len(alias.expanded) > len(best.expanded))
        ):
            best = alias

    if best is None:
        return command

    logger.debug(f"Expanded {best.name!r} -> {best.expanded!r}")
    return command.replace(best.name, best.expanded, 1)
