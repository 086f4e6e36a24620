"""
Parsing of raw shell definition lines.

Two entry points:

    split_input    - separate alias definition lines from function headers
    parse_aliases  - turn ``name=expansion`` lines into Alias records
"""

from typing import Iterable, List, Tuple

from .types import Alias
from ..utils.logging import get_logger


logger = get_logger(__name__)

FUNCTION_SUFFIX = " () {"


def _strip_quotes(value: str) -> str:
    """Trim whitespace, then one leading and one trailing single quote."""
    value = value.strip()
    if value.startswith("'"):
        value = value[1:]
    if value.endswith("'"):
        value = value[:-1]
    return value


def parse_aliases(raw_aliases: Iterable[str]) -> List[Alias]:
    """
    Parse ``name=expansion`` lines into Alias records.

    Only the first ``=`` separates name from expansion. Surrounding
    whitespace and single quotes are removed from each side. Lines without
    ``=`` or with an empty side are skipped; order and duplicates are kept.

    Args:
        raw_aliases: Raw definition lines

    Returns:
        Alias records in input order
    """
    aliases = []
    for line in raw_aliases:
        name, sep, expanded = line.partition("=")
        if not sep:
            if line.strip():
                logger.debug(f"Skipping line without '=': {line!r}")
            continue

        name = _strip_quotes(name)
        expanded = _strip_quotes(expanded)
        if not name or not expanded:
            logger.debug(f"Skipping incomplete alias definition: {line!r}")
            continue

        aliases.append(Alias(name=name, expanded=expanded))

    return aliases


def split_input(lines: Iterable[str]) -> Tuple[List[str], List[str]]:
    """
    Split a shell dump into alias definition lines and function names.

    A line ending in `` () {`` opens a function definition; any other line
    containing ``=`` is an alias candidate. Everything else (function
    bodies, closing braces, blank lines) is ignored.

    Returns:
        Tuple of (alias_lines, function_names)
    """
    aliases = []
    functions = []

    for line in lines:
        line = line.strip()
        if line.endswith(FUNCTION_SUFFIX):
            functions.append(line[:-len(FUNCTION_SUFFIX)].strip())
        elif "=" in line:
            aliases.append(line)

    return aliases, functions
