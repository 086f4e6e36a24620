"""
Alias Tips core: alias parsing, matching and tip evaluation.
"""

from .types import Alias, TipOutcome, TipResult
from .parser import parse_aliases, split_input
from .matcher import find_alias, expand_input
from .git_aliases import get_git_aliases, parse_git_config_output
from .tips import collect_aliases, evaluate_command

__all__ = [
    "Alias",
    "TipOutcome",
    "TipResult",
    "parse_aliases",
    "split_input",
    "find_alias",
    "expand_input",
    "get_git_aliases",
    "parse_git_config_output",
    "collect_aliases",
    "evaluate_command",
]
