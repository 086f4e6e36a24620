"""
Core types for alias tip detection.

The alias record is the only entity the matcher works with; outcomes are
encoded as exit statuses understood by the shell plugin.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


@dataclass(frozen=True)
class Alias:
    """A short name standing in for a longer literal command."""
    name: str
    expanded: str


class TipOutcome(IntEnum):
    """Result of checking a command, doubling as the process exit status."""
    TIP_SHOWN = 0
    NO_TIP = 1
    FORCED = 10


@dataclass
class TipResult:
    """Outcome of evaluating a single command line."""
    outcome: TipOutcome
    command: str
    tip: Optional[str] = None
    aliases: int = 0

    @property
    def has_tip(self) -> bool:
        return self.tip is not None
