"""
Git alias registry.

Git aliases are read from ``git config --get-regexp`` and normalized into
the same ``name=expansion`` line shape the shell dump uses, so that
parse_aliases stays the single parsing entry point.
"""

import re
import subprocess
from typing import List

from ..utils.error_handling import handle_external_tool
from ..utils.logging import get_logger


logger = get_logger(__name__)

GIT_ALIAS_PATTERN = re.compile(r"^alias\.(\S+) (.+)$")
SHELL_ESCAPE = "!"


def parse_git_config_output(output: str) -> List[str]:
    """
    Convert ``alias.<key> <value>`` lines into raw alias lines.

    ``alias.st status -sb`` becomes ``git st=status -sb``. Values starting
    with ``!`` run through the shell; every leading marker is stripped, so
    ``alias.up !git fetch && git rebase`` becomes
    ``git up=git fetch && git rebase``.
    """
    lines = []
    for line in output.splitlines():
        match = GIT_ALIAS_PATTERN.match(line)
        if not match:
            if line.strip():
                logger.debug(f"Skipping unrecognized git config line: {line!r}")
            continue

        key, value = match.groups()
        lines.append(f"git {key}={value.lstrip(SHELL_ESCAPE)}")

    return lines


@handle_external_tool("git_aliases")
def get_git_aliases(executable: str = "git", timeout: float = 5.0) -> List[str]:
    """
    Fetch git aliases as raw ``name=expansion`` lines.

    Raises:
        ExternalToolError: If git cannot be run or its output is not UTF-8
    """
    completed = subprocess.run(
        [executable, "config", "--get-regexp", r"^alias\."],
        capture_output=True,
        timeout=timeout,
        check=False,
    )
    # git exits with status 1 when no key matches
    if completed.returncode != 0:
        logger.debug(f"git config exited with status {completed.returncode}")
        return []

    return parse_git_config_output(completed.stdout.decode("utf-8"))
