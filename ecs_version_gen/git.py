"""
Git repository inspection.

Determines the working-tree cleanliness and the short commit hash by shelling
out to git. Every failure here is recoverable: the generator must still work
from a source tarball with no git metadata, so errors turn into safe defaults
instead of propagating.
"""

import subprocess
from dataclasses import dataclass
from typing import List, Optional

from loguru import logger

UNKNOWN_HASH = 'UNKNOWN'

GIT_STATUS_CMD = ['git', 'status', '--porcelain']
GIT_SHORT_HASH_CMD = ['git', 'rev-parse', '--short', 'HEAD']


@dataclass
class CommandResult:
    """Exit status and captured standard output of a finished command."""
    returncode: int
    stdout: str


class CommandRunner:
    """
    Capability for running external commands.

    Implementations return a CommandResult and may raise OSError or
    subprocess.SubprocessError when the command cannot be started.
    """

    def run(self, args: List[str]) -> CommandResult:
        raise NotImplementedError


class SubprocessRunner(CommandRunner):
    """Run commands with subprocess, blocking until they exit."""

    def __init__(self, cwd: Optional[str] = None):
        self.cwd = cwd

    def run(self, args: List[str]) -> CommandResult:
        result = subprocess.run(
            args,
            cwd=self.cwd,
            capture_output=True,
            text=True,
            encoding='utf-8',
            errors='replace',
        )
        return CommandResult(returncode=result.returncode, stdout=result.stdout or '')


def git_dirty(runner: CommandRunner) -> bool:
    """
    Check whether the working tree has uncommitted changes.

    The tree counts as clean only when `git status --porcelain` succeeds and
    reports nothing. A failed or unlaunchable git counts as dirty.
    Unlike exit-code-only detection, porcelain output with a zero exit also
    counts as dirty, since git status succeeds on a modified tree.

    Args:
        runner: CommandRunner used to invoke git

    Returns:
        bool: True if the tree is dirty or its state cannot be determined
    """
    try:
        result = runner.run(GIT_STATUS_CMD)
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug(f'git status could not be run, assuming dirty: {e}')
        return True

    if result.returncode != 0:
        logger.debug(f'git status exited with {result.returncode}, assuming dirty')
        return True

    if result.stdout.strip():
        logger.debug('git status reported uncommitted changes')
        return True

    return False


def git_short_hash(runner: CommandRunner) -> str:
    """
    Get the abbreviated hash of the current commit.

    Args:
        runner: CommandRunner used to invoke git

    Returns:
        str: Short commit hash, or UNKNOWN if git fails
    """
    try:
        result = runner.run(GIT_SHORT_HASH_CMD)
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug(f'git rev-parse could not be run: {e}')
        return UNKNOWN_HASH

    if result.returncode != 0:
        logger.debug(f'git rev-parse exited with {result.returncode}')
        return UNKNOWN_HASH

    return result.stdout.strip()
