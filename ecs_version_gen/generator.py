"""
Version generation workflow.

Reads the version, inspects the repository and writes version.go, in that
order. Each step is terminal on failure and nothing is retried.
"""

from dataclasses import dataclass
from typing import Optional

from loguru import logger

from .config import Config
from .git import CommandRunner, SubprocessRunner, UNKNOWN_HASH, git_dirty, git_short_hash
from .logging_config import VERBOSE
from .render import write_version_go
from .version_file import read_version


@dataclass
class VersionInfo:
    """Values substituted into version.go."""
    version: str
    dirty: bool = True
    hash: str = UNKNOWN_HASH


def inspect_repository(info: VersionInfo, config: Config, runner: CommandRunner) -> VersionInfo:
    """
    Fill in the git fields of a VersionInfo according to the configuration.

    Only clean-build releases check the working tree; every other build is
    assumed dirty. The hash lookup is skipped when ECS_UNKNOWN_VERSION is set
    so the checked-in version.go does not churn with every commit.

    Args:
        info: VersionInfo holding defaults
        config: Generator configuration
        runner: CommandRunner used to invoke git

    Returns:
        VersionInfo: The same object, updated in place
    """
    if config.clean_build:
        info.dirty = git_dirty(runner)
        logger.log(VERBOSE, f'Working tree dirty: {info.dirty}')
    else:
        logger.debug('Not a clean build, marking as dirty')

    if not config.skip_hash:
        info.hash = git_short_hash(runner)
        logger.log(VERBOSE, f'Commit short hash: {info.hash}')
    else:
        logger.debug('ECS_UNKNOWN_VERSION is set, leaving hash as UNKNOWN')

    return info


def generate(config: Config, runner: Optional[CommandRunner] = None) -> VersionInfo:
    """
    Generate version.go for the given configuration.

    Args:
        config: Generator configuration
        runner: CommandRunner for git (defaults to a SubprocessRunner in work_dir)

    Returns:
        VersionInfo: The values written to the output file

    Raises:
        VersionFileError: If the VERSION file cannot be read
        RenderError: If version.go cannot be rendered or written
    """
    if runner is None:
        runner = SubprocessRunner(cwd=config.work_dir)

    info = VersionInfo(version=read_version(config.version_file))
    inspect_repository(info, config, runner)

    write_version_go(info, config.output_file)
    logger.info(f'Wrote {config.output_file} (version={info.version}, dirty={info.dirty}, hash={info.hash})')

    return info
