"""
Configuration management for the version generator.

Reads the process environment and working directory once and exposes them as
a single Config object, so the rest of the generator never touches ambient
process state directly.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional
from dotenv import load_dotenv
from loguru import logger

# Load environment variables from .env file (never overrides the real environment)
load_dotenv()

CLEAN_BUILD = 'cleanbuild'
VERSION_FILE_NAME = 'VERSION'
OUTPUT_FILE_NAME = 'version.go'
VALID_LOG_LEVELS = ['DEBUG', 'VERBOSE', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def get_config_value(environ: Mapping[str, str], env_key: str, default: str = '') -> str:
    """
    Get a configuration value with precedence: env vars > defaults.

    Args:
        environ: Environment mapping to read from
        env_key: Environment variable key
        default: Default value if the env var is unset or empty

    Returns:
        str: The raw environment value, or the default
    """
    env_value = environ.get(env_key, '')
    if not env_value:
        return default
    return env_value


@dataclass
class Config:
    """Configuration object containing all generator settings."""

    # Paths
    work_dir: str
    version_file: str
    output_file: str

    # Release switches, kept raw as read from the environment
    release_mode: str
    unknown_version: str

    # Logging
    log_level: str

    @property
    def clean_build(self) -> bool:
        """True when ECS_RELEASE asks for a real working-tree cleanliness check."""
        return self.release_mode.strip() == CLEAN_BUILD

    @property
    def skip_hash(self) -> bool:
        """True when ECS_UNKNOWN_VERSION is set, so the hash stays UNKNOWN."""
        return self.unknown_version != ''


def default_version_file(work_dir: str) -> str:
    """
    Locate the VERSION file for a generator run.

    The generator runs from the ecs-cli version package directory, which sits
    three levels below the repository root holding VERSION.
    """
    return os.path.join(work_dir, '..', '..', '..', VERSION_FILE_NAME)


def load_config(environ: Optional[Mapping[str, str]] = None, work_dir: Optional[str] = None) -> Config:
    """
    Load configuration from environment variables and the working directory.

    Args:
        environ: Environment mapping (defaults to os.environ)
        work_dir: Directory the generator runs in (defaults to the current one)

    Returns:
        Config: Configuration object
    """
    if environ is None:
        environ = os.environ
    if work_dir is None:
        work_dir = os.getcwd()

    release_mode = get_config_value(environ, 'ECS_RELEASE', '')
    unknown_version = get_config_value(environ, 'ECS_UNKNOWN_VERSION', '')

    log_level = get_config_value(environ, 'LOG_LEVEL', 'INFO').strip().upper()
    if log_level not in VALID_LOG_LEVELS:
        logger.warning(f'LOG_LEVEL must be one of {VALID_LOG_LEVELS} (got: {log_level}), using INFO')
        log_level = 'INFO'

    config = Config(
        work_dir=work_dir,
        version_file=default_version_file(work_dir),
        output_file=os.path.join(work_dir, OUTPUT_FILE_NAME),
        release_mode=release_mode,
        unknown_version=unknown_version,
        log_level=log_level,
    )

    return config


def log_config(config: Config) -> None:
    """Log the loaded configuration at debug level."""
    logger.debug(f'WORK_DIR = {config.work_dir}')
    logger.debug(f'VERSION_FILE = {config.version_file}')
    logger.debug(f'OUTPUT_FILE = {config.output_file}')
    logger.debug(f'ECS_RELEASE = {config.release_mode!r} (clean build: {config.clean_build})')
    logger.debug(f'ECS_UNKNOWN_VERSION = {config.unknown_version!r} (skip hash: {config.skip_hash})')
    logger.debug(f'LOG_LEVEL = {config.log_level}')
