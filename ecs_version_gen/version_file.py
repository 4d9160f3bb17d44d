"""
Reading of the VERSION file.
"""

from loguru import logger


class VersionFileError(Exception):
    """Raised when the VERSION file cannot be read."""
    pass


def read_version(path: str) -> str:
    """
    Read the version string from a VERSION file.

    The contents are treated as an opaque string; only surrounding
    whitespace is removed.

    Args:
        path: Path to the VERSION file

    Returns:
        str: Trimmed version string

    Raises:
        VersionFileError: If the file cannot be read or decoded
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            contents = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise VersionFileError(f'Unable to read version file {path}: {e}') from e

    version = contents.strip()
    logger.debug(f'Read version {version!r} from {path}')
    return version
