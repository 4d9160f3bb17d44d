"""
Command-line interface for the version generator.

Main entry point that wires together configuration, logging and the
generation workflow, and turns fatal errors into a non-zero exit.
"""

import sys
from loguru import logger
from rich.console import Console

from .config import load_config, log_config
from .generator import generate
from .logging_config import setup_logging
from .render import RenderError
from .version_file import VersionFileError

# Shared console for log output; stdout stays free for other build steps
console = Console(stderr=True)


def main() -> None:
    """Main entry point for the application."""
    setup_logging(console=console)

    config = load_config()
    setup_logging(config.log_level, console=console)
    log_config(config)

    try:
        generate(config)
    except VersionFileError as e:
        logger.error(str(e))
        sys.exit(1)
    except RenderError as e:
        logger.error(str(e))
        sys.exit(1)


if __name__ == '__main__':
    main()
