"""
Tests for logging configuration.
"""
import pytest
from unittest.mock import patch, MagicMock
from ecs_version_gen.logging_config import setup_logging


class TestLoggingConfig:
    """Test logging configuration."""

    @patch('ecs_version_gen.logging_config.logger')
    def test_setup_logging_default(self, mock_logger):
        """Test setup logging with default level."""
        setup_logging()

        mock_logger.remove.assert_called()
        mock_logger.add.assert_called()
        assert mock_logger.add.call_args.kwargs['level'] == 'INFO'

    @patch('ecs_version_gen.logging_config.logger')
    def test_setup_logging_debug(self, mock_logger):
        """Test setup logging with DEBUG level."""
        setup_logging('DEBUG')

        mock_logger.remove.assert_called_once()
        assert mock_logger.add.call_args.kwargs['level'] == 'DEBUG'

    @patch('ecs_version_gen.logging_config.logger')
    def test_setup_logging_with_console(self, mock_logger):
        """Test setup logging routes records through the console."""
        mock_console = MagicMock()

        setup_logging('INFO', console=mock_console)

        mock_logger.remove.assert_called_once()
        sink = mock_logger.add.call_args.args[0]
        sink('hello')
        mock_console.print.assert_called_once_with('hello', end='')

    def test_setup_logging_twice(self):
        """Test the custom level survives repeated setup."""
        setup_logging('VERBOSE')
        setup_logging('VERBOSE')


def test_verbose_level_registered_on_import():
    """Test VERBOSE is usable without calling setup_logging first."""
    from loguru import logger
    from ecs_version_gen.logging_config import VERBOSE

    assert logger.level(VERBOSE).no == 15
