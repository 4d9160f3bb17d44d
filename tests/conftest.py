"""
Pytest configuration and shared fixtures for test suite.

Provides a fake command runner for git, a temporary source tree laid out
like the ecs-cli repository, and a Config factory pointing at it.
"""

import os
import pytest
from unittest.mock import MagicMock

from ecs_version_gen.config import Config, default_version_file
from ecs_version_gen.git import CommandResult, CommandRunner, GIT_SHORT_HASH_CMD, GIT_STATUS_CMD


class FakeRunner(CommandRunner):
    """CommandRunner returning canned results keyed by command line."""

    def __init__(self, results=None):
        self.results = results or {}
        self.calls = []

    def run(self, args):
        self.calls.append(list(args))
        outcome = self.results.get(tuple(args))
        if outcome is None:
            raise FileNotFoundError(2, "No such file or directory", args[0])
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


@pytest.fixture
def fake_runner():
    """Runner for a clean repository at commit abc1234."""
    return FakeRunner({
        tuple(GIT_STATUS_CMD): CommandResult(returncode=0, stdout=''),
        tuple(GIT_SHORT_HASH_CMD): CommandResult(returncode=0, stdout='abc1234\n'),
    })


@pytest.fixture
def missing_git_runner():
    """Runner for a machine without git installed."""
    return FakeRunner()


@pytest.fixture
def source_tree(tmp_path):
    """
    Create a repository layout with VERSION at the root and return the
    generator's working directory three levels below it.
    """
    work_dir = tmp_path / "ecs-cli" / "modules" / "version"
    work_dir.mkdir(parents=True)
    (tmp_path / "VERSION").write_text("1.2.3\n", encoding="utf-8")
    return work_dir


@pytest.fixture
def make_config(source_tree):
    """Factory building a Config rooted at the temporary source tree."""
    def _make(release_mode='', unknown_version='', work_dir=None):
        work_dir = str(work_dir or source_tree)
        return Config(
            work_dir=work_dir,
            version_file=default_version_file(work_dir),
            output_file=os.path.join(work_dir, "version.go"),
            release_mode=release_mode,
            unknown_version=unknown_version,
            log_level="INFO",
        )
    return _make


@pytest.fixture
def mock_info():
    """Create a mock VersionInfo with sensible defaults."""
    info = MagicMock()
    info.version = "1.2.3"
    info.dirty = True
    info.hash = "abc1234"
    return info
