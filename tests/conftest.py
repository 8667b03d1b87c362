"""Shared fixtures for gitservice tests."""

from unittest.mock import AsyncMock, patch

import pytest

from gitservice.git.runner import GitResult, GitRunner


def ok(stdout: str = "") -> GitResult:
    return GitResult(returncode=0, stdout=stdout, stderr="")


def failed(stderr: str = "", returncode: int = 128) -> GitResult:
    return GitResult(returncode=returncode, stdout="", stderr=stderr)


@pytest.fixture
def runner() -> GitRunner:
    return GitRunner()


@pytest.fixture
def mock_run_git():
    """Replace the subprocess layer; set return_value or side_effect per test."""
    with patch("gitservice.git.runner.run_git", new_callable=AsyncMock) as mock:
        mock.return_value = ok()
        yield mock


def git_args(mock_run_git, call: int = -1) -> list[str]:
    """Arguments of a recorded run_git call."""
    return mock_run_git.call_args_list[call].args[0]
