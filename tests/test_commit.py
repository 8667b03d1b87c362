"""Tests for gitservice.git.commit and gitservice.git.diff."""

import pytest

from conftest import failed, git_args, ok
from gitservice.git.commit import (
    commit,
    discard_changes,
    extract_commit_hash,
    init_repo,
    stage_files,
    unstage_files,
)
from gitservice.git.diff import get_diff, get_staged_diff
from gitservice.git.errors import CommandFailed, IdentityNotConfigured

IDENTITY_STDERR = """
*** Please tell me who you are.

Run

  git config --global user.email "you@example.com"
  git config --global user.name "Your Name"

fatal: unable to auto-detect email address (got 'me@host.(none)')
"""


class TestExtractCommitHash:
    """Test hash extraction from commit confirmation lines."""

    def test_bracketed_short_hash(self):
        assert extract_commit_hash("[main 1a2b3c4] fix bug\n 1 file changed") == "1a2b3c4"

    def test_root_commit(self):
        assert extract_commit_hash("[main (root-commit) abc1234] initial") == "abc1234"

    @pytest.mark.parametrize("subject", ["Fix [issue a]", "Update [docs add]", "Bump [cafe]"])
    def test_bracketed_subject_does_not_replace_hash(self, subject):
        output = f"[main 1a2b3c4] {subject}\n 1 file changed, 1 insertion(+)"
        assert extract_commit_hash(output) == "1a2b3c4"

    def test_only_first_line_is_searched(self):
        output = "On branch main\n[main 1a2b3c4] msg"
        assert extract_commit_hash(output) == output

    def test_unrecognized_output_returned_verbatim(self):
        output = "Committed something"
        assert extract_commit_hash(output) == output

    def test_fallback_is_stable(self):
        output = extract_commit_hash("nothing to see")
        assert extract_commit_hash(output) == output


class TestCommit:

    async def test_returns_hash(self, runner, mock_run_git, tmp_path):
        mock_run_git.return_value = ok("[main 1a2b3c4] fix bug\n 1 file changed\n")
        assert await commit(runner, tmp_path, "fix bug") == "1a2b3c4"
        assert git_args(mock_run_git) == ["commit", "-m", "fix bug"]

    async def test_bracketed_subject_keeps_hash(self, runner, mock_run_git, tmp_path):
        mock_run_git.return_value = ok("[main 1a2b3c4] Fix [issue a]\n 1 file changed\n")
        assert await commit(runner, tmp_path, "Fix [issue a]") == "1a2b3c4"

    async def test_author_override(self, runner, mock_run_git, tmp_path):
        mock_run_git.return_value = ok("[main 1a2b3c4] msg\n")
        await commit(runner, tmp_path, "msg", author="A <a@x.com>")
        assert git_args(mock_run_git) == ["commit", "-m", "msg", "--author", "A <a@x.com>"]

    async def test_falls_back_to_output(self, runner, mock_run_git, tmp_path):
        mock_run_git.return_value = ok("something unexpected\n")
        assert await commit(runner, tmp_path, "msg") == "something unexpected"

    async def test_identity_error_is_reclassified(self, runner, mock_run_git, tmp_path):
        mock_run_git.return_value = failed(IDENTITY_STDERR)
        with pytest.raises(IdentityNotConfigured, match="git config user.name") as exc_info:
            await commit(runner, tmp_path, "msg")
        assert isinstance(exc_info.value.__cause__, CommandFailed)

    async def test_other_failures_propagate(self, runner, mock_run_git, tmp_path):
        mock_run_git.return_value = failed("nothing to commit, working tree clean", returncode=1)
        with pytest.raises(CommandFailed, match="nothing to commit"):
            await commit(runner, tmp_path, "msg")


class TestStaging:

    async def test_init(self, runner, mock_run_git, tmp_path):
        await init_repo(runner, tmp_path)
        assert git_args(mock_run_git) == ["init"]

    async def test_stage_all_when_no_files(self, runner, mock_run_git, tmp_path):
        await stage_files(runner, tmp_path)
        assert git_args(mock_run_git) == ["add", "."]

    async def test_stage_specific_files(self, runner, mock_run_git, tmp_path):
        await stage_files(runner, tmp_path, ["a.txt", "b.txt"])
        assert git_args(mock_run_git) == ["add", "a.txt", "b.txt"]

    async def test_unstage_all(self, runner, mock_run_git, tmp_path):
        await unstage_files(runner, tmp_path, [])
        assert git_args(mock_run_git) == ["reset"]

    async def test_unstage_specific_files(self, runner, mock_run_git, tmp_path):
        await unstage_files(runner, tmp_path, ["a.txt"])
        assert git_args(mock_run_git) == ["reset", "a.txt"]

    async def test_discard_changes(self, runner, mock_run_git, tmp_path):
        await discard_changes(runner, tmp_path, "a.txt")
        assert git_args(mock_run_git) == ["checkout", "HEAD", "a.txt"]


class TestDiff:

    async def test_diff(self, runner, mock_run_git, tmp_path):
        mock_run_git.return_value = ok("diff --git a/a.txt b/a.txt\n")
        assert await get_diff(runner, tmp_path, "a.txt") == "diff --git a/a.txt b/a.txt"
        assert git_args(mock_run_git) == ["diff", "a.txt"]

    async def test_staged_diff(self, runner, mock_run_git, tmp_path):
        await get_staged_diff(runner, tmp_path, "a.txt")
        assert git_args(mock_run_git) == ["diff", "--cached", "a.txt"]
