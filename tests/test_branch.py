"""Tests for gitservice.git.branch."""

from conftest import git_args, ok
from gitservice.git.branch import (
    create_branch,
    get_current_branch,
    list_branches,
    parse_branches,
    switch_branch,
)
from gitservice.git.models import BranchRecord


class TestParseBranches:
    """Test `git branch -a` parsing."""

    def test_marks_current_branch(self):
        assert parse_branches("* main\n  dev\n") == (
            BranchRecord(name="main", is_current=True),
            BranchRecord(name="dev", is_current=False),
        )

    def test_drops_blank_lines(self):
        assert parse_branches("* main\n\n  \n  dev\n") == (
            BranchRecord("main", True),
            BranchRecord("dev", False),
        )

    def test_remote_tracking_branches(self):
        branches = parse_branches(
            "* main\n  remotes/origin/HEAD -> origin/main\n  remotes/origin/main\n"
        )
        assert [b.name for b in branches] == [
            "main",
            "remotes/origin/HEAD -> origin/main",
            "remotes/origin/main",
        ]

    def test_detached_head(self):
        branches = parse_branches("* (HEAD detached at 1a2b3c4)\n  main\n")
        assert branches[0] == BranchRecord("(HEAD detached at 1a2b3c4)", True)


class TestBranchOperations:

    async def test_current_branch(self, runner, mock_run_git, tmp_path):
        mock_run_git.return_value = ok("feature/x\n")
        assert await get_current_branch(runner, tmp_path) == "feature/x"
        assert git_args(mock_run_git) == ["rev-parse", "--abbrev-ref", "HEAD"]

    async def test_list_keeps_first_line_prefix(self, runner, mock_run_git, tmp_path):
        mock_run_git.return_value = ok("  dev\n* main\n")
        branches = await list_branches(runner, tmp_path)
        assert git_args(mock_run_git) == ["branch", "-a"]
        assert branches == (BranchRecord("dev", False), BranchRecord("main", True))

    async def test_create_branch(self, runner, mock_run_git, tmp_path):
        await create_branch(runner, tmp_path, "feature")
        assert git_args(mock_run_git) == ["checkout", "-b", "feature"]

    async def test_switch_branch(self, runner, mock_run_git, tmp_path):
        await switch_branch(runner, tmp_path, "main")
        assert git_args(mock_run_git) == ["checkout", "main"]
