"""Git branch operations."""

from pathlib import Path

from gitservice.git.models import BranchRecord
from gitservice.git.runner import GitRunner

CURRENT_MARKER = "*"


def parse_branches(output: str) -> tuple[BranchRecord, ...]:
    """
    Parse `git branch -a` output.

    Each line carries a two-character prefix; "* " marks the checked-out
    branch. Lines that are empty after the prefix are dropped.
    """
    branches = []
    for line in output.splitlines():
        name = line[2:].strip()
        if name:
            branches.append(BranchRecord(name=name, is_current=line.startswith(CURRENT_MARKER)))
    return tuple(branches)


async def get_current_branch(runner: GitRunner, repo: Path) -> str:
    """Get the current branch name ("HEAD" when detached)."""
    return await runner.check(["rev-parse", "--abbrev-ref", "HEAD"], cwd=repo)


async def list_branches(runner: GitRunner, repo: Path) -> tuple[BranchRecord, ...]:
    """List local and remote-tracking branches."""
    # Stripping would eat the first line's prefix
    output = await runner.check(["branch", "-a"], cwd=repo, strip=False)
    return parse_branches(output)


async def create_branch(runner: GitRunner, repo: Path, name: str) -> None:
    """Create a branch and check it out."""
    await runner.check(["checkout", "-b", name], cwd=repo)


async def switch_branch(runner: GitRunner, repo: Path, name: str) -> None:
    await runner.check(["checkout", name], cwd=repo)
