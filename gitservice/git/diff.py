"""Git diff operations."""

from pathlib import Path

from gitservice.git.runner import GitRunner


async def get_diff(runner: GitRunner, repo: Path, filepath: str) -> str:
    """Unstaged changes to filepath."""
    return await runner.check(["diff", filepath], cwd=repo)


async def get_staged_diff(runner: GitRunner, repo: Path, filepath: str) -> str:
    """Staged changes to filepath."""
    return await runner.check(["diff", "--cached", filepath], cwd=repo)
