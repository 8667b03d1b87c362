"""Caller-facing git service.

GitService binds a GitRunner and an AvailabilityProbe and exposes every git
operation as a coroutine taking the repository path first.
"""

from pathlib import Path

from gitservice.git import branch as git_branch
from gitservice.git import diff as git_diff
from gitservice.git import log as git_log
from gitservice.git import remote as git_remote
from gitservice.git import status as git_status
from gitservice.git.commit import (
    commit as commit_staged,
    discard_changes,
    init_repo,
    stage_files,
    unstage_files,
)
from gitservice.git.models import BranchRecord, CommitRecord, RemoteRecord, RepositoryStatus
from gitservice.git.probe import AvailabilityProbe
from gitservice.git.runner import GitRunner
from gitservice.lib.config import GitConfig

PathLike = str | Path


class GitService:
    """Async git operations backed by the local git CLI."""

    def __init__(self, config: GitConfig | None = None, runner: GitRunner | None = None):
        self.runner = runner or GitRunner(config)
        self.probe = AvailabilityProbe(self.runner)

    async def is_available(self) -> bool:
        return await self.probe.is_available()

    async def status(self, repo_path: PathLike, strict: bool = False) -> RepositoryStatus:
        return await git_status.get_status(self.runner, Path(repo_path), strict=strict)

    async def init(self, repo_path: PathLike) -> None:
        await init_repo(self.runner, Path(repo_path))

    async def stage_files(self, repo_path: PathLike, files: list[str] | None = None) -> None:
        await stage_files(self.runner, Path(repo_path), files)

    async def unstage_files(self, repo_path: PathLike, files: list[str] | None = None) -> None:
        await unstage_files(self.runner, Path(repo_path), files)

    async def commit(self, repo_path: PathLike, message: str, author: str | None = None) -> str:
        return await commit_staged(self.runner, Path(repo_path), message, author)

    async def log(self, repo_path: PathLike, max_count: int = 10) -> tuple[CommitRecord, ...]:
        return await git_log.get_log(self.runner, Path(repo_path), max_count)

    async def current_branch(self, repo_path: PathLike) -> str:
        return await git_branch.get_current_branch(self.runner, Path(repo_path))

    async def list_branches(self, repo_path: PathLike) -> tuple[BranchRecord, ...]:
        return await git_branch.list_branches(self.runner, Path(repo_path))

    async def create_branch(self, repo_path: PathLike, name: str) -> None:
        await git_branch.create_branch(self.runner, Path(repo_path), name)

    async def switch_branch(self, repo_path: PathLike, name: str) -> None:
        await git_branch.switch_branch(self.runner, Path(repo_path), name)

    async def diff(self, repo_path: PathLike, filepath: str) -> str:
        return await git_diff.get_diff(self.runner, Path(repo_path), filepath)

    async def staged_diff(self, repo_path: PathLike, filepath: str) -> str:
        return await git_diff.get_staged_diff(self.runner, Path(repo_path), filepath)

    async def clone(self, url: str, target_path: PathLike) -> None:
        await git_remote.clone(self.runner, url, Path(target_path))

    async def push(self, repo_path: PathLike, remote: str = "origin", branch: str | None = None) -> str:
        return await git_remote.push(self.runner, Path(repo_path), remote, branch)

    async def pull(self, repo_path: PathLike, remote: str = "origin", branch: str | None = None) -> str:
        return await git_remote.pull(self.runner, Path(repo_path), remote, branch)

    async def discard_changes(self, repo_path: PathLike, filepath: str) -> None:
        await discard_changes(self.runner, Path(repo_path), filepath)

    async def list_remotes(self, repo_path: PathLike) -> tuple[RemoteRecord, ...]:
        return await git_remote.list_remotes(self.runner, Path(repo_path))
