"""Git remote operations."""

import re
from pathlib import Path

from gitservice.git.models import RemoteRecord
from gitservice.git.runner import GitRunner

REMOTE_LINE = re.compile(r'(\S+)\s+(\S+)\s+\((fetch|push)\)')


def parse_remotes(output: str) -> tuple[RemoteRecord, ...]:
    """
    Parse `git remote -v` output into one record per remote name.

    Remotes keep the order in which they first appear.
    """
    urls: dict[str, dict[str, str]] = {}
    for line in output.splitlines():
        match = REMOTE_LINE.search(line)
        if not match:
            continue
        name, url, direction = match.groups()
        urls.setdefault(name, {})[direction] = url

    return tuple(
        RemoteRecord(name=name, fetch_url=found.get("fetch"), push_url=found.get("push"))
        for name, found in urls.items()
    )


async def list_remotes(runner: GitRunner, repo: Path) -> tuple[RemoteRecord, ...]:
    output = await runner.check(["remote", "-v"], cwd=repo)
    return parse_remotes(output)


async def clone(runner: GitRunner, url: str, target: Path) -> None:
    """Clone url into target. Runs from our own working directory."""
    await runner.check(["clone", url, str(target)], network=True)


async def push(runner: GitRunner, repo: Path, remote: str = "origin", branch: str | None = None) -> str:
    """Push to remote. Returns git's stdout."""
    args = ["push", remote]
    if branch:
        args.append(branch)
    return await runner.check(args, cwd=repo, network=True)


async def pull(runner: GitRunner, repo: Path, remote: str = "origin", branch: str | None = None) -> str:
    """Pull from remote. Returns git's stdout."""
    args = ["pull", remote]
    if branch:
        args.append(branch)
    return await runner.check(args, cwd=repo, network=True)
