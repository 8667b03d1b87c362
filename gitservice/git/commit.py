"""Git commit operations.

Staging and committing are separate git invocations; a failed commit
leaves whatever was staged in place.
"""

import logging
import re
from pathlib import Path

from gitservice.git.errors import CommandFailed, IdentityNotConfigured
from gitservice.git.runner import GitRunner

logger = logging.getLogger(__name__)

# "[main 1a2b3c4] subject" or "[main (root-commit) 1a2b3c4] subject"
COMMIT_HASH = re.compile(r'^\[[^\]]*\s([a-f0-9]+)\]')

IDENTITY_KEYS = ("user.name", "user.email")


def extract_commit_hash(output: str) -> str:
    """Short hash from commit's confirmation line, or the output itself if unrecognized."""
    first_line = output.splitlines()[0] if output else ""
    match = COMMIT_HASH.match(first_line)
    return match.group(1) if match else output


def is_identity_error(error: CommandFailed) -> bool:
    message = str(error)
    return any(key in message for key in IDENTITY_KEYS)


async def init_repo(runner: GitRunner, repo: Path) -> None:
    await runner.check(["init"], cwd=repo)


async def stage_files(runner: GitRunner, repo: Path, files: list[str] | None = None) -> None:
    """Stage specific files, or everything under repo when files is empty."""
    args = ["add"]
    args.extend(files if files else ["."])
    await runner.check(args, cwd=repo)


async def unstage_files(runner: GitRunner, repo: Path, files: list[str] | None = None) -> None:
    """Unstage specific files, or the whole index when files is empty."""
    args = ["reset"]
    if files:
        args.extend(files)
    await runner.check(args, cwd=repo)


async def commit(runner: GitRunner, repo: Path, message: str, author: str | None = None) -> str:
    """
    Commit staged changes.

    Args:
        runner: GitRunner to invoke git with
        repo: Repository path
        message: Commit message
        author: Optional "Name <email>" override

    Returns:
        The new commit's short hash, or git's raw output when it can't be found

    Raises:
        IdentityNotConfigured: user.name / user.email are missing
        CommandFailed: any other git failure
    """
    args = ["commit", "-m", message]
    if author:
        args.extend(["--author", author])
    try:
        output = await runner.check(args, cwd=repo)
    except CommandFailed as e:
        if is_identity_error(e):
            raise IdentityNotConfigured(e.stderr) from e
        raise

    commit_hash = extract_commit_hash(output)
    if commit_hash == output:
        logger.warning(f"Could not find commit hash in output: {output!r}")
    return commit_hash


async def discard_changes(runner: GitRunner, repo: Path, filepath: str) -> None:
    """Restore a file to its HEAD state."""
    await runner.check(["checkout", "HEAD", filepath], cwd=repo)
