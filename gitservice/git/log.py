"""Git log operations."""

import logging
from pathlib import Path

from gitservice.git.errors import CommandFailed
from gitservice.git.models import CommitRecord
from gitservice.git.runner import GitRunner

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = "|"
LOG_FORMAT = FIELD_SEPARATOR.join(["%H", "%h", "%an", "%ae", "%ar", "%s"])
FIELD_COUNT = 6

# git log on an unborn branch: "fatal: your current branch 'main' does not have any commits yet"
NO_COMMITS_MARKER = "does not have any commits yet"


def parse_log(output: str) -> tuple[CommitRecord, ...]:
    """
    Parse `git log --pretty=format:<LOG_FORMAT>` output, newest first.

    The subject is the last field, so pipes inside it are kept.
    Malformed lines are skipped.
    """
    commits = []
    for line in output.splitlines():
        if not line:
            continue
        fields = line.split(FIELD_SEPARATOR, FIELD_COUNT - 1)
        if len(fields) != FIELD_COUNT:
            logger.warning(f"Skipping malformed log line: {line!r}")
            continue
        commits.append(CommitRecord(*fields))
    return tuple(commits)


async def get_log(runner: GitRunner, repo: Path, max_count: int = 10) -> tuple[CommitRecord, ...]:
    """Get up to max_count commits reachable from HEAD."""
    try:
        output = await runner.check(
            ["log", f"--pretty=format:{LOG_FORMAT}", "-n", str(max_count)],
            cwd=repo,
        )
    except CommandFailed as e:
        if NO_COMMITS_MARKER in e.stderr:
            return ()
        raise
    return parse_log(output)
