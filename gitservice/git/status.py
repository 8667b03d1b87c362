"""Git status operations.

Porcelain output is parsed by a function registered per format version, so
a new git output format only needs a new entry in STATUS_PARSERS.
"""

import logging
from pathlib import Path
from typing import Callable

from gitservice.git.errors import CommandFailed, CommandTimedOut, NotARepository
from gitservice.git.models import NO_COMMITS, RepositoryStatus
from gitservice.git.runner import GitRunner

logger = logging.getLogger(__name__)

BRANCH_HEAD = "# branch.head "
ORDINARY = "1 "
RENAMED = "2 "
UNTRACKED = "? "

StatusParser = Callable[[str, str], RepositoryStatus]


def _ordinary_path(line: str) -> tuple[str, str]:
    """Return (XY, path) for a `1 ` entry."""
    parts = line.split("\t")
    fields = parts[0].split(" ")
    xy = fields[1] if len(fields) > 1 else ""
    if len(parts) > 1:
        return xy, parts[-1]
    # Real v2 output: 1 XY sub mH mI mW hH hI path
    fields = line.split(" ", 8)
    return xy, fields[8] if len(fields) == 9 else ""


def _renamed_path(line: str) -> str:
    """Return the path of a `2 ` entry."""
    parts = line.split("\t")
    if len(parts) > 2:
        return parts[2]
    # Real v2 output: 2 XY sub mH mI mW hH hI Xscore path<TAB>origPath
    fields = parts[0].split(" ", 9)
    return fields[9] if len(fields) == 10 else ""


def parse_porcelain_v2(output: str, last_commit: str = "") -> RepositoryStatus:
    """
    Parse `git status --porcelain=v2 --branch` output.

    Only entries whose XY code contains M are classified, and they all land
    in `unstaged`; `staged` is never populated. Renames and copies are
    reported as unstaged under their new path.
    """
    branch = ""
    unstaged = []
    untracked = []

    for line in output.splitlines():
        if line.startswith(BRANCH_HEAD):
            branch = line[len(BRANCH_HEAD):]
        elif line.startswith(ORDINARY):
            xy, path = _ordinary_path(line)
            if "M" in xy and path:
                unstaged.append(path)
        elif line.startswith(RENAMED):
            path = _renamed_path(line)
            if path:
                unstaged.append(path)
        elif line.startswith(UNTRACKED):
            untracked.append(line[len(UNTRACKED):])

    return RepositoryStatus(
        is_repository=True,
        branch=branch,
        staged=(),
        unstaged=tuple(unstaged),
        untracked=tuple(untracked),
        last_commit=last_commit or NO_COMMITS,
    )


STATUS_PARSERS: dict[str, StatusParser] = {
    "v2": parse_porcelain_v2,
}


def register_status_parser(version: str, parser: StatusParser) -> None:
    """Register a parser for `--porcelain=<version>` output."""
    STATUS_PARSERS[version] = parser


def get_status_parser(version: str) -> StatusParser:
    try:
        return STATUS_PARSERS[version]
    except KeyError:
        raise ValueError(
            f"No status parser for porcelain format '{version}' "
            f"(known: {', '.join(sorted(STATUS_PARSERS))})"
        ) from None


def _not_a_repository(repo: Path, strict: bool) -> RepositoryStatus:
    if strict:
        raise NotARepository(repo)
    return RepositoryStatus.missing()


async def get_last_commit(runner: GitRunner, repo: Path) -> str:
    """One-line summary of HEAD, or "" when there is none."""
    try:
        return await runner.check(["log", "--oneline", "-n", "1"], cwd=repo)
    except CommandTimedOut:
        raise
    except CommandFailed:
        return ""


async def get_status(
    runner: GitRunner,
    repo: Path,
    porcelain: str = "v2",
    strict: bool = False,
) -> RepositoryStatus:
    """
    Summarize the working tree at repo.

    When git refuses the status query and repo has no .git marker, the
    result has is_repository=False (or NotARepository is raised if strict).
    Any other failure is re-raised.
    """
    parser = get_status_parser(porcelain)
    repo = Path(repo)
    if not repo.is_dir():
        return _not_a_repository(repo, strict)

    try:
        output = await runner.check(["status", f"--porcelain={porcelain}", "--branch"], cwd=repo)
    except CommandTimedOut:
        raise
    except CommandFailed:
        if not (repo / ".git").exists():
            logger.debug(f"No repository marker in {repo}")
            return _not_a_repository(repo, strict)
        raise

    last_commit = await get_last_commit(runner, repo)
    return parser(output, last_commit)
