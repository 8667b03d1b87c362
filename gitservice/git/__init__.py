"""Git operations for gitservice.

Each module pairs the parsing of one git output format with the async
operations that produce it. All operations take a GitRunner first.

Return type conventions:
- Operations returning None: success is the absence of an exception.
  Examples: stage_files(), create_branch(), clone()
- Operations returning str: git's stripped stdout (or a value extracted
  from it). Examples: commit(), get_diff(), push()
- Operations returning records: frozen dataclasses or tuples of them.
  Examples: get_status(), get_log(), list_branches()
Failures raise a GitError subclass (see gitservice.git.errors).
"""

from gitservice.git.errors import (
    GitError,
    SpawnError,
    CommandFailed,
    CommandTimedOut,
    NotARepository,
    IdentityNotConfigured,
)
from gitservice.git.models import (
    RepositoryStatus,
    CommitRecord,
    BranchRecord,
    RemoteRecord,
)
from gitservice.git.runner import GitResult, GitRunner, run_git
from gitservice.git.probe import AvailabilityProbe
from gitservice.git.status import (
    get_status,
    parse_porcelain_v2,
    get_status_parser,
    register_status_parser,
)
from gitservice.git.log import get_log, parse_log
from gitservice.git.branch import (
    get_current_branch,
    list_branches,
    create_branch,
    switch_branch,
    parse_branches,
)
from gitservice.git.commit import (
    init_repo,
    stage_files,
    unstage_files,
    commit,
    discard_changes,
    extract_commit_hash,
)
from gitservice.git.diff import get_diff, get_staged_diff
from gitservice.git.remote import (
    list_remotes,
    clone,
    push,
    pull,
    parse_remotes,
)

__all__ = [
    # errors
    "GitError",
    "SpawnError",
    "CommandFailed",
    "CommandTimedOut",
    "NotARepository",
    "IdentityNotConfigured",
    # models
    "RepositoryStatus",
    "CommitRecord",
    "BranchRecord",
    "RemoteRecord",
    # runner
    "GitResult",
    "GitRunner",
    "run_git",
    "AvailabilityProbe",
    # status
    "get_status",
    "parse_porcelain_v2",
    "get_status_parser",
    "register_status_parser",
    # log
    "get_log",
    "parse_log",
    # branch
    "get_current_branch",
    "list_branches",
    "create_branch",
    "switch_branch",
    "parse_branches",
    # commit
    "init_repo",
    "stage_files",
    "unstage_files",
    "commit",
    "discard_changes",
    "extract_commit_hash",
    # diff
    "get_diff",
    "get_staged_diff",
    # remote
    "list_remotes",
    "clone",
    "push",
    "pull",
    "parse_remotes",
]
