"""Async wrapper around the git command line."""

from gitservice.git.errors import (
    GitError,
    SpawnError,
    CommandFailed,
    CommandTimedOut,
    NotARepository,
    IdentityNotConfigured,
)
from gitservice.git.models import RepositoryStatus, CommitRecord, BranchRecord, RemoteRecord
from gitservice.lib.config import GitConfig, load_config
from gitservice.service import GitService

__all__ = [
    "GitService",
    "GitConfig",
    "load_config",
    "GitError",
    "SpawnError",
    "CommandFailed",
    "CommandTimedOut",
    "NotARepository",
    "IdentityNotConfigured",
    "RepositoryStatus",
    "CommitRecord",
    "BranchRecord",
    "RemoteRecord",
]
