"""
Records produced by parsing git output.

All records are frozen: each call returns a fresh snapshot and collections
keep the order git printed them in.
"""

from dataclasses import dataclass

NO_COMMITS = "No commits yet"
NOT_A_REPOSITORY = "Not a git repository"


@dataclass(frozen=True)
class RepositoryStatus:
    """Working tree summary from `git status --porcelain=v2 --branch`."""
    is_repository: bool
    branch: str = ""
    staged: tuple[str, ...] = ()
    unstaged: tuple[str, ...] = ()
    untracked: tuple[str, ...] = ()
    last_commit: str = NO_COMMITS
    error: str | None = None  # Only set when is_repository is False

    @classmethod
    def missing(cls) -> "RepositoryStatus":
        return cls(is_repository=False, error=NOT_A_REPOSITORY)


@dataclass(frozen=True)
class CommitRecord:
    """One line of `git log` output."""
    hash: str
    short_hash: str
    author: str
    email: str
    relative_date: str  # e.g. "2 days ago"
    subject: str


@dataclass(frozen=True)
class BranchRecord:
    name: str
    is_current: bool = False


@dataclass(frozen=True)
class RemoteRecord:
    name: str
    fetch_url: str | None = None
    push_url: str | None = None

    @property
    def url(self) -> str | None:
        """Fetch URL, falling back to the push URL."""
        return self.fetch_url or self.push_url
