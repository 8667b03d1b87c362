"""Git error taxonomy.

Every failure raised by this package derives from GitError so callers can
catch the whole family with one clause.
"""


class GitError(Exception):
    """Base class for git operation failures."""


class SpawnError(GitError):
    """The git binary could not be started."""

    def __init__(self, command: list[str], os_error: OSError):
        self.command = command
        self.os_error = os_error
        super().__init__(f"Failed to run {command[0]}: {os_error}")


class CommandFailed(GitError):
    """Git ran and exited non-zero."""

    def __init__(self, command: list[str], returncode: int, stderr: str):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        message = stderr or f"Git command failed with code {returncode}"
        super().__init__(message)


class CommandTimedOut(CommandFailed):
    """Git did not finish before its deadline and was killed."""

    def __init__(self, command: list[str], timeout: float):
        self.timeout = timeout
        super().__init__(command, -1, f"Command timed out after {timeout}s")


class NotARepository(GitError):
    """The path holds no git repository."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"Not a git repository: {path}")


IDENTITY_HELP = (
    "Git user.name and user.email not configured. Please set them globally or use: "
    'git config user.name "Your Name" && git config user.email "your@email.com"'
)


class IdentityNotConfigured(GitError):
    """Commit refused because the author identity is missing."""

    def __init__(self, stderr: str = ""):
        self.stderr = stderr
        super().__init__(IDENTITY_HELP)
