"""Async git command runner with deadline and cancellation handling."""

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path

from gitservice.git.errors import CommandFailed, CommandTimedOut, SpawnError
from gitservice.lib.config import GitConfig

logger = logging.getLogger(__name__)

# Seconds between SIGTERM and SIGKILL. git removes its .lock files on SIGTERM.
TERMINATE_GRACE = 5


@dataclass(frozen=True)
class GitResult:
    """Result of a git command."""
    returncode: int
    stdout: str
    stderr: str
    timed_out: bool = False

    @property
    def success(self) -> bool:
        return self.returncode == 0 and not self.timed_out

    @property
    def output(self) -> str:
        return self.stdout.strip()


def _decode(data: bytes | None) -> str:
    return data.decode("utf-8", errors="replace") if data else ""


async def _stop(proc: asyncio.subprocess.Process) -> None:
    """Terminate a still-running child, kill it if it lingers, and reap it."""
    if proc.returncode is None:
        try:
            proc.terminate()
        except ProcessLookupError:
            pass
        try:
            await asyncio.wait_for(proc.wait(), TERMINATE_GRACE)
            return
        except asyncio.TimeoutError:
            logger.warning(f"git (pid {proc.pid}) ignored SIGTERM, killing it")
        try:
            proc.kill()
        except ProcessLookupError:
            pass
    await proc.wait()


async def run_git(
    args: list[str],
    cwd: Path | None = None,
    timeout: float | None = None,
    git_binary: str = "git",
) -> GitResult:
    """
    Run a git command and collect its output.

    Args:
        args: Git command arguments (e.g., ["status", "--porcelain=v2"])
        cwd: Working directory for the command, or None to inherit ours
        timeout: Seconds before the child is stopped; None waits forever
        git_binary: Executable to run

    Returns:
        GitResult with returncode, stdout, stderr, and timed_out flag

    Raises:
        SpawnError: if the process could not be started
    """
    cmd = [git_binary, *args]
    logger.debug(f"Running {' '.join(cmd)} (cwd={cwd})")
    try:
        proc = await asyncio.create_subprocess_exec(
            *cmd,
            cwd=str(cwd) if cwd is not None else None,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        raise SpawnError(cmd, e) from e

    try:
        stdout, stderr = await asyncio.wait_for(proc.communicate(), timeout)
    except asyncio.TimeoutError:
        await _stop(proc)
        logger.warning(f"{' '.join(cmd)} timed out after {timeout}s")
        return GitResult(
            returncode=-1,
            stdout="",
            stderr=f"Command timed out after {timeout}s",
            timed_out=True,
        )
    except asyncio.CancelledError:
        await _stop(proc)
        raise

    logger.debug(f"{cmd[0]} {args[0] if args else ''} exited with {proc.returncode}")
    return GitResult(
        returncode=proc.returncode,
        stdout=_decode(stdout),
        stderr=_decode(stderr),
    )


class GitRunner:
    """Runs git with the binary and deadlines from a GitConfig."""

    def __init__(self, config: GitConfig | None = None):
        self.config = config or GitConfig()

    def _timeout(self, network: bool) -> float | None:
        timeout = self.config.network_timeout if network else self.config.timeout
        return timeout or None

    async def run(
        self,
        args: list[str],
        cwd: Path | None = None,
        network: bool = False,
    ) -> GitResult:
        """Run git and return the raw result without checking the exit code."""
        return await run_git(
            args,
            cwd=cwd,
            timeout=self._timeout(network),
            git_binary=self.config.git_binary,
        )

    async def check(
        self,
        args: list[str],
        cwd: Path | None = None,
        network: bool = False,
        strip: bool = True,
    ) -> str:
        """
        Run git and return its stdout, stripped unless strip is False.

        Raises:
            SpawnError: git could not be started
            CommandTimedOut: the deadline elapsed
            CommandFailed: git exited non-zero
        """
        result = await self.run(args, cwd=cwd, network=network)
        command = [self.config.git_binary, *args]
        if result.timed_out:
            raise CommandTimedOut(command, self._timeout(network))
        if not result.success:
            raise CommandFailed(command, result.returncode, result.stderr)
        return result.output if strip else result.stdout
