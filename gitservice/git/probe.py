"""Detect whether the git binary can be run at all."""

import asyncio
import logging

from gitservice.git.errors import SpawnError
from gitservice.git.runner import GitRunner

logger = logging.getLogger(__name__)


class AvailabilityProbe:
    """
    Lazily runs `git --version` once and remembers the answer.

    The cached value belongs to this instance: it is written once, on the
    first call, and read thereafter. Concurrent first calls share a single
    probe. Use reset() to force a fresh check.
    """

    def __init__(self, runner: GitRunner):
        self._runner = runner
        self._available: bool | None = None
        self._lock = asyncio.Lock()

    @property
    def cached(self) -> bool | None:
        """The remembered result, or None before the first probe."""
        return self._available

    async def is_available(self) -> bool:
        if self._available is not None:
            return self._available
        async with self._lock:
            if self._available is None:
                self._available = await self._probe()
        return self._available

    async def _probe(self) -> bool:
        try:
            result = await self._runner.run(["--version"])
        except SpawnError as e:
            logger.warning(f"git is not available: {e}")
            return False
        if not result.success:
            logger.warning(f"git --version failed: {result.stderr.strip() or result.returncode}")
            return False
        logger.debug(f"Found {result.output}")
        return True

    def reset(self) -> None:
        self._available = None
