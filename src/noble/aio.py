"""AsyncArgon — asyncio front end with bounded concurrent derivations.

Argon2 derivations block for a noticeable time and allocate tens of
megabytes each. AsyncArgon runs them in worker threads and caps how many
run at once, so a burst of logins cannot exhaust memory.
"""

import asyncio
import logging

from noble.hasher import Argon

logger = logging.getLogger("noble.aio")


class AsyncArgon:
    """Async wrapper around an Argon instance.

    Args:
        argon: The hasher to run (default Argon()).
        max_concurrency: Maximum derivations in flight at once (default 2).

    Usage:
        hasher = AsyncArgon(max_concurrency=4)
        encoded = await hasher.hash("correct horse")
        ok = await hasher.verify("correct horse", encoded)
    """

    def __init__(self, argon: Argon | None = None, *, max_concurrency: int = 2) -> None:
        if max_concurrency < 1:
            raise ValueError(f"max_concurrency must be at least 1, got {max_concurrency}")
        self._argon = argon or Argon()
        self._max_concurrency = max_concurrency
        self._semaphore = asyncio.Semaphore(max_concurrency)

    @property
    def argon(self) -> Argon:
        return self._argon

    @property
    def max_concurrency(self) -> int:
        return self._max_concurrency

    async def hash(self, password: str | bytes) -> str:
        """Hash a password in a worker thread. See :meth:`Argon.hash`."""
        return await self._run(self._argon.hash, password)

    async def verify(self, password: str | bytes, encoded: str) -> bool:
        """Verify a password in a worker thread. See :meth:`Argon.verify`."""
        return await self._run(self._argon.verify, password, encoded)

    async def needs_rehash(self, encoded: str) -> bool:
        """No derivation involved, so this runs inline."""
        return self._argon.needs_rehash(encoded)

    async def _run(self, func, *args):
        if self._semaphore.locked():
            logger.debug("All %d derivation slots busy, waiting", self._max_concurrency)
        async with self._semaphore:
            return await asyncio.to_thread(func, *args)
