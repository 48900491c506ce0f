"""Tests for AsyncArgon — async hashing with bounded concurrency."""

import asyncio
import threading
import time

import pytest

from noble import Argon, AsyncArgon, EmptyPasswordError, MalformedHashError
from conftest import GOLDEN_HASH, GOLDEN_PASSWORD, fake_kdf

pytestmark = pytest.mark.asyncio


class SlowKDF:
    """fake_kdf that sleeps and tracks how many calls overlap."""

    def __init__(self, delay: float = 0.05) -> None:
        self._delay = delay
        self._lock = threading.Lock()
        self.in_flight = 0
        self.max_in_flight = 0

    def __call__(self, password, salt, **kwargs):
        with self._lock:
            self.in_flight += 1
            self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            time.sleep(self._delay)
            return fake_kdf(password, salt, **kwargs)
        finally:
            with self._lock:
                self.in_flight -= 1


class TestAsyncArgon:
    async def test_hash_and_verify(self, argon):
        hasher = AsyncArgon(argon)
        encoded = await hasher.hash("correcthorse")
        assert await hasher.verify("correcthorse", encoded) is True
        assert await hasher.verify("wronghorse", encoded) is False

    async def test_golden_vector(self):
        hasher = AsyncArgon()
        assert await hasher.verify(GOLDEN_PASSWORD, GOLDEN_HASH) is True

    async def test_needs_rehash(self, argon):
        hasher = AsyncArgon(argon)
        encoded = await hasher.hash("password")
        assert await hasher.needs_rehash(encoded) is False
        assert await hasher.needs_rehash(GOLDEN_HASH) is True

    async def test_errors_propagate(self, argon):
        hasher = AsyncArgon(argon)
        with pytest.raises(EmptyPasswordError):
            await hasher.hash("")
        with pytest.raises(MalformedHashError):
            await hasher.verify("password", "$argon2id$v=19")

    async def test_concurrency_is_bounded(self, fast_params):
        kdf = SlowKDF()
        hasher = AsyncArgon(Argon(fast_params, kdf=kdf), max_concurrency=2)

        results = await asyncio.gather(*(hasher.hash(f"password{i}") for i in range(6)))

        assert len(set(results)) == 6
        assert kdf.max_in_flight <= 2

    async def test_defaults(self):
        hasher = AsyncArgon()
        assert hasher.max_concurrency == 2
        assert isinstance(hasher.argon, Argon)

    async def test_invalid_concurrency(self):
        with pytest.raises(ValueError):
            AsyncArgon(max_concurrency=0)
