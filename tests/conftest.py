"""Test fixtures for noble tests.

Most tests use tiny Argon2 parameters so each derivation takes well under a
millisecond. The golden-vector tests use the defaults.
"""

import hashlib

import pytest

from noble import Argon, Argon2Params

GOLDEN_PASSWORD = "verysecret"
GOLDEN_HASH = (
    "$argon2id$v=19$m=61440,t=1,p=4"
    "$oW7b7qw+6jiZSeiuEuF9Aw"
    "$zXHSJUld/AN2xfWEedPJZU+MnGAUzEX9QOK6cpPZzLU"
)


class FailingRandomSource:
    """Random source that always fails, counting how often it was asked."""

    def __init__(self, exc: Exception | None = None) -> None:
        self.calls = 0
        self._exc = exc or OSError("entropy pool unavailable")

    def generate(self, length: int) -> bytes:
        self.calls += 1
        raise self._exc


class RecordingRandomSource:
    """Deterministic random source that records requested lengths."""

    def __init__(self, fill: int = 0xAB) -> None:
        self.requests: list[int] = []
        self._fill = fill

    def generate(self, length: int) -> bytes:
        self.requests.append(length)
        return bytes([self._fill]) * length


def fake_kdf(password, salt, *, time_cost, memory_cost, parallelism, hash_len):
    """Cheap deterministic stand-in for Argon2id."""
    seed = hashlib.sha256(
        password + salt + f"{time_cost}:{memory_cost}:{parallelism}".encode()
    ).digest()
    return (seed * (hash_len // len(seed) + 1))[:hash_len]


@pytest.fixture
def fast_params():
    """Argon2Params small enough for fast tests."""
    return Argon2Params(time_cost=1, memory_cost=64, parallelism=1, hash_len=32)


@pytest.fixture
def argon(fast_params):
    """Argon instance with fast parameters and the real KDF."""
    return Argon(fast_params)


@pytest.fixture
def failing_source():
    return FailingRandomSource()


@pytest.fixture
def recording_source():
    return RecordingRandomSource()
