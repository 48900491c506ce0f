"""Noble configuration — dataclasses for hashing parameters and verify limits."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from noble.errors import ParameterLimitError, UnsupportedHashError

if TYPE_CHECKING:
    from noble.encoding import DecodedHash

UINT8_MAX = 2**8 - 1
UINT32_MAX = 2**32 - 1

# Argon2 lower bounds enforced by the reference implementation.
MIN_HASH_LEN = 4
MIN_SALT_LEN = 8
MIN_MEMORY_PER_LANE = 8


def _check_range(name: str, value: int, low: int, high: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {type(value).__name__}")
    if not low <= value <= high:
        raise ValueError(f"{name} must be between {low} and {high}, got {value}")


@dataclass(frozen=True, slots=True)
class Argon2Params:
    """Tuning parameters for Argon2id. Pass to Argon to change the defaults.

    Defaults give roughly 60 MiB of memory per derivation, a single pass
    and four lanes.

    ``min_password_length`` is advisory metadata for callers that enforce a
    password policy. Hashing never checks it.

    Example:
        Argon2Params()                          # All defaults
        Argon2Params(time_cost=3)               # Override iterations only
        Argon2Params(memory_cost=19 * 1024, parallelism=1)
    """

    time_cost: int = 1
    memory_cost: int = 60 * 1024
    parallelism: int = 4
    hash_len: int = 32
    salt_len: int = 16
    min_password_length: int = 6

    def __post_init__(self) -> None:
        """Validate all fields at construction time."""
        _check_range("time_cost", self.time_cost, 1, UINT32_MAX)
        _check_range("memory_cost", self.memory_cost, 1, UINT32_MAX)
        _check_range("parallelism", self.parallelism, 1, UINT8_MAX)
        _check_range("hash_len", self.hash_len, MIN_HASH_LEN, UINT32_MAX)
        _check_range("salt_len", self.salt_len, MIN_SALT_LEN, UINT32_MAX)
        _check_range("min_password_length", self.min_password_length, 0, UINT32_MAX)
        if self.memory_cost < MIN_MEMORY_PER_LANE * self.parallelism:
            raise ValueError(
                f"memory_cost must be at least {MIN_MEMORY_PER_LANE} KiB per lane "
                f"({MIN_MEMORY_PER_LANE * self.parallelism} for parallelism="
                f"{self.parallelism}), got {self.memory_cost}"
            )


@dataclass(frozen=True, slots=True)
class VerifyLimits:
    """Guards applied to a decoded hash before any derivation runs.

    A hash string carries its own cost parameters, so verifying an untrusted
    string can be made arbitrarily expensive. These limits refuse such
    strings up front. Set an individual field to None to skip that check.

    Example:
        VerifyLimits()                          # All defaults
        VerifyLimits(max_memory_cost=256 * 1024)
        VerifyLimits(allowed_algorithms=None)   # Accept any algorithm id
    """

    allowed_algorithms: tuple[str, ...] | None = ("argon2id",)
    allowed_versions: tuple[int, ...] | None = (19,)
    max_memory_cost: int | None = 1024 * 1024  # 1 GiB
    max_time_cost: int | None = 64
    max_parallelism: int | None = 64
    max_hash_len: int | None = 1024

    def __post_init__(self) -> None:
        for field_name in ("max_memory_cost", "max_time_cost", "max_parallelism", "max_hash_len"):
            value = getattr(self, field_name)
            if value is not None:
                _check_range(field_name, value, 1, UINT32_MAX)

    def check(self, decoded: DecodedHash) -> None:
        """Raise if the decoded hash is outside these limits.

        Raises:
            UnsupportedHashError: Algorithm id or version not allowed.
            ParameterLimitError: An embedded cost exceeds its maximum, or the
                hash is below the minimums Argon2 can derive with.
        """
        if self.allowed_algorithms is not None and decoded.algorithm not in self.allowed_algorithms:
            raise UnsupportedHashError("Unsupported hash algorithm")

        if self.allowed_versions is not None:
            if _parse_version(decoded.version) not in self.allowed_versions:
                raise UnsupportedHashError("Unsupported hash version")

        # Argon2 minimums apply even when every configurable limit is off.
        for name, value, minimum in (
            ("salt length", len(decoded.salt), MIN_SALT_LEN),
            ("key length", len(decoded.key), MIN_HASH_LEN),
            ("memory cost", decoded.memory_cost, MIN_MEMORY_PER_LANE * decoded.parallelism),
        ):
            if value < minimum:
                raise ParameterLimitError(f"Hash {name} {value} below minimum {minimum}")

        for name, value, limit in (
            ("memory cost", decoded.memory_cost, self.max_memory_cost),
            ("time cost", decoded.time_cost, self.max_time_cost),
            ("parallelism", decoded.parallelism, self.max_parallelism),
            ("key length", len(decoded.key), self.max_hash_len),
        ):
            if limit is not None and value > limit:
                raise ParameterLimitError(f"Hash {name} {value} exceeds limit {limit}")


def _parse_version(segment: str) -> int | None:
    """Parse a ``v=<n>`` version segment, returning None when it is not one."""
    prefix, sep, digits = segment.partition("=")
    if prefix != "v" or not sep or not digits.isascii() or not digits.isdigit():
        return None
    return int(digits)
