"""Key derivation primitive — Argon2id via argon2-cffi's low-level binding."""

from typing import Protocol

from argon2.low_level import ARGON2_VERSION, Type, hash_secret_raw

ALGORITHM_ID = "argon2id"

__all__ = ["ALGORITHM_ID", "ARGON2_VERSION", "KeyDerivation", "derive"]


class KeyDerivation(Protocol):
    """Signature of a deterministic password-to-key derivation."""

    def __call__(
        self,
        password: bytes,
        salt: bytes,
        *,
        time_cost: int,
        memory_cost: int,
        parallelism: int,
        hash_len: int,
    ) -> bytes: ...


def derive(
    password: bytes,
    salt: bytes,
    *,
    time_cost: int,
    memory_cost: int,
    parallelism: int,
    hash_len: int,
) -> bytes:
    """Derive ``hash_len`` raw key bytes from a password with Argon2id.

    Args:
        password: The password bytes.
        salt: The salt bytes (at least 8).
        time_cost: Number of iterations.
        memory_cost: Memory usage in KiB.
        parallelism: Number of lanes.
        hash_len: Length of the derived key in bytes.

    Raises:
        argon2.exceptions.HashingError: If the parameters are rejected by Argon2.
    """
    return hash_secret_raw(
        secret=password,
        salt=salt,
        time_cost=time_cost,
        memory_cost=memory_cost,
        parallelism=parallelism,
        hash_len=hash_len,
        type=Type.ID,
        version=ARGON2_VERSION,
    )
