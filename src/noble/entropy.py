"""Random source — pluggable provider of salt bytes."""

import secrets
from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """Protocol for salt byte providers.

    Production code uses SystemRandomSource. Tests inject their own
    implementation to simulate a failing platform RNG.
    """

    def generate(self, length: int) -> bytes:
        """Return ``length`` cryptographically secure random bytes.

        Raises:
            Exception: Any failure. Argon wraps it in RandomGenerationError.
        """
        ...


class SystemRandomSource:
    """Random bytes from the operating system CSPRNG via :mod:`secrets`."""

    def generate(self, length: int) -> bytes:
        return secrets.token_bytes(length)
