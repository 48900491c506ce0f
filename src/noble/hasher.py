"""Argon — hash passwords into encoded strings and verify them.

Every call works on its own locals. An Argon instance only holds immutable
configuration and its collaborators, so one instance can be shared across
threads. Bounding the number of concurrent derivations is up to the caller
(see :class:`noble.aio.AsyncArgon`).
"""

from __future__ import annotations

import hmac
import logging

from noble.config import Argon2Params, VerifyLimits
from noble.encoding import DecodedHash, decode_hash, encode_hash
from noble.entropy import RandomSource, SystemRandomSource
from noble.errors import EmptyPasswordError, NobleError, RandomGenerationError
from noble.kdf import ALGORITHM_ID, ARGON2_VERSION, KeyDerivation, derive

logger = logging.getLogger("noble.hasher")


def _to_bytes(password: str | bytes) -> bytes:
    if isinstance(password, str):
        return password.encode("utf-8")
    if isinstance(password, (bytes, bytearray)):
        return bytes(password)
    raise TypeError(f"password must be str or bytes, got {type(password).__name__}")


def keys_match(candidate: bytes, expected: bytes) -> bool:
    """Compare two derived keys in constant time."""
    return hmac.compare_digest(candidate, expected)


class Argon:
    """Argon2id password hasher.

    Args:
        params: Hashing parameters (default Argon2Params()).
        limits: Guards for verifying stored hashes (default VerifyLimits()).
        random_source: Salt provider (default SystemRandomSource()).
        kdf: Key derivation function (default :func:`noble.kdf.derive`).

    Usage:
        argon = Argon()
        encoded = argon.hash("correct horse")
        argon.verify("correct horse", encoded)  # True
    """

    def __init__(
        self,
        params: Argon2Params | None = None,
        *,
        limits: VerifyLimits | None = None,
        random_source: RandomSource | None = None,
        kdf: KeyDerivation | None = None,
    ) -> None:
        self._params = params or Argon2Params()
        self._limits = limits or VerifyLimits()
        self._random_source = random_source or SystemRandomSource()
        self._kdf = kdf or derive

    @property
    def params(self) -> Argon2Params:
        return self._params

    @property
    def limits(self) -> VerifyLimits:
        return self._limits

    def hash(self, password: str | bytes) -> str:
        """Hash a password with a fresh random salt.

        ``params.min_password_length`` is not enforced here.

        Returns:
            The encoded hash string.

        Raises:
            EmptyPasswordError: If the password is empty.
            RandomGenerationError: If the random source fails.
            TypeError: If the password is not str or bytes.
        """
        secret = _to_bytes(password)
        if not secret:
            raise EmptyPasswordError("Empty password not supported")

        salt = self._generate_salt()
        params = self._params
        key = self._kdf(
            secret,
            salt,
            time_cost=params.time_cost,
            memory_cost=params.memory_cost,
            parallelism=params.parallelism,
            hash_len=params.hash_len,
        )
        logger.debug(
            "Hashed password (m=%d, t=%d, p=%d, hash_len=%d)",
            params.memory_cost, params.time_cost, params.parallelism, params.hash_len,
        )
        return encode_hash(
            salt,
            key,
            memory_cost=params.memory_cost,
            time_cost=params.time_cost,
            parallelism=params.parallelism,
        )

    def verify(self, password: str | bytes, encoded: str) -> bool:
        """Check a password against an encoded hash.

        The derivation is re-run with the parameters, salt and key length
        embedded in ``encoded`` and compared in constant time.

        Returns:
            True if the password matches, False otherwise.

        Raises:
            MalformedHashError, ParameterParseError, EncodingError: If the
                hash cannot be decoded. Never reported as a mismatch.
            UnsupportedHashError, ParameterLimitError: If the hash is
                refused by this instance's VerifyLimits or falls below
                the minimums Argon2 accepts.
            TypeError: If the password is not str or bytes.
        """
        decoded = decode_hash(encoded)
        try:
            self._limits.check(decoded)
        except NobleError as e:
            logger.warning("Refusing to verify hash: %s", e.message)
            raise

        candidate = self._kdf(
            _to_bytes(password),
            decoded.salt,
            time_cost=decoded.time_cost,
            memory_cost=decoded.memory_cost,
            parallelism=decoded.parallelism,
            hash_len=len(decoded.key),
        )
        logger.debug(
            "Verified password (m=%d, t=%d, p=%d, hash_len=%d)",
            decoded.memory_cost, decoded.time_cost, decoded.parallelism, len(decoded.key),
        )
        return keys_match(candidate, decoded.key)

    def needs_rehash(self, encoded: str) -> bool:
        """Return True if ``encoded`` was made with different parameters.

        Useful after raising the cost settings: verify the password as usual,
        then store a fresh hash when this returns True.

        Raises:
            MalformedHashError, ParameterParseError, EncodingError: If the
                hash cannot be decoded.
        """
        decoded = decode_hash(encoded)
        return not self._matches_params(decoded)

    def _matches_params(self, decoded: DecodedHash) -> bool:
        params = self._params
        return (
            decoded.algorithm == ALGORITHM_ID
            and decoded.version == f"v={ARGON2_VERSION}"
            and decoded.memory_cost == params.memory_cost
            and decoded.time_cost == params.time_cost
            and decoded.parallelism == params.parallelism
            and len(decoded.salt) == params.salt_len
            and len(decoded.key) == params.hash_len
        )

    def _generate_salt(self) -> bytes:
        try:
            return self._random_source.generate(self._params.salt_len)
        except RandomGenerationError:
            logger.warning("Random source failed to generate salt")
            raise
        except Exception as e:
            logger.warning("Random source failed to generate salt")
            raise RandomGenerationError("Could not generate salt") from e


_default_argon: Argon | None = None


def _get_default() -> Argon:
    global _default_argon
    if _default_argon is None:
        _default_argon = Argon()
    return _default_argon


def hash_password(password: str | bytes) -> str:
    """Hash a password with the default Argon settings.

    Args:
        password: The plain text password to hash.

    Returns:
        The encoded hash string.
    """
    return _get_default().hash(password)


def verify_password(plain_password: str | bytes, hashed_password: str) -> bool:
    """Verify a password against its encoded hash with the default settings.

    Args:
        plain_password: The plain text password to verify.
        hashed_password: The stored encoded hash.

    Returns:
        True if the password matches, False otherwise. Malformed hashes raise.
    """
    return _get_default().verify(plain_password, hashed_password)
