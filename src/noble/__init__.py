"""Noble — Argon2id password hashing with self-describing encoded hashes."""

__version__ = "0.1.0"

from noble.aio import AsyncArgon
from noble.config import Argon2Params, VerifyLimits
from noble.encoding import DecodedHash, decode_hash, encode_hash
from noble.entropy import RandomSource, SystemRandomSource
from noble.errors import (
    EmptyPasswordError,
    EncodingError,
    HashFormatError,
    MalformedHashError,
    NobleError,
    ParameterLimitError,
    ParameterParseError,
    RandomGenerationError,
    UnsupportedHashError,
)
from noble.hasher import Argon, hash_password, verify_password
from noble.kdf import ALGORITHM_ID, ARGON2_VERSION, derive

__all__ = [
    "ALGORITHM_ID",
    "ARGON2_VERSION",
    "Argon",
    "Argon2Params",
    "AsyncArgon",
    "DecodedHash",
    "EmptyPasswordError",
    "EncodingError",
    "HashFormatError",
    "MalformedHashError",
    "NobleError",
    "ParameterLimitError",
    "ParameterParseError",
    "RandomGenerationError",
    "RandomSource",
    "SystemRandomSource",
    "UnsupportedHashError",
    "VerifyLimits",
    "decode_hash",
    "derive",
    "encode_hash",
    "hash_password",
    "verify_password",
]
