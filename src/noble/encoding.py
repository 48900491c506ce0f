"""Encoded hash strings — formatting and strict parsing.

Format::

    $argon2id$v=19$m=<memory_cost>,t=<time_cost>,p=<parallelism>$<salt>$<key>

Salt and key are standard-alphabet base64 with the padding stripped. The
parameter segment has a fixed field order (memory, time, parallelism).
"""

import base64
import binascii
import re
from dataclasses import dataclass

from noble.config import UINT8_MAX, UINT32_MAX
from noble.errors import EncodingError, MalformedHashError, ParameterParseError
from noble.kdf import ALGORITHM_ID, ARGON2_VERSION

DELIMITER = "$"
SEGMENT_COUNT = 6

# Digit counts are capped so oversized values fail the range check, not int().
_PARAMS_RE = re.compile(r"m=([0-9]{1,10}),t=([0-9]{1,10}),p=([0-9]{1,3})")
_B64_RAW_RE = re.compile(r"[A-Za-z0-9+/]+")


@dataclass(frozen=True, slots=True)
class DecodedHash:
    """Everything an encoded hash string carries.

    ``algorithm`` and ``version`` are the raw segments and are not validated
    here. The derived key length is ``len(key)``.
    """

    algorithm: str
    version: str
    memory_cost: int
    time_cost: int
    parallelism: int
    salt: bytes
    key: bytes


def b64encode_raw(data: bytes) -> str:
    """Base64-encode with the standard alphabet and no padding."""
    return base64.b64encode(data).rstrip(b"=").decode("ascii")


def b64decode_raw(segment: str, what: str = "segment") -> bytes:
    """Decode unpadded standard base64, rejecting padding and stray characters.

    Raises:
        EncodingError: On padding, whitespace, non-alphabet characters,
            an empty segment or an impossible length.
    """
    if not _B64_RAW_RE.fullmatch(segment) or len(segment) % 4 == 1:
        raise EncodingError(f"Invalid base64 in {what}")
    try:
        return base64.b64decode(segment + "=" * (-len(segment) % 4), validate=True)
    except binascii.Error:
        raise EncodingError(f"Invalid base64 in {what}")


def encode_hash(
    salt: bytes,
    key: bytes,
    *,
    memory_cost: int,
    time_cost: int,
    parallelism: int,
) -> str:
    """Build the canonical encoded hash string.

    Args:
        salt: The salt used for the derivation.
        key: The derived key bytes.
        memory_cost: Memory usage in KiB.
        time_cost: Number of iterations.
        parallelism: Number of lanes.

    Returns:
        ``$argon2id$v=19$m=..,t=..,p=..$<salt>$<key>``
    """
    return (
        f"${ALGORITHM_ID}$v={ARGON2_VERSION}"
        f"$m={memory_cost},t={time_cost},p={parallelism}"
        f"${b64encode_raw(salt)}${b64encode_raw(key)}"
    )


def parse_params(segment: str) -> tuple[int, int, int]:
    """Parse ``m=<uint32>,t=<uint32>,p=<uint8>`` into (memory, time, parallelism).

    Raises:
        ParameterParseError: On any deviation from the exact pattern, a zero
            value, or a value that overflows its field.
    """
    match = _PARAMS_RE.fullmatch(segment)
    if match is None:
        raise ParameterParseError("Invalid parameter segment")

    memory_cost, time_cost, parallelism = (int(group) for group in match.groups())
    for name, value, high in (
        ("m", memory_cost, UINT32_MAX),
        ("t", time_cost, UINT32_MAX),
        ("p", parallelism, UINT8_MAX),
    ):
        if not 1 <= value <= high:
            raise ParameterParseError(f"Parameter {name} out of range")
    return memory_cost, time_cost, parallelism


def decode_hash(encoded: str) -> DecodedHash:
    """Parse an encoded hash string.

    Raises:
        MalformedHashError: Not exactly six ``$``-separated segments.
        ParameterParseError: Bad parameter segment.
        EncodingError: Bad salt or key segment.
    """
    if not isinstance(encoded, str):
        raise MalformedHashError("Encoded hash must be a string")

    parts = encoded.split(DELIMITER)
    if len(parts) != SEGMENT_COUNT:
        raise MalformedHashError("Incorrectly formatted hash")

    _, algorithm, version, params, salt_b64, key_b64 = parts
    memory_cost, time_cost, parallelism = parse_params(params)
    salt = b64decode_raw(salt_b64, "salt")
    key = b64decode_raw(key_b64, "key")

    return DecodedHash(
        algorithm=algorithm,
        version=version,
        memory_cost=memory_cost,
        time_cost=time_cost,
        parallelism=parallelism,
        salt=salt,
        key=key,
    )
