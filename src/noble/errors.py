"""Noble errors — one exception type per failure kind, each with a stable code.

Messages name the failing part of the input but never echo password
material or the full hash string.
"""


class NobleError(Exception):
    """Base noble error with a message and a machine-readable code."""

    code = "noble_error"

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        if code is not None:
            self.code = code
        super().__init__(message)


class EmptyPasswordError(NobleError):
    """Raised when hashing is requested for a zero-length password."""

    code = "empty_password"


class RandomGenerationError(NobleError):
    """Raised when the random source cannot produce salt bytes."""

    code = "random_generation_failed"


class HashFormatError(NobleError):
    """Base for errors raised while decoding an encoded hash string."""

    code = "invalid_hash"


class MalformedHashError(HashFormatError):
    """The encoded hash does not split into exactly six segments."""

    code = "malformed_hash"


class ParameterParseError(HashFormatError):
    """The parameter segment is not exactly ``m=<uint32>,t=<uint32>,p=<uint8>``."""

    code = "invalid_parameters"


class EncodingError(HashFormatError):
    """A salt or key segment is not valid unpadded base64."""

    code = "invalid_encoding"


class UnsupportedHashError(NobleError):
    """The hash names an algorithm or version this verifier refuses to run."""

    code = "unsupported_hash"


class ParameterLimitError(NobleError):
    """An embedded cost parameter exceeds the verifier's configured maximum."""

    code = "parameter_limit_exceeded"
