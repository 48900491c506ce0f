"""Vulture whitelist — false positives that are public API, not dead code."""

# ---------------------------------------------------------------------------
# Public API methods and properties (used by consumers, not internally)
# ---------------------------------------------------------------------------
from noble.aio import AsyncArgon
from noble.config import Argon2Params
from noble.hasher import Argon

Argon.params
Argon.limits
Argon.needs_rehash
AsyncArgon.argon
AsyncArgon.max_concurrency
AsyncArgon.needs_rehash
Argon2Params.min_password_length

# ---------------------------------------------------------------------------
# Protocol members (implemented by callers)
# ---------------------------------------------------------------------------
from noble.entropy import RandomSource

RandomSource.generate
