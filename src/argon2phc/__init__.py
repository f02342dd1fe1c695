"""Argon2 password hashing with PHC string encoding."""

from argon2phc.core.exceptions import (
    Argon2PHCError,
    EntropyUnavailableError,
    MalformedDigestError,
    ParameterOutOfRangeError,
    PrimitiveFailureError,
)
from argon2phc.hashing import (
    Algorithm,
    Digest,
    HashOptions,
    HashParameters,
    hash_password,
    needs_rehash,
    verify_password,
)

__version__ = "0.1.0"

__all__ = [
    # Hashing
    "hash_password",
    "verify_password",
    "needs_rehash",
    # Types
    "Algorithm",
    "Digest",
    "HashOptions",
    "HashParameters",
    # Errors
    "Argon2PHCError",
    "EntropyUnavailableError",
    "MalformedDigestError",
    "ParameterOutOfRangeError",
    "PrimitiveFailureError",
]
