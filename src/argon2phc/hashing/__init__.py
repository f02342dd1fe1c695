"""Argon2 hashing, PHC encoding and verification."""

from argon2phc.hashing.passwords import hash_password, needs_rehash, verify_password
from argon2phc.hashing.types import Algorithm, Digest, HashOptions, HashParameters

__all__ = [
    "Algorithm",
    "Digest",
    "HashOptions",
    "HashParameters",
    "hash_password",
    "needs_rehash",
    "verify_password",
]
