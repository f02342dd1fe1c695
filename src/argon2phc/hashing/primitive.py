"""Adapters for the Argon2 primitive and the random source.

`argon2.low_level.hash_secret_raw` has no way to pass a secret key or
associated data, so the context struct is filled in directly and handed to
`argon2.low_level.core`, as the argon2-cffi docs describe for those inputs.
Both functions block and are meant to run on the worker pool.
"""

import secrets

import structlog
from argon2.low_level import ARGON2_VERSION, core, error_to_str, ffi, lib

from argon2phc.core.exceptions import EntropyUnavailableError, PrimitiveFailureError
from argon2phc.hashing.types import Algorithm

logger = structlog.get_logger(__name__)

SALT_LENGTH = 16


def _buffer(data: bytes):
    return ffi.new("uint8_t[]", data) if data else ffi.NULL


def compute_hash(
    password: bytes,
    salt: bytes,
    *,
    algorithm: Algorithm,
    time_cost: int,
    memory_cost: int,
    parallelism: int,
    hash_length: int,
    secret: bytes = b"",
    associated_data: bytes = b"",
) -> bytes:
    """Compute a raw Argon2 hash (version 0x13).

    Args:
        password: Message to hash; may contain NUL bytes.
        salt: Salt (nonce) bytes.
        algorithm: Argon2 variant.
        time_cost: Number of passes.
        memory_cost: Memory in KiB.
        parallelism: Number of lanes, also used as the thread count.
        hash_length: Output length in bytes.
        secret: Optional keyed input.
        associated_data: Optional associated data.

    Returns:
        `hash_length` bytes of output.

    Raises:
        PrimitiveFailureError: If the library rejects the inputs.
    """
    # The context only borrows these buffers; they must stay referenced
    # until core() returns.
    try:
        out = ffi.new("uint8_t[]", hash_length)
        cpwd = _buffer(password)
        csalt = _buffer(salt)
        csecret = _buffer(secret)
        cad = _buffer(associated_data)
        ctx = ffi.new(
            "argon2_context *",
            {
                "version": ARGON2_VERSION,
                "out": out,
                "outlen": hash_length,
                "pwd": cpwd,
                "pwdlen": len(password),
                "salt": csalt,
                "saltlen": len(salt),
                "secret": csecret,
                "secretlen": len(secret),
                "ad": cad,
                "adlen": len(associated_data),
                "t_cost": time_cost,
                "m_cost": memory_cost,
                "lanes": parallelism,
                "threads": parallelism,
                "allocate_cbk": ffi.NULL,
                "free_cbk": ffi.NULL,
                "flags": lib.ARGON2_DEFAULT_FLAGS,
            },
        )
    except (OverflowError, TypeError, ValueError) as exc:
        logger.error("argon2_context_rejected", error=str(exc))
        raise PrimitiveFailureError(f"Invalid Argon2 input: {exc}") from exc

    rv = core(ctx, algorithm.low_level_type.value)
    if rv != lib.ARGON2_OK:
        message = error_to_str(rv)
        logger.error("argon2_failed", code=rv, error=message, algorithm=algorithm.id)
        raise PrimitiveFailureError(message, code=rv)

    return bytes(ffi.buffer(out, hash_length))


def generate_salt(length: int = SALT_LENGTH) -> bytes:
    """Return `length` bytes from the operating system CSPRNG.

    Raises:
        EntropyUnavailableError: If the random source fails.
    """
    try:
        return secrets.token_bytes(length)
    except OSError as exc:
        logger.error("entropy_unavailable", error=str(exc))
        raise EntropyUnavailableError("Failed to generate salt") from exc
