"""Password hashing, verification and rehash checks.

hash_password and verify_password run salt generation and Argon2 on the
shared worker pool, so many of them can be awaited concurrently.
needs_rehash only reads the encoded parameters and is synchronous.
"""

import hmac
from functools import partial

import structlog

from argon2phc.core.exceptions import MalformedDigestError, ParameterOutOfRangeError
from argon2phc.core.workers import run_blocking
from argon2phc.hashing import phc
from argon2phc.hashing.primitive import compute_hash, generate_salt
from argon2phc.hashing.types import Digest, HashOptions, HashParameters, resolve_options
from argon2phc.hashing.validation import validate_parameters

logger = structlog.get_logger(__name__)


def _to_bytes(password: bytes | str) -> bytes:
    if isinstance(password, str):
        return password.encode("utf-8")
    return bytes(password)


async def hash_password(password: bytes | str, options: HashOptions | None = None) -> bytes | str:
    """Hash a password with Argon2.

    Args:
        password: The password. Text is UTF-8 encoded; bytes are used as-is,
            including any NUL bytes.
        options: Overrides for the default parameters.

    Returns:
        The raw hash bytes if `options.raw` is set, otherwise the PHC string.

    Raises:
        ParameterOutOfRangeError: If a parameter exceeds its bit width.
        EntropyUnavailableError: If a salt was needed and could not be generated.
        PrimitiveFailureError: If Argon2 rejected the inputs.
    """
    opts = resolve_options(options)
    validate_parameters(opts.hash_length, opts.memory_cost, opts.time_cost, opts.parallelism)

    salt = opts.salt if opts.salt is not None else await run_blocking(generate_salt)

    raw_hash = await run_blocking(
        partial(
            compute_hash,
            _to_bytes(password),
            salt,
            algorithm=opts.algorithm,
            time_cost=opts.time_cost,
            memory_cost=opts.memory_cost,
            parallelism=opts.parallelism,
            hash_length=opts.hash_length,
            secret=opts.secret,
            associated_data=opts.associated_data,
        )
    )
    logger.debug(
        "password_hashed",
        algorithm=opts.algorithm.id,
        m=opts.memory_cost,
        t=opts.time_cost,
        p=opts.parallelism,
    )

    if opts.raw:
        return raw_hash

    return phc.encode(
        Digest(
            id=opts.algorithm.id,
            parameters=HashParameters(
                memory_cost=opts.memory_cost,
                time_cost=opts.time_cost,
                parallelism=opts.parallelism,
                associated_data=opts.associated_data,
            ),
            salt=salt,
            hash=raw_hash,
        )
    )


async def verify_password(
    digest: str, password: bytes | str, *, secret: bytes | None = None
) -> bool:
    """Verify a password against a PHC-encoded Argon2 digest.

    Digests that cannot be parsed, belong to another scheme, have an empty
    salt or hash, or carry parameters wider than Argon2 allows do not match;
    they never raise.

    Args:
        digest: The stored PHC string.
        password: The candidate password.
        secret: The secret the digest was created with, if any.

    Returns:
        True if the password matches, False otherwise.
    """
    try:
        parsed = phc.decode(digest)
    except MalformedDigestError as exc:
        logger.debug("verify_unparseable_digest", error=str(exc))
        return False

    algorithm = parsed.algorithm
    if algorithm is None or parsed.parameters is None or not parsed.salt or not parsed.hash:
        logger.debug("verify_unsupported_digest", id=parsed.id)
        return False

    params = parsed.parameters
    try:
        validate_parameters(
            len(parsed.hash), params.memory_cost, params.time_cost, params.parallelism
        )
    except ParameterOutOfRangeError as exc:
        logger.debug("verify_out_of_range_digest", error=str(exc))
        return False

    candidate = await run_blocking(
        partial(
            compute_hash,
            _to_bytes(password),
            parsed.salt,
            algorithm=algorithm,
            time_cost=params.time_cost,
            memory_cost=params.memory_cost,
            parallelism=params.parallelism,
            hash_length=len(parsed.hash),
            secret=secret or b"",
            associated_data=params.associated_data,
        )
    )
    return hmac.compare_digest(candidate, parsed.hash)


def needs_rehash(digest: str, options: HashOptions | None = None) -> bool:
    """Check whether a digest was made with parameters other than the target.

    A digest carrying a version marker always needs a rehash: hashes are
    produced without one, so its version cannot be compared.

    Args:
        digest: The stored PHC string.
        options: Target parameters; defaults match hash_password's.

    Returns:
        True if the digest should be re-computed with current parameters.

    Raises:
        MalformedDigestError: If the digest is not a PHC string with parameters.
    """
    parsed = phc.decode(digest)
    if parsed.version is not None:
        return True
    if parsed.parameters is None:
        raise MalformedDigestError("Digest has no parameters")

    target = resolve_options(options)
    params = parsed.parameters
    return (
        params.memory_cost != target.memory_cost
        or params.time_cost != target.time_cost
        or params.parallelism != target.parallelism
    )
