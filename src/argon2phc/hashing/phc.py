"""PHC string format codec.

Encodes a Digest as

    $<id>[$v=<version>]$m=<m>,t=<t>,p=<p>[,data=<b64>]$<b64 salt>$<b64 hash>

and parses such strings back. Base64 uses the standard alphabet without
padding, as the PHC string format requires. Decoding is strict about
syntax but does not judge the algorithm id: any non-empty id is returned
as-is for the caller to accept or reject. A "keyid" parameter is accepted
and dropped, since the key is supplied again at verify time; such strings
do not re-encode byte for byte.
"""

import base64
import re

from argon2phc.core.exceptions import MalformedDigestError
from argon2phc.hashing.types import Digest, HashParameters

_B64_RE = re.compile(r"[A-Za-z0-9+/]*")
_DECIMAL_RE = re.compile(r"0|[1-9][0-9]*")

_INT_PARAMS = ("m", "t", "p")
_IGNORED_PARAMS = ("keyid",)


def b64encode(data: bytes) -> str:
    """Base64-encode without padding."""
    return base64.b64encode(data).decode("ascii").rstrip("=")


def b64decode(value: str) -> bytes:
    """Decode unpadded base64, rejecting anything encode() would not produce.

    Raises:
        MalformedDigestError: If the value is not canonical unpadded base64.
    """
    if not _B64_RE.fullmatch(value) or len(value) % 4 == 1:
        raise MalformedDigestError(f"Invalid base64 value: {value!r}")
    decoded = base64.b64decode(value + "=" * (-len(value) % 4))
    # Non-zero trailing bits would decode to the same bytes as the canonical form
    if b64encode(decoded) != value:
        raise MalformedDigestError(f"Non-canonical base64 value: {value!r}")
    return decoded


def _parse_decimal(key: str, value: str) -> int:
    if not _DECIMAL_RE.fullmatch(value):
        raise MalformedDigestError(f"Parameter {key} is not a decimal integer: {value!r}")
    return int(value)


def _parse_parameters(segment: str) -> HashParameters:
    values: dict[str, str] = {}
    for pair in segment.split(","):
        key, sep, value = pair.partition("=")
        if not sep:
            raise MalformedDigestError(f"Parameter without value: {pair!r}")
        if key not in (*_INT_PARAMS, "data", *_IGNORED_PARAMS):
            raise MalformedDigestError(f"Unknown parameter: {key!r}")
        if key in values:
            raise MalformedDigestError(f"Duplicate parameter: {key!r}")
        values[key] = value

    for key in _IGNORED_PARAMS:
        values.pop(key, None)

    missing = [key for key in _INT_PARAMS if key not in values]
    if missing:
        raise MalformedDigestError(f"Missing parameters: {', '.join(missing)}")

    return HashParameters(
        memory_cost=_parse_decimal("m", values["m"]),
        time_cost=_parse_decimal("t", values["t"]),
        parallelism=_parse_decimal("p", values["p"]),
        associated_data=b64decode(values["data"]) if "data" in values else b"",
    )


def encode(digest: Digest) -> str:
    """Serialize a digest to its PHC string.

    Args:
        digest: Digest to encode. Salt and hash are emitted when present;
            a hash without a salt cannot be represented.

    Returns:
        The PHC string.

    Raises:
        MalformedDigestError: If the digest has a hash but no salt.
    """
    if digest.hash is not None and digest.salt is None:
        raise MalformedDigestError("A digest with a hash must also carry a salt")

    fields = ["", digest.id]
    if digest.version is not None:
        fields.append(f"v={digest.version}")

    params = digest.parameters
    if params is not None:
        block = f"m={params.memory_cost},t={params.time_cost},p={params.parallelism}"
        if params.associated_data:
            block += f",data={b64encode(params.associated_data)}"
        fields.append(block)

    if digest.salt is not None:
        fields.append(b64encode(digest.salt))
    if digest.hash is not None:
        fields.append(b64encode(digest.hash))

    return "$".join(fields)


def decode(encoded: str) -> Digest:
    """Parse a PHC string into a Digest.

    Args:
        encoded: The PHC string.

    Returns:
        The parsed digest. Salt, hash and parameters are None when the
        string stops before them.

    Raises:
        MalformedDigestError: If the string is not a well-formed PHC string.
    """
    fields = encoded.split("$")
    if len(fields) < 2 or fields[0] != "":
        raise MalformedDigestError("PHC string must start with '$<id>'")

    algorithm_id = fields[1]
    if not algorithm_id:
        raise MalformedDigestError("Empty algorithm id")

    rest = fields[2:]
    version = None
    if rest and rest[0].startswith("v="):
        version = _parse_decimal("v", rest.pop(0)[2:])

    parameters = None
    if rest and "=" in rest[0]:
        parameters = _parse_parameters(rest.pop(0))

    if len(rest) > 2:
        raise MalformedDigestError("Too many fields in PHC string")

    salt = b64decode(rest[0]) if len(rest) > 0 else None
    hash_ = b64decode(rest[1]) if len(rest) > 1 else None

    return Digest(
        id=algorithm_id,
        parameters=parameters,
        salt=salt,
        hash=hash_,
        version=version,
    )
