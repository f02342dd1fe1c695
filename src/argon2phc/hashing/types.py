"""Value types shared by the validator, codec and orchestrator.

Digests and parameters are frozen dataclasses: a digest is built once per
hash call and only ever read afterwards.
"""

from dataclasses import dataclass
from enum import Enum

from argon2.low_level import Type

from argon2phc.core.config import Settings, get_settings


class Algorithm(Enum):
    """Argon2 variants. Values match argon2.low_level.Type."""

    ARGON2D = 0
    ARGON2I = 1
    ARGON2ID = 2

    @property
    def id(self) -> str:
        """PHC identifier, e.g. 'argon2id'."""
        return self.name.lower()

    @property
    def low_level_type(self) -> Type:
        return Type(self.value)

    @classmethod
    def from_id(cls, algorithm_id: str) -> "Algorithm | None":
        """Map a PHC identifier to a variant, or None if it is not Argon2."""
        for algorithm in cls:
            if algorithm.id == algorithm_id:
                return algorithm
        return None


@dataclass(frozen=True)
class HashParameters:
    """Cost parameters stored in a digest.

    Attributes:
        memory_cost: Memory in KiB (m)
        time_cost: Number of passes (t)
        parallelism: Number of lanes (p)
        associated_data: Non-secret context bound into the hash (b"" if absent)
    """

    memory_cost: int
    time_cost: int
    parallelism: int
    associated_data: bytes = b""


@dataclass(frozen=True)
class Digest:
    """A parsed or freshly produced Argon2 digest.

    The identifier is kept as text so foreign ids (e.g. "2a" from bcrypt)
    survive parsing; use `algorithm` to map it to a known variant.

    Attributes:
        id: PHC algorithm identifier
        parameters: Cost parameters, None if the string had no parameter block
        salt: Salt bytes, None if absent
        hash: Raw hash bytes, None if absent
        version: Value of a "v=" segment, None if absent
    """

    id: str
    parameters: HashParameters | None = None
    salt: bytes | None = None
    hash: bytes | None = None
    version: int | None = None

    @property
    def algorithm(self) -> Algorithm | None:
        return Algorithm.from_id(self.id)


@dataclass(frozen=True)
class HashOptions:
    """Caller overrides for hashing. None means "use the default".

    Attributes:
        hash_length: Output length in bytes
        time_cost: Number of passes
        memory_cost: Memory in KiB
        parallelism: Number of lanes
        algorithm: Argon2 variant
        salt: Fixed salt; a random 16-byte salt is generated when None
        associated_data: Non-secret context, persisted in the encoded digest
        secret: Keyed input, never persisted
        raw: Return the bare hash bytes instead of a PHC string
    """

    hash_length: int | None = None
    time_cost: int | None = None
    memory_cost: int | None = None
    parallelism: int | None = None
    algorithm: Algorithm | None = None
    salt: bytes | None = None
    associated_data: bytes | None = None
    secret: bytes | None = None
    raw: bool = False


@dataclass(frozen=True)
class ResolvedOptions:
    """HashOptions with every default applied."""

    hash_length: int
    time_cost: int
    memory_cost: int
    parallelism: int
    algorithm: Algorithm
    salt: bytes | None
    associated_data: bytes
    secret: bytes
    raw: bool


def _pick(value, default):
    return default if value is None else value


def resolve_options(
    options: HashOptions | None = None, settings: Settings | None = None
) -> ResolvedOptions:
    """Overlay caller options on the configured defaults.

    This is the only place defaults are applied, so hash_password and
    needs_rehash always agree on them.

    Args:
        options: Caller overrides, or None for all defaults.
        settings: Settings to take defaults from; the cached settings if None.

    Returns:
        Fully populated options. Secret and associated data become b"" when
        absent; salt stays None so the caller knows to generate one.
    """
    options = options or HashOptions()
    settings = settings or get_settings()
    return ResolvedOptions(
        hash_length=_pick(options.hash_length, settings.hash_length),
        time_cost=_pick(options.time_cost, settings.time_cost),
        memory_cost=_pick(options.memory_cost, settings.memory_cost),
        parallelism=_pick(options.parallelism, settings.parallelism),
        algorithm=_pick(options.algorithm, Algorithm.from_id(settings.algorithm)),
        salt=options.salt,
        associated_data=_pick(options.associated_data, b""),
        secret=_pick(options.secret, b""),
        raw=options.raw,
    )
