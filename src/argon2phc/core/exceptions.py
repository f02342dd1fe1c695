"""Exception hierarchy for argon2phc.

All errors raised by the package derive from Argon2PHCError so callers can
catch them with a single except clause.
"""


class Argon2PHCError(Exception):
    """Base class for all argon2phc errors."""


class ParameterOutOfRangeError(Argon2PHCError, ValueError):
    """A cost parameter exceeds the bit width allowed by Argon2."""


class EntropyUnavailableError(Argon2PHCError):
    """The random source failed to produce salt bytes."""


class PrimitiveFailureError(Argon2PHCError):
    """The Argon2 primitive rejected its inputs or failed to compute.

    Attributes:
        code: Error code returned by the Argon2 library, or None when the
            failure happened before the library was called.
    """

    def __init__(self, message: str, code: int | None = None) -> None:
        super().__init__(message)
        self.code = code


class MalformedDigestError(Argon2PHCError, ValueError):
    """An encoded digest could not be parsed as a PHC string."""
