"""Bit-width checks for Argon2 cost parameters.

The limits mirror the field widths of the argon2 context: 32-bit output
length, memory and passes, 24-bit lanes. Minimums are left to the
primitive.
"""

from argon2phc.core.exceptions import ParameterOutOfRangeError

MAX_HASH_LENGTH = 2**32 - 1
MAX_MEMORY_COST = 2**32 - 1
MAX_TIME_COST = 2**32 - 1
MAX_PARALLELISM = 2**24 - 1


def validate_parameters(
    hash_length: int, memory_cost: int, time_cost: int, parallelism: int
) -> None:
    """Raise ParameterOutOfRangeError if any parameter exceeds its width.

    Runs before salt generation and hashing so oversized requests fail
    without consuming entropy or memory.
    """
    if hash_length > MAX_HASH_LENGTH:
        raise ParameterOutOfRangeError("Hash length is too large")
    if memory_cost > MAX_MEMORY_COST:
        raise ParameterOutOfRangeError("Memory cost is too large")
    if time_cost > MAX_TIME_COST:
        raise ParameterOutOfRangeError("Time cost is too large")
    if parallelism > MAX_PARALLELISM:
        raise ParameterOutOfRangeError("Parallelism is too large")
