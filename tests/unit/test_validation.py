"""Unit tests for Argon2 parameter bounds."""

import pytest

from argon2phc.core.exceptions import ParameterOutOfRangeError
from argon2phc.hashing.validation import (
    MAX_HASH_LENGTH,
    MAX_MEMORY_COST,
    MAX_PARALLELISM,
    MAX_TIME_COST,
    validate_parameters,
)


class TestValidateParameters:
    """Tests for validate_parameters()."""

    def test_defaults_pass(self) -> None:
        validate_parameters(32, 65536, 3, 4)

    def test_maximum_values_pass(self) -> None:
        validate_parameters(MAX_HASH_LENGTH, MAX_MEMORY_COST, MAX_TIME_COST, MAX_PARALLELISM)

    def test_minimums_are_not_checked(self) -> None:
        """Too-small values are left for the primitive to reject."""
        validate_parameters(0, 0, 0, 0)

    @pytest.mark.parametrize(
        ("kwargs", "message"),
        [
            ({"hash_length": 2**32}, "Hash length is too large"),
            ({"memory_cost": 2**32}, "Memory cost is too large"),
            ({"time_cost": 2**32}, "Time cost is too large"),
            ({"parallelism": 2**24}, "Parallelism is too large"),
        ],
    )
    def test_oversized_parameter_raises(self, kwargs: dict, message: str) -> None:
        params = {"hash_length": 32, "memory_cost": 65536, "time_cost": 3, "parallelism": 4}
        params.update(kwargs)
        with pytest.raises(ParameterOutOfRangeError, match=message):
            validate_parameters(**params)

    def test_hash_length_checked_first(self) -> None:
        with pytest.raises(ParameterOutOfRangeError, match="Hash length"):
            validate_parameters(2**53, 2**53, 2**53, 2**53)

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            validate_parameters(32, 65536, 3, 2**24)
