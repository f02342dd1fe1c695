"""Unit tests for the Argon2 primitive and random source adapters."""

from unittest.mock import patch

import pytest

from argon2phc.core.exceptions import EntropyUnavailableError, PrimitiveFailureError
from argon2phc.hashing.primitive import SALT_LENGTH, compute_hash, generate_salt
from argon2phc.hashing.types import Algorithm

FAST = {"time_cost": 1, "memory_cost": 64, "parallelism": 1, "hash_length": 32}


class TestComputeHash:
    """Tests for compute_hash()."""

    def test_matches_argon2_cffi_without_extras(self) -> None:
        from argon2.low_level import ARGON2_VERSION, Type, hash_secret_raw

        expected = hash_secret_raw(b"password", b"somesaltsomesalt", 1, 64, 1, 32, Type.ID, ARGON2_VERSION)
        assert compute_hash(b"password", b"somesaltsomesalt", algorithm=Algorithm.ARGON2ID, **FAST) == expected

    def test_deterministic(self) -> None:
        first = compute_hash(b"pw", b"saltsalt", algorithm=Algorithm.ARGON2I, **FAST)
        second = compute_hash(b"pw", b"saltsalt", algorithm=Algorithm.ARGON2I, **FAST)
        assert first == second

    def test_output_length(self) -> None:
        out = compute_hash(b"pw", b"saltsalt", algorithm=Algorithm.ARGON2D, **{**FAST, "hash_length": 7})
        assert len(out) == 7

    @pytest.mark.parametrize("field", ["secret", "associated_data"])
    def test_optional_inputs_change_output(self, field: str) -> None:
        plain = compute_hash(b"pw", b"saltsalt", algorithm=Algorithm.ARGON2ID, **FAST)
        keyed = compute_hash(b"pw", b"saltsalt", algorithm=Algorithm.ARGON2ID, **FAST, **{field: b"extra"})
        assert plain != keyed

    def test_empty_password(self) -> None:
        assert len(compute_hash(b"", b"saltsalt", algorithm=Algorithm.ARGON2ID, **FAST)) == 32

    def test_embedded_null_is_significant(self) -> None:
        with_null = compute_hash(b"pass\x00word", b"saltsalt", algorithm=Algorithm.ARGON2ID, **FAST)
        truncated = compute_hash(b"pass", b"saltsalt", algorithm=Algorithm.ARGON2ID, **FAST)
        assert with_null != truncated

    def test_short_salt_rejected(self) -> None:
        with pytest.raises(PrimitiveFailureError, match="Salt is too short") as exc_info:
            compute_hash(b"pw", b"salt", algorithm=Algorithm.ARGON2ID, **FAST)
        assert exc_info.value.code < 0

    def test_memory_below_minimum_rejected(self) -> None:
        with pytest.raises(PrimitiveFailureError):
            compute_hash(b"pw", b"saltsalt", algorithm=Algorithm.ARGON2ID, **{**FAST, "memory_cost": 1})

    def test_negative_value_rejected(self) -> None:
        with pytest.raises(PrimitiveFailureError) as exc_info:
            compute_hash(b"pw", b"saltsalt", algorithm=Algorithm.ARGON2ID, **{**FAST, "time_cost": -1})
        assert exc_info.value.code is None


class TestGenerateSalt:
    """Tests for generate_salt()."""

    def test_default_length(self) -> None:
        assert len(generate_salt()) == SALT_LENGTH == 16

    def test_salts_differ(self) -> None:
        assert generate_salt() != generate_salt()

    def test_entropy_failure_propagates(self) -> None:
        with patch("argon2phc.hashing.primitive.secrets.token_bytes", side_effect=OSError("no entropy")):
            with pytest.raises(EntropyUnavailableError):
                generate_salt()
