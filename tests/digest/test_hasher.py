"""Tests for BLAKE2b-256 hashing."""

import hashlib
from unittest.mock import patch

import pytest

from ledger_digest.exceptions import DigestDecodeError, HasherUnavailableError
from ledger_digest.hasher import DIGEST_SIZE, HASH_ALGORITHM, Blake2bHasher, blake2b_256


class TestBlake2b256:
    """Test the fixed hash function."""

    def test_known_vector(self, data_vector: tuple[bytes, bytes]) -> None:
        data, expected = data_vector
        assert data == b"i am data"
        assert blake2b_256(data) == expected

    def test_output_is_32_bytes(self):
        """The algorithm is 32 bytes of output, not 32 bits."""
        assert DIGEST_SIZE == 32
        assert len(blake2b_256(b"")) == 32
        assert len(blake2b_256(b"x" * 10_000)) == 32

    def test_matches_hashlib(self):
        data = b"The quick brown fox jumps over the lazy dog"
        assert blake2b_256(data) == hashlib.blake2b(data, digest_size=32).digest()

    def test_deterministic(self):
        assert blake2b_256(b"hello") == blake2b_256(b"hello")

    def test_accepts_bytes_like(self):
        expected = blake2b_256(b"abc")
        assert blake2b_256(bytearray(b"abc")) == expected
        assert blake2b_256(memoryview(b"abc")) == expected

    def test_algorithm_name(self):
        assert HASH_ALGORITHM == "blake2b-256"
        assert Blake2bHasher.algorithm == HASH_ALGORITHM

    def test_no_pluggable_hasher_interface(self):
        import ledger_digest
        from ledger_digest import hasher

        assert not hasattr(hasher, "Hasher")
        assert "Hasher" not in ledger_digest.__all__

    def test_digest_new_uses_fixed_hasher(self):
        from ledger_digest import Digest

        with patch("ledger_digest.hasher.hashlib.blake2b", side_effect=ValueError("broken")):
            with pytest.raises(HasherUnavailableError):
                Digest.new(b"data")


class TestHasherInitializationFailure:
    """A primitive that cannot be constructed is fatal, not a decode error."""

    def test_raises_hasher_unavailable(self):
        with patch("ledger_digest.hasher.hashlib.blake2b", side_effect=ValueError("broken")):
            with pytest.raises(HasherUnavailableError) as exc_info:
                Blake2bHasher().digest(b"data")

        assert not isinstance(exc_info.value, DigestDecodeError)
        assert isinstance(exc_info.value, RuntimeError)
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_logs_critical(self):
        with patch("ledger_digest.hasher.hashlib.blake2b", side_effect=ValueError("broken")):
            with patch("ledger_digest.hasher.logger") as mock_logger:
                with pytest.raises(HasherUnavailableError):
                    blake2b_256(b"data")

        mock_logger.critical.assert_called_once()
