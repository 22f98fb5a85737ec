"""Common test fixtures for ledger-digest."""

import pytest

from ledger_digest import Digest


@pytest.fixture
def data_vector() -> tuple[bytes, bytes]:
    """Input and raw BLAKE2b-256 output for b"i am data", before the invariant bit is forced."""
    return (
        bytes.fromhex("6920616d2064617461"),
        bytes.fromhex("ba67336efd6a3df3a70eeb757860763036785c182ff4cf587541a0068d09f5b2"),
    )


@pytest.fixture
def sample_digest() -> Digest:
    return Digest.new(b"sample")


@pytest.fixture
def cleared_bit_bytes() -> bytes:
    """32 bytes whose last byte has the least significant bit cleared."""
    return bytes(range(1, 32)) + b"\x02"
