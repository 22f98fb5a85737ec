"""Binary and hex codec for Digest.

@public

This module is the single point where bytes from outside the process become a
Digest. Every decode path checks the invariant (last byte's least significant
bit is 1) and fails with InvalidDigestEncoding instead of setting the bit.

Wire forms:
    binary: exactly 32 bytes, no length prefix, no algorithm tag
    text:   64 lowercase hex characters
    optional slot: the 32 zero bytes mean "no digest"
"""

from typing import Any, BinaryIO

from ledger_digest.digest import LENGTH, NICHE_VALUE, Digest
from ledger_digest.exceptions import DigestFormatError, DigestLengthError, InvalidDigestEncoding
from ledger_digest.hasher import BytesLike
from ledger_digest.logging import get_digest_logger
from ledger_digest.settings import settings

logger = get_digest_logger(__name__)


def encode(digest: Digest) -> bytes:
    """Encode a Digest as its 32 raw bytes."""
    return digest.as_bytes()


def decode(raw: BytesLike) -> Digest:
    """Admit 32 external bytes as a Digest.

    Raises:
        DigestLengthError: If ``raw`` is not exactly 32 bytes.
        InvalidDigestEncoding: If the least significant bit of the last byte is 0.
    """
    if len(raw) != LENGTH:
        logger.debug(f"Rejected digest encoding of {len(raw)} bytes")
        raise DigestLengthError(f"Expected {LENGTH} bytes, got {len(raw)}")
    if not Digest.is_lsb_1(raw):
        logger.debug(f"Rejected digest encoding with cleared invariant bit: {bytes(raw).hex()}")
        raise InvalidDigestEncoding("expect least significant bit of hash to be 1")
    return Digest.prehashed(raw)


def decode_from(stream: BinaryIO) -> Digest:
    """Read exactly 32 bytes from ``stream`` and decode them.

    Raises:
        DigestLengthError: If the stream ends before 32 bytes were read.
        InvalidDigestEncoding: If the invariant bit is cleared.
    """
    chunks = []
    remaining = LENGTH
    while remaining:
        chunk = stream.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    raw = b"".join(chunks)
    if len(raw) != LENGTH:
        raise DigestLengthError(f"Not enough data: expected {LENGTH} bytes, got {len(raw)}")
    return decode(raw)


def encode_hex(digest: Digest) -> str:
    """Encode a Digest as 64 lowercase hex characters."""
    return digest.hex()


def decode_hex(text: str) -> Digest:
    """Parse a hex string and decode the resulting bytes.

    Uppercase digits and a leading ``0x`` are accepted according to
    ``settings.hex_accept_uppercase`` and ``settings.hex_accept_prefix``.

    Raises:
        DigestLengthError: If the text is not 64 characters long.
        DigestFormatError: If the text is not valid hex.
        InvalidDigestEncoding: If the decoded bytes fail the invariant check.
    """
    if settings.hex_accept_prefix and text[:2] in ("0x", "0X"):
        text = text[2:]
    if len(text) != LENGTH * 2:
        raise DigestLengthError(f"Expected {LENGTH * 2} hex characters, got {len(text)}")
    if not settings.hex_accept_uppercase and text != text.lower():
        raise DigestFormatError("Digest hex must be lowercase")
    try:
        raw = bytes.fromhex(text)
    except ValueError as e:
        raise DigestFormatError(f"Invalid hex digest: {e}") from e
    # bytes.fromhex skips whitespace between pairs
    if len(raw) != LENGTH:
        raise DigestFormatError("Invalid hex digest: embedded whitespace")
    return decode(raw)


def encode_optional(digest: Digest | None) -> bytes:
    """Encode an optional Digest in 32 bytes, using NICHE_VALUE for None."""
    if digest is None:
        return NICHE_VALUE
    return digest.as_bytes()


def decode_optional(raw: BytesLike) -> Digest | None:
    """Decode a niche-encoded optional slot.

    The all-zero pattern decodes to None; anything else must be a valid Digest.
    """
    if bytes(raw) == NICHE_VALUE:
        return None
    return decode(raw)


def validate_digest_input(value: Any) -> Digest:
    """Pydantic validator for Digest fields.

    Accepts a Digest, 32 raw bytes, or a hex string. Decode errors are
    ValueError subclasses and surface as ValidationError.
    """
    if isinstance(value, Digest):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return decode(value)
    if isinstance(value, str):
        return decode_hex(value)
    raise ValueError(f"Invalid digest input type: {type(value).__name__}")


__all__ = [
    "decode",
    "decode_from",
    "decode_hex",
    "decode_optional",
    "encode",
    "encode_hex",
    "encode_optional",
    "validate_digest_input",
]
