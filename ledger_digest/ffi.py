"""Foreign-call boundary for Digest.

A Digest crosses a C boundary as ``uint8_t[32]``: by value inside a struct, or
as a pointer in a function call. The layout is exactly the 32 digest bytes.
Anything arriving from the other side is validated with the same invariant
check as ``ledger_digest.codec.decode``.

An optional digest slot uses the all-zero array as "absent".
"""

import ctypes
from typing import Any

from ledger_digest.codec import decode, decode_optional
from ledger_digest.digest import LENGTH, NICHE_VALUE, Digest

DigestArray = ctypes.c_ubyte * LENGTH
"""C representation of a Digest: ``uint8_t[32]``."""

DigestPointer = ctypes.POINTER(DigestArray)
"""C pointer to a Digest: ``uint8_t (*)[32]``."""


def to_c_array(digest: Digest) -> ctypes.Array:
    """Copy the digest bytes into a new ``uint8_t[32]``."""
    return DigestArray.from_buffer_copy(digest.as_bytes())


def from_c_array(array: ctypes.Array) -> Digest:
    """Admit a ``uint8_t[32]`` received from foreign code.

    Raises:
        DigestLengthError: If the array is not 32 bytes long.
        InvalidDigestEncoding: If the invariant bit is cleared.
    """
    return decode(bytes(array))


def from_address(address: int) -> Digest:
    """Admit the 32 bytes at ``address`` (a ``const uint8_t *`` from foreign code)."""
    return decode(ctypes.string_at(address, LENGTH))


def option_to_c_array(digest: Digest | None) -> ctypes.Array:
    """Encode an optional Digest; None becomes the all-zero array."""
    if digest is None:
        return DigestArray.from_buffer_copy(NICHE_VALUE)
    return to_c_array(digest)


def option_from_c_array(array: ctypes.Array) -> Digest | None:
    return decode_optional(bytes(array))


def from_pointer(pointer: Any) -> Digest:
    """Admit the array behind a ``DigestPointer``.

    Raises:
        TypeError: If ``pointer`` is not a DigestPointer.
        InvalidDigestEncoding: If the invariant bit is cleared.
    """
    if not isinstance(pointer, DigestPointer):
        raise TypeError(f"Expected DigestPointer, got {type(pointer).__name__}")
    return decode(bytes(pointer.contents))
