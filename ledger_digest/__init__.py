"""ledger-digest - BLAKE2b-256 digests for content-addressed ledger entities.

@public

Core pieces:
    - **Digest**: immutable 32-byte hash; last byte's low bit is always 1
    - **TypedDigest[T]**: a Digest tagged, for the type checker, with what was hashed
    - **codec**: validated binary (32 bytes) and hex (64 chars) forms
    - **ffi**: ``uint8_t[32]`` boundary with validated entry
    - **schema**: type descriptors for external schema tooling

Quick Start:
    >>> from ledger_digest import Digest, TypedDigest, codec
    >>> d = Digest.new(b"i am data")
    >>> codec.decode(codec.encode(d)) == d
    True
    >>> codec.decode(bytes(32))
    Traceback (most recent call last):
    ...
    ledger_digest.exceptions.InvalidDigestEncoding: expect least significant bit of hash to be 1

Environment Variables:
    - LEDGER_DIGEST_HEX_ACCEPT_UPPERCASE, LEDGER_DIGEST_HEX_ACCEPT_PREFIX
    - LEDGER_DIGEST_LOG_LEVEL, LEDGER_DIGEST_LOGGING_CONFIG
"""

from . import codec, ffi, schema
from .canonical import CanonicalEncodable, canonical_encode
from .digest import LENGTH, NICHE_VALUE, Digest
from .exceptions import (
    DigestCoreError,
    DigestDecodeError,
    DigestFormatError,
    DigestLengthError,
    HasherUnavailableError,
    InvalidDigestEncoding,
)
from .hasher import DIGEST_SIZE, HASH_ALGORITHM, Blake2bHasher, blake2b_256
from .logging import LoggingConfig, get_digest_logger, setup_logging
from .settings import settings
from .typed import TypedDigest

__version__ = "0.1.0"

__all__ = [
    # Config/Settings
    "settings",
    # Logging
    "LoggingConfig",
    "get_digest_logger",
    "setup_logging",
    # Digest
    "Digest",
    "LENGTH",
    "NICHE_VALUE",
    "TypedDigest",
    "CanonicalEncodable",
    "canonical_encode",
    # Hashing
    "Blake2bHasher",
    "DIGEST_SIZE",
    "HASH_ALGORITHM",
    "blake2b_256",
    # Codec / boundaries
    "codec",
    "ffi",
    "schema",
    # Errors
    "DigestCoreError",
    "DigestDecodeError",
    "DigestFormatError",
    "DigestLengthError",
    "HasherUnavailableError",
    "InvalidDigestEncoding",
]
