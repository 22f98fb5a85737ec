"""BLAKE2b-256 hashing for content addressing.

The algorithm is fixed: BLAKE2b instantiated with a 32-byte (256-bit) output.
There is no streaming entry point; input is hashed in one call.
"""

import hashlib

from ledger_digest.exceptions import HasherUnavailableError
from ledger_digest.logging import get_digest_logger

logger = get_digest_logger(__name__)

HASH_ALGORITHM = "blake2b-256"
DIGEST_SIZE = 32

BytesLike = bytes | bytearray | memoryview


class Blake2bHasher:
    """BLAKE2b with ``digest_size=32``. The only hasher Digest uses."""

    algorithm = HASH_ALGORITHM

    def digest(self, data: BytesLike) -> bytes:
        try:
            h = hashlib.blake2b(digest_size=DIGEST_SIZE)
        except ValueError as e:
            logger.critical(f"Failed to initialize {HASH_ALGORITHM}: {e}")
            raise HasherUnavailableError(f"Failed to initialize {HASH_ALGORITHM}") from e
        h.update(data)
        return h.digest()


_default_hasher = Blake2bHasher()


def blake2b_256(data: BytesLike) -> bytes:
    """Return the raw 32-byte BLAKE2b-256 hash of ``data``.

    The result is the hash output before the Digest invariant is applied.

    Example:
        >>> blake2b_256(b"i am data").hex()
        'ba67336efd6a3df3a70eeb757860763036785c182ff4cf587541a0068d09f5b2'
    """
    return _default_hasher.digest(data)
