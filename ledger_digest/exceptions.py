"""Exception hierarchy for ledger-digest.

All exceptions inherit from DigestCoreError. Decode failures are recoverable and
also subclass ValueError, so they surface naturally inside pydantic validators.
A hasher that cannot be constructed is a broken runtime, not bad data, and is
kept out of the decode family.
"""


class DigestCoreError(Exception):
    """Base exception for all ledger-digest errors."""


class DigestDecodeError(DigestCoreError, ValueError):
    """Raised when external bytes or text cannot be admitted as a Digest."""


class InvalidDigestEncoding(DigestDecodeError):
    """Raised when 32 decoded bytes have the least significant bit of the last byte cleared.

    The decoder never sets the bit itself. The all-zero pattern always lands here.
    """


class DigestLengthError(DigestDecodeError):
    """Raised when input is not exactly 32 bytes or 64 hex characters."""


class DigestFormatError(DigestDecodeError):
    """Raised when digest text has the right length but is not acceptable hex.

    Covers non-hex characters, embedded whitespace and uppercase digits when
    uppercase input is disabled.
    """


class HasherUnavailableError(DigestCoreError, RuntimeError):
    """Raised when the BLAKE2b primitive cannot be constructed.

    Treat as fatal. Callers handling DigestDecodeError never see this.
    """
