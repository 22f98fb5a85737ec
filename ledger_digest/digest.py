"""Digest value type for content-addressed entities.

@public

A Digest is an immutable 32-byte BLAKE2b-256 hash whose last byte always has its
least significant bit set. Every valid Digest therefore differs from the all-zero
pattern, which is reserved as the compact "no digest" marker (NICHE_VALUE).
"""

from typing import TYPE_CHECKING, Any, ClassVar, TypeVar

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from ledger_digest.exceptions import DigestLengthError
from ledger_digest.hasher import BytesLike, blake2b_256

if TYPE_CHECKING:
    from ledger_digest.typed import TypedDigest

T = TypeVar("T")

LENGTH = 32

NICHE_VALUE = bytes(LENGTH)
"""Reserved bit pattern meaning "absent digest" in compact optional slots."""


class Digest:
    """Hash of a ledger entity. Currently supports only BLAKE2b-256.

    @public

    Construct with ``Digest.new(data)`` to hash bytes, or admit external bytes
    through ``ledger_digest.codec.decode``. ``Digest.prehashed`` is the trusted
    fast path for output already produced by BLAKE2b-256.

    Equality, ordering and ``hash()`` are byte-wise over the 32 bytes.
    ``str()`` and ``repr()`` both give the lowercase hex form.

    Example:
        >>> d = Digest.new(b"i am data")
        >>> str(d)
        'ba67336efd6a3df3a70eeb757860763036785c182ff4cf587541a0068d09f5b3'
        >>> d.as_bytes()[-1] & 1
        1

    Note:
        ``Digest(...)`` cannot be called directly.
    """

    LENGTH: ClassVar[int] = LENGTH

    __slots__ = ("_bytes",)

    _bytes: bytes

    def __new__(cls, *args: Any, **kwargs: Any) -> "Digest":
        raise TypeError(
            "Digest cannot be instantiated directly. "
            "Use Digest.new(data) or ledger_digest.codec.decode(raw)."
        )

    @classmethod
    def _wrap(cls, raw: bytes) -> "Digest":
        instance = object.__new__(cls)
        object.__setattr__(instance, "_bytes", raw)
        return instance

    @classmethod
    def prehashed(cls, raw: BytesLike) -> "Digest":
        """Wrap 32 bytes already produced by BLAKE2b-256.

        Forces the invariant bit instead of checking it, so this never fails for
        32-byte input. Use ``ledger_digest.codec.decode`` for bytes that come
        from outside the process.

        Raises:
            DigestLengthError: If ``raw`` is not exactly 32 bytes.
        """
        if len(raw) != LENGTH:
            raise DigestLengthError(f"Digest requires {LENGTH} bytes, got {len(raw)}")
        buf = bytearray(raw)
        buf[-1] |= 1
        return cls._wrap(bytes(buf))

    @classmethod
    def new(cls, data: BytesLike) -> "Digest":
        """Hash ``data`` with BLAKE2b-256. Deterministic."""
        return cls.prehashed(blake2b_256(data))

    @staticmethod
    def is_lsb_1(raw: BytesLike) -> bool:
        """Check that the least significant bit of the last byte is 1."""
        return len(raw) == LENGTH and raw[-1] & 1 == 1

    def as_bytes(self) -> bytes:
        """Return the underlying 32 bytes. Identical to the binary encoding."""
        return self._bytes

    def hex(self) -> str:
        return self._bytes.hex()

    def typed(self, tag: type[T]) -> "TypedDigest[T]":
        """Attach a type tag to this digest.

        The conversion cannot be checked. Prefer ``TypedDigest.new(value)``
        whenever the tagged value is at hand.
        """
        from ledger_digest.typed import TypedDigest

        return TypedDigest._wrap(self)

    def __bytes__(self) -> bytes:
        return self._bytes

    def __str__(self) -> str:
        return self._bytes.hex()

    def __repr__(self) -> str:
        return self._bytes.hex()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Digest):
            return NotImplemented
        return self._bytes == other._bytes

    def __lt__(self, other: "Digest") -> bool:
        if not isinstance(other, Digest):
            return NotImplemented
        return self._bytes < other._bytes

    def __le__(self, other: "Digest") -> bool:
        if not isinstance(other, Digest):
            return NotImplemented
        return self._bytes <= other._bytes

    def __gt__(self, other: "Digest") -> bool:
        if not isinstance(other, Digest):
            return NotImplemented
        return self._bytes > other._bytes

    def __ge__(self, other: "Digest") -> bool:
        if not isinstance(other, Digest):
            return NotImplemented
        return self._bytes >= other._bytes

    def __hash__(self) -> int:
        return hash(self._bytes)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __copy__(self) -> "Digest":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "Digest":
        return self

    def __reduce__(self) -> tuple[Any, ...]:
        # Unpickling goes through the validating decoder
        from ledger_digest.codec import decode

        return (decode, (self._bytes,))

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Validate through the codec; serialize to hex in JSON mode."""
        from ledger_digest.codec import validate_digest_input

        return core_schema.no_info_plain_validator_function(
            validate_digest_input,
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, when_used="json"
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {
            "type": "string",
            "pattern": f"^[0-9a-fA-F]{{{LENGTH * 2 - 1}}}[13579bdfBDF]$",
            "description": "BLAKE2b-256 digest as hex with the last bit set; emitted lowercase",
        }
