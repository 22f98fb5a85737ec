"""Typed digests: a Digest bound to the kind of entity it was computed over.

@public

``TypedDigest[Block]`` and ``TypedDigest[Transaction]`` share a runtime
representation (one inner Digest) but are distinct to a static type checker.
The tag parameter is invariant and exists only in annotations, so:

- ``a < b`` with ``a: TypedDigest[Block]`` and ``b: TypedDigest[Transaction]``
  is rejected by the type checker (the ordering methods take ``TypedDigest[T]``);
- ``a == b`` across tags fails the same way: ``__eq__`` and ``__ne__`` are
  narrowed to ``TypedDigest[T]`` on purpose.

Moving a digest between tags is done with ``transmute_tag``, which is named so
every use can be found with a search.

Example:
    >>> class Block(BaseModel):
    ...     height: int
    >>> class BlockHeader(BaseModel):
    ...     height: int
    >>> block_hash = TypedDigest.new(Block(height=1))
    >>> header_hash = block_hash.transmute_tag(BlockHeader)
    >>> header_hash.as_bytes() == block_hash.as_bytes()
    True
"""

from typing import Any, Generic, TypeVar

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from ledger_digest.canonical import canonical_encode
from ledger_digest.digest import Digest

T = TypeVar("T")
U = TypeVar("U")


class TypedDigest(Generic[T]):
    """Digest of a value of type ``T``. Currently supports only BLAKE2b-256.

    @public

    Equality, ordering and ``hash()`` delegate to the inner Digest. A
    TypedDigest never compares equal to a bare Digest; use ``.digest`` to drop
    the tag explicitly.
    """

    __slots__ = ("_digest",)

    _digest: Digest

    def __new__(cls, *args: Any, **kwargs: Any) -> "TypedDigest[T]":
        raise TypeError(
            "TypedDigest cannot be instantiated directly. "
            "Use TypedDigest.new(value) or Digest.typed(tag)."
        )

    @classmethod
    def _wrap(cls, digest: Digest) -> "TypedDigest[Any]":
        instance = object.__new__(cls)
        object.__setattr__(instance, "_digest", digest)
        return instance

    @classmethod
    def new(cls, value: T) -> "TypedDigest[T]":
        """Hash the canonical encoding of ``value``.

        Raises:
            TypeError: If ``value`` has no canonical encoding.
        """
        return cls._wrap(Digest.new(canonical_encode(value)))

    def transmute_tag(self, tag: type[U]) -> "TypedDigest[U]":
        """Reinterpret this digest as the digest of a ``tag`` value.

        No recomputation and no validation. Don't use this method if not
        required: it is only correct when the two entity kinds hash
        interchangeably.
        """
        return TypedDigest._wrap(self._digest)

    @property
    def digest(self) -> Digest:
        """The inner Digest, without the tag."""
        return self._digest

    def untyped(self) -> Digest:
        return self._digest

    def as_bytes(self) -> bytes:
        return self._digest.as_bytes()

    def hex(self) -> str:
        return self._digest.hex()

    def __bytes__(self) -> bytes:
        return self._digest.as_bytes()

    def __str__(self) -> str:
        return str(self._digest)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._digest!r})"

    def __eq__(self, other: "TypedDigest[T]") -> bool:  # type: ignore[override]
        if not isinstance(other, TypedDigest):
            return NotImplemented
        return self._digest == other._digest

    def __ne__(self, other: "TypedDigest[T]") -> bool:  # type: ignore[override]
        if not isinstance(other, TypedDigest):
            return NotImplemented
        return self._digest != other._digest

    def __lt__(self, other: "TypedDigest[T]") -> bool:
        if not isinstance(other, TypedDigest):
            return NotImplemented
        return self._digest < other._digest

    def __le__(self, other: "TypedDigest[T]") -> bool:
        if not isinstance(other, TypedDigest):
            return NotImplemented
        return self._digest <= other._digest

    def __gt__(self, other: "TypedDigest[T]") -> bool:
        if not isinstance(other, TypedDigest):
            return NotImplemented
        return self._digest > other._digest

    def __ge__(self, other: "TypedDigest[T]") -> bool:
        if not isinstance(other, TypedDigest):
            return NotImplemented
        return self._digest >= other._digest

    def __hash__(self) -> int:
        return hash(self._digest)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __copy__(self) -> "TypedDigest[T]":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "TypedDigest[T]":
        return self

    def __reduce__(self) -> tuple[Any, ...]:
        return (_restore, (self._digest,))

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Transparent: same wire forms as Digest.

        A bare Digest instance is rejected; tag it with ``Digest.typed`` first.
        """
        from ledger_digest.codec import validate_digest_input

        def validate(value: Any) -> TypedDigest[Any]:
            if isinstance(value, TypedDigest):
                return value
            if isinstance(value, Digest):
                raise ValueError("Untyped Digest given; attach a tag with Digest.typed()")
            return cls._wrap(validate_digest_input(value))

        return core_schema.no_info_plain_validator_function(
            validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, when_used="json"
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return Digest.__get_pydantic_json_schema__(schema, handler)


def _restore(digest: Digest) -> TypedDigest[Any]:
    return TypedDigest._wrap(digest)
