"""Type descriptors for external schema tooling.

The registry itself lives outside this package. Callers pass a mapping from
type name to descriptor, and this module fills in the Digest and TypedDigest
entries the way the rest of the schema is recorded: a name plus a shape.
"""

from typing import Any, Literal, MutableMapping, get_args, get_origin

from pydantic import BaseModel, ConfigDict

from ledger_digest.digest import LENGTH, Digest
from ledger_digest.typed import TypedDigest

DIGEST_TYPE_NAME = "ledger_digest::Digest"


class FixedBytesShape(BaseModel):
    """A fixed-size tuple of bytes."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["fixed_bytes"] = "fixed_bytes"
    length: int


class TupleShape(BaseModel):
    """An unnamed-field tuple referencing other types by name."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["tuple"] = "tuple"
    types: tuple[str, ...]


class TypeDescriptor(BaseModel):
    """Name and shape of one type, as consumed by the schema registry."""

    model_config = ConfigDict(frozen=True)

    name: str
    shape: FixedBytesShape | TupleShape


def type_name(tp: Any) -> str:
    """Return the schema name of ``tp``.

    Types that define a ``type_name()`` classmethod name themselves; anything
    else is named ``<module>::<qualname>``.
    """
    if tp is Digest:
        return DIGEST_TYPE_NAME
    if get_origin(tp) is TypedDigest:
        return typed_digest_descriptor(get_args(tp)[0]).name
    own = getattr(tp, "type_name", None)
    if callable(own):
        return str(own())
    module = getattr(tp, "__module__", None)
    qualname = getattr(tp, "__qualname__", None) or getattr(tp, "__name__", None) or repr(tp)
    if module in (None, "builtins"):
        return qualname
    return f"{module.replace('.', '::')}::{qualname}"


def digest_descriptor() -> TypeDescriptor:
    return TypeDescriptor(name=DIGEST_TYPE_NAME, shape=FixedBytesShape(length=LENGTH))


def typed_digest_descriptor(tag: Any) -> TypeDescriptor:
    """Descriptor for ``TypedDigest[tag]``: a one-field tuple wrapping Digest."""
    return TypeDescriptor(
        name=f"ledger_digest::TypedDigest<{type_name(tag)}>",
        shape=TupleShape(types=(DIGEST_TYPE_NAME,)),
    )


def register_schema(tag: Any, registry: MutableMapping[str, TypeDescriptor]) -> str:
    """Record ``TypedDigest[tag]`` and Digest in ``registry``.

    Existing entries are left untouched. Returns the TypedDigest type name.
    """
    typed = typed_digest_descriptor(tag)
    registry.setdefault(typed.name, typed)
    registry.setdefault(DIGEST_TYPE_NAME, digest_descriptor())
    return typed.name
