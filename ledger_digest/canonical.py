"""Canonical byte encoding used as hashing input for typed digests.

Logically equal values must encode to identical bytes, so models are dumped as
compact JSON with sorted keys rather than through their default serializer.
Sets have no stable iteration order across processes; their members are
sorted by their own canonical JSON before encoding.
"""

import json
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel
from pydantic_core import to_jsonable_python

from ledger_digest.digest import Digest


@runtime_checkable
class CanonicalEncodable(Protocol):
    """Protocol for values that define their own canonical bytes."""

    def encode_canonical(self) -> bytes: ...


def canonical_encode(value: Any) -> bytes:
    """Return the canonical byte encoding of ``value``.

    Resolution order:
    1. ``encode_canonical()`` when the value implements CanonicalEncodable
    2. Digest and TypedDigest: their 32 raw bytes
    3. pydantic models: compact, key-sorted JSON with set members sorted
    4. bytes-like: as is
    5. str: UTF-8

    Raises:
        TypeError: If the value has no canonical encoding.
    """
    from ledger_digest.typed import TypedDigest

    if isinstance(value, CanonicalEncodable):
        return value.encode_canonical()
    if isinstance(value, (Digest, TypedDigest)):
        return value.as_bytes()
    if isinstance(value, BaseModel):
        return _canonical_json(_normalize(value.model_dump(mode="python")))
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        return value.encode("utf-8")
    raise TypeError(f"No canonical encoding for {type(value).__name__}")


def _normalize(data: Any) -> Any:
    """Convert a python-mode dump into JSON-ready data with a fixed order."""
    from ledger_digest.typed import TypedDigest

    if isinstance(data, dict):
        return {_normalize_key(k): _normalize(v) for k, v in data.items()}
    if isinstance(data, (set, frozenset)):
        return sorted((_normalize(item) for item in data), key=_canonical_json)
    if isinstance(data, (list, tuple)):
        return [_normalize(item) for item in data]
    if isinstance(data, (Digest, TypedDigest)):
        return data.hex()
    return to_jsonable_python(data)


def _normalize_key(key: Any) -> str:
    normalized = _normalize(key)
    if isinstance(normalized, str):
        return normalized
    return _canonical_json(normalized).decode("utf-8")


def _canonical_json(data: Any) -> bytes:
    return json.dumps(data, sort_keys=True, separators=(",", ":"), ensure_ascii=False).encode("utf-8")
