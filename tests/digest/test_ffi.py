"""Tests for the foreign-call boundary."""

import ctypes

import pytest

from ledger_digest import Digest, ffi
from ledger_digest.exceptions import DigestLengthError, InvalidDigestEncoding


class DigestSlot(ctypes.Structure):
    """A C struct carrying a digest by value."""

    _fields_ = [("digest", ffi.DigestArray), ("flags", ctypes.c_uint32)]


class TestLayout:
    def test_size_is_32_bytes(self):
        assert ctypes.sizeof(ffi.DigestArray) == 32

    def test_by_value_bytes_identical(self, sample_digest: Digest) -> None:
        array = ffi.to_c_array(sample_digest)
        assert bytes(array) == sample_digest.as_bytes()

    def test_inside_struct(self, sample_digest: Digest) -> None:
        slot = DigestSlot(ffi.to_c_array(sample_digest), 0)
        assert ctypes.string_at(ctypes.addressof(slot), 32) == sample_digest.as_bytes()
        assert ffi.from_c_array(slot.digest) == sample_digest


class TestValidatedEntry:
    def test_from_c_array_round_trip(self, sample_digest: Digest) -> None:
        assert ffi.from_c_array(ffi.to_c_array(sample_digest)) == sample_digest

    def test_from_c_array_rejects_cleared_bit(self, cleared_bit_bytes: bytes) -> None:
        array = ffi.DigestArray.from_buffer_copy(cleared_bit_bytes)
        with pytest.raises(InvalidDigestEncoding):
            ffi.from_c_array(array)

    def test_from_c_array_rejects_wrong_size(self):
        with pytest.raises(DigestLengthError):
            ffi.from_c_array((ctypes.c_ubyte * 16)())

    def test_from_pointer(self, sample_digest: Digest) -> None:
        array = ffi.to_c_array(sample_digest)
        assert ffi.from_pointer(ctypes.pointer(array)) == sample_digest
        assert ffi.from_pointer(ffi.DigestPointer(array)) == sample_digest

    def test_from_pointer_rejects_cleared_bit(self, cleared_bit_bytes: bytes) -> None:
        array = ffi.DigestArray.from_buffer_copy(cleared_bit_bytes)
        with pytest.raises(InvalidDigestEncoding):
            ffi.from_pointer(ffi.DigestPointer(array))

    def test_from_pointer_rejects_other_pointer_types(self):
        short = (ctypes.c_ubyte * 16)()
        with pytest.raises(TypeError, match="DigestPointer"):
            ffi.from_pointer(ctypes.pointer(short))

    def test_from_address(self, sample_digest: Digest) -> None:
        array = ffi.to_c_array(sample_digest)
        assert ffi.from_address(ctypes.addressof(array)) == sample_digest

    def test_from_address_rejects_zeroed_memory(self):
        array = ffi.DigestArray()
        with pytest.raises(InvalidDigestEncoding):
            ffi.from_address(ctypes.addressof(array))


class TestOptional:
    def test_none_is_zero_array(self):
        assert bytes(ffi.option_to_c_array(None)) == bytes(32)

    def test_zero_array_is_none(self):
        assert ffi.option_from_c_array(ffi.DigestArray()) is None

    def test_some_round_trip(self, sample_digest: Digest) -> None:
        assert ffi.option_from_c_array(ffi.option_to_c_array(sample_digest)) == sample_digest
