"""Property-based tests using hypothesis."""

from __future__ import annotations

import struct

from hypothesis import given
from hypothesis import strategies as st

from typedstream import Endianness, MemoryStream, Type, TypedStream

endianness_st = st.sampled_from(list(Endianness))


def reader_for(data: bytes, endianness: Endianness | None = None) -> TypedStream:
    return TypedStream(MemoryStream(data), endianness)


class TestPrimitiveProperties:
    """Properties of single-value decoders."""

    @given(value=st.integers(min_value=0, max_value=255))
    def test_uint8_and_int8(self, value: int) -> None:
        """uint8 is the raw byte; int8 is the same minus 256 above 0x7F."""
        data = bytes([value])
        assert reader_for(data).uint8() == value
        expected = value - 256 if value >= 0x80 else value
        assert reader_for(data).int8() == expected

    @given(data=st.binary(min_size=2, max_size=2), endianness=endianness_st)
    def test_int16_ignores_endianness(self, data: bytes, endianness: Endianness) -> None:
        expected = struct.unpack("<h", data)[0]
        assert reader_for(data, endianness).int16() == expected
        assert reader_for(data).int16(endianness) == expected

    @given(data=st.binary(min_size=4, max_size=4))
    def test_uint32_orders_are_byte_reversals(self, data: bytes) -> None:
        little = reader_for(data).uint32(Endianness.LITTLE)
        big = reader_for(data[::-1]).uint32(Endianness.BIG)
        assert little == big == int.from_bytes(data, "little")

    @given(data=st.binary(min_size=8, max_size=8), endianness=endianness_st)
    def test_uint64_matches_int_from_bytes(self, data: bytes, endianness: Endianness) -> None:
        assert reader_for(data, endianness).uint64() == int.from_bytes(data, endianness.value)


class TestCompositeProperties:
    """Properties of composite decoders."""

    @given(data=st.binary(min_size=0, max_size=32))
    def test_bitmask_length_and_bits(self, data: bytes) -> None:
        flags = reader_for(data).bitmask(len(data))
        assert len(flags) == len(data) * 8
        rebuilt = bytes(
            int("".join("1" if flag else "0" for flag in flags[i : i + 8]), 2)
            for i in range(0, len(flags), 8)
        )
        assert rebuilt == data

    @given(
        text=st.binary(max_size=32).filter(lambda b: b"\x00" not in b),
        tail=st.binary(max_size=8),
    )
    def test_unsized_string_offset(self, text: bytes, tail: bytes) -> None:
        """An unsized string leaves the cursor right after its terminator."""
        reader = reader_for(text + b"\x00" + tail)
        assert reader.string() == text.decode("latin-1")
        assert reader.offset() == len(text) + 1

    @given(
        values=st.lists(st.integers(min_value=0, max_value=0xFFFF), min_size=1, max_size=16),
        endianness=endianness_st,
    )
    def test_array_matches_struct(self, values: list[int], endianness: Endianness) -> None:
        data = struct.pack(f"{endianness.struct_prefix}{len(values)}H", *values)
        assert reader_for(data).array(len(values), Type.UINT16, endianness) == values


class TestNavigationProperties:
    """Properties of lookahead and slice."""

    @given(data=st.binary(min_size=4, max_size=64), start=st.integers(min_value=0, max_value=4))
    def test_lookahead_preserves_offset(self, data: bytes, start: int) -> None:
        reader = reader_for(data)
        reader.seek(start)
        reader.lookahead(lambda r: r.read(len(data) - start))
        assert reader.offset() == start

    @given(data=st.binary(min_size=1, max_size=64), size=st.integers(min_value=0, max_value=64))
    def test_slice_copies_prefix(self, data: bytes, size: int) -> None:
        size = min(size, len(data))
        reader = reader_for(data)
        child = reader.slice(size)
        assert child.read(size) == data[:size]
        assert child.is_completed()
        assert reader.offset() == size
