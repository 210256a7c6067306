"""End-to-end integration tests.

These decode a small BMP-style file (little-endian header, bit flags, a
NUL-terminated comment block) through FileStream the way a format parser
built on typedstream would.
"""

from __future__ import annotations

import struct
from datetime import datetime, timezone
from pathlib import Path

import pytest

from typedstream import (
    Endianness,
    FileStream,
    MemoryStream,
    ReadFailure,
    ResourceStream,
    Type,
    TypedStream,
)

CREATED = 1_700_000_000


def build_image() -> bytes:
    """Assemble a synthetic image file."""
    dib = struct.pack("<IIIHH", 16, 4, 2, 1, 24)
    pixels = bytes(range(24))
    comment = b"made by test\x00"
    header = struct.pack("<2sIHHI", b"BM", 0, 0, 0, 0)
    body = dib + struct.pack("<I", CREATED) + b"\xa5" + comment.ljust(16, b"\x00") + pixels
    pixel_offset = len(header) + len(body) - len(pixels)
    header = struct.pack("<2sIHHI", b"BM", len(header) + len(body), 0, 0, pixel_offset)
    return header + body


@pytest.fixture
def image_path(tmp_path: Path) -> Path:
    path = tmp_path / "image.bmp"
    path.write_bytes(build_image())
    return path


class TestFileDecoding:
    """Test a complete parse of a file on disk."""

    def test_parse_image(self, image_path: Path) -> None:
        with FileStream(image_path) as stream:
            reader = TypedStream(stream).with_little_endian()

            assert reader.lookahead(lambda r: r.string(2)) == "BM"
            assert reader.offset() == 0

            assert reader.string(2) == "BM"
            file_size = reader.uint32()
            reader.move(4)
            pixel_offset = reader.uint32()
            assert file_size == image_path.stat().st_size

            dib_size = reader.lookahead(lambda r: r.uint32())
            dib = reader.slice(dib_size)
            assert dib.uint32() == 16
            assert dib.uint32() == 4
            assert dib.uint32() == 2
            assert dib.array(2, Type.UINT16) == [1, 24]
            assert dib.is_completed()

            assert reader.timestamp() == datetime.fromtimestamp(CREATED, tz=timezone.utc)
            assert reader.bitmask(1) == [True, False, True, False, False, True, False, True]
            assert reader.string(16) == "made by test"

            assert reader.offset() == pixel_offset
            pixels = reader.array(24, Type.UINT8)
            assert pixels == list(range(24))
            assert reader.is_completed()

            with pytest.raises(ReadFailure):
                reader.uint8()

        assert stream.closed

    def test_big_endian_view_of_same_bytes(self, image_path: Path) -> None:
        """A big-endian copy shares the cursor but decodes differently."""
        with FileStream(image_path) as stream:
            little = TypedStream(stream, Endianness.LITTLE)
            big = little.with_big_endian()
            little.seek(2)
            size_le = little.lookahead(lambda r: r.uint32())
            size_be = big.uint32()
            assert size_le == int.from_bytes(struct.pack(">I", size_be), "little")


class TestBorrowedStreams:
    """Test stream ownership across decoders."""

    def test_decoder_does_not_close_stream(self) -> None:
        stream = MemoryStream(b"\x01\x02\x03\x04")
        reader = TypedStream(stream)
        reader.slice(2)
        del reader
        assert not stream.closed
        assert stream.read(2) == b"\x03\x04"

    def test_resource_stream_over_open_file(self, image_path: Path) -> None:
        with open(image_path, "rb") as handle:
            reader = TypedStream(ResourceStream(handle), Endianness.LITTLE)
            assert reader.string(2) == "BM"
            assert handle.tell() == 2
        assert handle.closed
