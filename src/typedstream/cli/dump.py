"""Typed dump CLI command."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

from ..decoder import TypedStream
from ..endianness import Endianness
from ..stream import FileStream
from ..types import Type

# Modes handled by the command in addition to the numeric wire types
TEXT_MODES = ("string", "char", "bitmask", "timestamp")


def dump_file(
    file_path: Path,
    type_name: str = "uint8",
    count: int = 1,
    offset: int = 0,
    endianness: Endianness | None = None,
) -> list[str]:
    """Decode values from a file and return them as printable lines.

    Args:
        file_path: File to read
        type_name: Numeric type name ("uint32", "float64", ...) or one of
            "string", "char", "bitmask", "timestamp"
        count: Number of values to decode (bytes, for bitmask)
        offset: Absolute byte offset to start at
        endianness: Byte order; None uses the host order

    Returns:
        One formatted line per decoded value

    Raises:
        ValueError: If type_name or count is invalid
        ReadFailure: If the file is too short
    """
    if count < 1:
        raise ValueError(f"count must be >= 1, got {count}")

    with FileStream(file_path) as stream:
        reader = TypedStream(stream, endianness)
        reader.seek(offset)
        return list(_decode(reader, type_name.lower(), count))


def _decode(reader: TypedStream, mode: str, count: int) -> Iterator[str]:
    if mode == "string":
        for _ in range(count):
            yield repr(reader.string())
    elif mode == "char":
        for _ in range(count):
            yield repr(reader.char())
    elif mode == "bitmask":
        flags = reader.bitmask(count)
        for i in range(0, len(flags), 8):
            yield "".join("1" if flag else "0" for flag in flags[i : i + 8])
    elif mode == "timestamp":
        for _ in range(count):
            yield reader.timestamp().isoformat()
    else:
        wire_type = Type.parse(mode)
        for value in reader.array(count, wire_type):
            yield str(value)
