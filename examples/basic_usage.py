#!/usr/bin/env python3
"""Basic usage example for typedstream.

This example demonstrates:
1. Decoding little- and big-endian integers from the same bytes
2. Peeking at a value with lookahead()
3. Reading a bounded record with slice()
4. Strings, timestamps and bit flags
"""

from __future__ import annotations

import struct

from typedstream import Endianness, MemoryStream, Type, TypedStream


def build_record() -> bytes:
    """Build a small length-prefixed record."""
    body = struct.pack("<I", 1_700_000_000) + b"\xb0" + b"sensor-7\x00"
    return b"REC\x00" + struct.pack("<H", len(body)) + body + struct.pack("<3H", 10, 20, 30)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("typedstream Basic Usage Example")
    print("=" * 60)
    print()

    reader = TypedStream(MemoryStream(build_record()), Endianness.LITTLE)

    print("1. Peeking at the magic without consuming it...")
    magic = reader.lookahead(lambda r: r.string())
    print(f"   Magic: {magic!r} (offset still {reader.offset()})")
    print()

    print("2. Reading the header...")
    reader.string()
    length = reader.uint16()
    print(f"   Body length: {length} bytes")
    reader.move(-2)
    print(f"   Same bytes as big-endian: {reader.uint16(Endianness.BIG)}")
    print()

    print("3. Decoding the body from an independent slice...")
    body = reader.slice(length)
    print(f"   Created: {body.timestamp().isoformat()}")
    print(f"   Flags:   {body.bitmask(1)}")
    print(f"   Name:    {body.string()!r}")
    print()

    print("4. Reading the trailing array...")
    print(f"   Values: {reader.array(3, Type.UINT16)}")
    print(f"   Completed: {reader.is_completed()}")


if __name__ == "__main__":
    main()
