"""typedstream: Typed Binary Decoding

A small library for reading typed values (integers, floats, strings,
timestamps, arrays and bit flags) from any byte stream, with explicit or
automatic control of byte order.

Key Features:
- Endianness per decoder, overridable per call
- Independent sub-decoders via slice()
- Non-destructive lookahead with guaranteed offset restoration
- Memory, file-object and on-disk stream backends

Quick Start:
    >>> from typedstream import Endianness, MemoryStream, Type, TypedStream
    >>>
    >>> reader = TypedStream(MemoryStream(b"\\x01\\x00\\x02\\x00\\x03\\x00BMP\\x00"))
    >>> reader.array(3, Type.UINT16, Endianness.LITTLE)
    [1, 2, 3]
    >>> reader.string()
    'BMP'
"""

from __future__ import annotations

from .config import DecoderConfig
from .decoder import TypedStream
from .endianness import Endianness, resolve
from .exceptions import DecodeError, NonReadableError, ReadFailure, TypedStreamError
from .stream import FileStream, MemoryStream, ResourceStream, Stream
from .types import Type

__version__ = "0.1.0"

__all__ = [
    # Core API
    "TypedStream",
    "DecoderConfig",
    # Descriptors
    "Endianness",
    "Type",
    "resolve",
    # Streams
    "Stream",
    "ResourceStream",
    "MemoryStream",
    "FileStream",
    # Exceptions
    "TypedStreamError",
    "ReadFailure",
    "NonReadableError",  # Original library name
    "DecodeError",
    # Version
    "__version__",
]
