"""Typed decoder on top of a byte stream.

TypedStream turns raw bytes from any Stream into integers, floats, strings,
timestamps, arrays and bit flags. It also provides two navigation helpers:
``lookahead`` (decode, then restore the offset) and ``slice`` (copy a bounded
range into an independent sub-decoder).

Byte-order rules:
- uint16/uint32/uint64, float32/float64, timestamp and array honour the
  per-call endianness argument, falling back to the decoder default.
- int16 always assembles its two bytes little-endian.
- int32/int64 use the host's native byte order and take no argument.
The signed rules match the original library so existing consumers see
byte-identical results.
"""

from __future__ import annotations

import copy
import logging
import struct
from datetime import datetime, timezone
from typing import Any, Callable, TypeVar

from .config import DecoderConfig
from .endianness import Endianness, resolve
from .exceptions import DecodeError, ReadFailure
from .stream import MemoryStream, Stream
from .types import Type

T = TypeVar("T")

_logger = logging.getLogger(__name__)

_NUL = b"\x00"


def _require_count(name: str, value: int, minimum: int = 0) -> None:
    # bool is an int subclass; array(True) is a caller bug, not a size
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")


class TypedStream(Stream):
    """Decode typed values from a borrowed byte stream.

    The decoder never closes the stream it wraps. Configuration methods
    (``with_little_endian`` etc.) return a new decoder over the same stream,
    so the offset is shared but the byte-order default is not.

    Example:
        >>> from typedstream import MemoryStream, TypedStream, Endianness
        >>> reader = TypedStream(MemoryStream(b"\\x78\\x56\\x34\\x12AB\\x00"))
        >>> hex(reader.uint32(Endianness.LITTLE))
        '0x12345678'
        >>> reader.string()
        'AB'
    """

    def __init__(
        self,
        stream: Stream,
        endianness: Endianness | str | None = None,
        config: DecoderConfig | None = None,
    ) -> None:
        """Wrap a stream.

        Args:
            stream: Byte source (borrowed, not closed by the decoder)
            endianness: Default byte order; None falls back to
                ``config.endianness`` and then to the host order
            config: Decoder options (default DecoderConfig())
        """
        self._stream = stream
        self._config = config if config is not None else DecoderConfig()
        if endianness is None:
            self._endianness = self._config.resolved_endianness()
        else:
            self._endianness = Endianness.parse(endianness)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(stream={self._stream!r}, "
            f"endianness={self._endianness.value!r})"
        )

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def stream(self) -> Stream:
        return self._stream

    @property
    def endianness(self) -> Endianness:
        return self._endianness

    @property
    def config(self) -> DecoderConfig:
        return self._config

    def _copy(self, endianness: Endianness, config: DecoderConfig) -> TypedStream:
        clone = copy.copy(self)
        clone._endianness = endianness
        clone._config = config
        return clone

    def with_endianness(self, endianness: Endianness | str) -> TypedStream:
        """Return a decoder over the same stream with another default order."""
        return self._copy(Endianness.parse(endianness), self._config)

    def with_little_endian(self) -> TypedStream:
        return self.with_endianness(Endianness.LITTLE)

    def with_big_endian(self) -> TypedStream:
        return self.with_endianness(Endianness.BIG)

    def with_config(self, **changes: Any) -> TypedStream:
        """Return a decoder over the same stream with updated options.

        Args:
            **changes: DecoderConfig fields to replace

        Raises:
            pydantic.ValidationError: If a new value is invalid
        """
        config = DecoderConfig.model_validate({**self._config.model_dump(), **changes})
        endianness = (
            config.resolved_endianness() if "endianness" in changes else self._endianness
        )
        return self._copy(endianness, config)

    # ------------------------------------------------------------------
    # Stream pass-through
    # ------------------------------------------------------------------

    def read(self, size: int) -> bytes:
        return self._stream.read(size)

    def seek(self, offset: int) -> int:
        return self._stream.seek(offset)

    def rewind(self) -> None:
        self._stream.rewind()

    def move(self, delta: int) -> int:
        return self._stream.move(delta)

    def is_completed(self) -> bool:
        return self._stream.is_completed()

    def offset(self) -> int:
        return self._stream.offset()

    # ------------------------------------------------------------------
    # Primitive numeric decoders
    # ------------------------------------------------------------------

    def _unpack(self, type_: Type, endianness: Endianness | None) -> Any:
        fmt = type_.to_format(resolve(endianness, self._endianness))
        return struct.unpack(fmt, self.read(type_.size))[0]

    def int8(self) -> int:
        """Read a signed 8-bit integer."""
        value = self.read(1)[0]
        return value - 0x100 if value & 0x80 else value

    def uint8(self) -> int:
        """Read an unsigned 8-bit integer (0-255)."""
        return self.read(1)[0]

    def int16(self, endianness: Endianness | None = None) -> int:
        """Read a signed 16-bit integer.

        The two bytes are always assembled little-endian. ``endianness`` is
        accepted for signature parity with uint16 and ignored.
        """
        low, high = self.read(2)
        value = low | high << 8
        return value - 0x1_0000 if high & 0x80 else value

    def uint16(self, endianness: Endianness | None = None) -> int:
        """Read an unsigned 16-bit integer (0-65535)."""
        first, second = self.read(2)
        if resolve(endianness, self._endianness) is Endianness.LITTLE:
            return first | second << 8
        return second | first << 8

    def int32(self) -> int:
        """Read a signed 32-bit integer in host byte order."""
        return struct.unpack("=i", self.read(4))[0]

    def uint32(self, endianness: Endianness | None = None) -> int:
        return self._unpack(Type.UINT32, endianness)

    def int64(self) -> int:
        """Read a signed 64-bit integer in host byte order."""
        return struct.unpack("=q", self.read(8))[0]

    def uint64(self, endianness: Endianness | None = None) -> int:
        return self._unpack(Type.UINT64, endianness)

    def float32(self, endianness: Endianness | None = None) -> float:
        """Read an IEEE-754 single precision float."""
        return self._unpack(Type.FLOAT32, endianness)

    def float64(self, endianness: Endianness | None = None) -> float:
        """Read an IEEE-754 double precision float."""
        return self._unpack(Type.FLOAT64, endianness)

    # Aliases kept from the original API
    byte = int8
    ubyte = uint8
    short = int16
    word = uint16
    ushort = uint16
    dword = uint32
    ulong = uint32
    uint = uint32
    quad = int64
    uquad = uint64
    qword = uint64
    double = float64

    # ------------------------------------------------------------------
    # Composite decoders
    # ------------------------------------------------------------------

    def timestamp(
        self, type: Type = Type.UINT32, endianness: Endianness | None = None
    ) -> datetime:
        """Read a Unix timestamp (seconds since the epoch) as a UTC datetime.

        Args:
            type: Integer wire type holding the seconds (default UINT32)
            endianness: Per-call byte order override

        Raises:
            ValueError: If ``type`` is a float type
            ReadFailure: If the stream is too short
            DecodeError: If the value is outside the range datetime can represent
        """
        if not type.is_integer:
            raise ValueError(f"timestamp requires an integer type, got {type.name}")
        seconds = self._unpack(type, endianness)
        try:
            return datetime.fromtimestamp(seconds, tz=timezone.utc)
        except (OverflowError, ValueError, OSError) as e:
            raise DecodeError(f"Timestamp {seconds} is out of range: {e}") from e

    def array(
        self,
        size: int,
        type: Type = Type.INT32,
        endianness: Endianness | None = None,
    ) -> list[int | float]:
        """Read ``size`` consecutive values of one numeric type.

        All bytes are fetched with a single read before unpacking, so a
        short stream yields no partial result.

        Args:
            size: Number of values (must be positive)
            type: Wire type of each element (default INT32)
            endianness: Per-call byte order override

        Returns:
            List of ``size`` decoded values

        Raises:
            ValueError: If size is not a positive integer
            ReadFailure: If fewer than ``size * type.size`` bytes remain
        """
        _require_count("array size", size, minimum=1)
        fmt = type.to_format(resolve(endianness, self._endianness), count=size)
        return list(struct.unpack(fmt, self.read(type.size * size)))

    def _decode_text(self, raw: bytes) -> str:
        try:
            return raw.decode(self._config.encoding)
        except UnicodeDecodeError as e:
            raise DecodeError(
                f"Cannot decode {len(raw)} bytes as {self._config.encoding}: {e}"
            ) from e

    def char(self) -> str:
        """Read one raw byte as a single-character string."""
        return self._decode_text(self.read(1))

    def string(self, size: int | None = None) -> str:
        """Read a string.

        Without ``size`` the string is NUL-terminated: bytes are consumed up
        to and including the first NUL, which is not returned. With ``size``
        exactly that many bytes are read and every trailing NUL is stripped.

        Raises:
            ValueError: If size is negative
            ReadFailure: If data ends before the terminator (or the configured
                max_string_length is exceeded, leaving the offset
                max_string_length bytes into the string), or fewer than
                ``size`` bytes remain
            DecodeError: If the configured encoding rejects the bytes
        """
        if size is not None:
            _require_count("string size", size)
            return self._decode_text(self.read(size).rstrip(_NUL))

        limit = self._config.max_string_length
        start = self.offset()
        buffer = bytearray()
        while True:
            try:
                char = self.read(1)
            except ReadFailure as e:
                raise ReadFailure(
                    f"Unterminated string starting at offset {start}: "
                    f"end of data after {len(buffer)} bytes"
                ) from e
            if char == _NUL:
                break
            if limit is not None and len(buffer) >= limit:
                # Leave the cursor just past the last accepted byte
                self.move(-1)
                raise ReadFailure(
                    f"String starting at offset {start} exceeds "
                    f"max_string_length={limit} without a terminator"
                )
            buffer += char

        return self._decode_text(bytes(buffer))

    def bitmask(self, count: int) -> list[bool]:
        """Read ``count`` bytes as flags, most significant bit first.

        Example:
            0xB0 -> [True, False, True, True, False, False, False, False]

        Raises:
            ValueError: If count is negative
            ReadFailure: If fewer than ``count`` bytes remain
        """
        _require_count("bitmask byte count", count)
        return [bool(byte >> bit & 1) for byte in self.read(count) for bit in range(7, -1, -1)]

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def lookahead(self, operation: Callable[[TypedStream], T]) -> T:
        """Run ``operation`` against this decoder, then restore the offset.

        The original offset is restored with an absolute seek on every exit
        path, including when ``operation`` raises or reads past end of data.

        Example:
            >>> magic = reader.lookahead(lambda r: r.string(4))
        """
        offset = self.offset()
        try:
            return operation(self)
        finally:
            self.seek(offset)
            _logger.debug("lookahead restored offset %d", offset)

    def slice(self, size: int) -> TypedStream:
        """Copy the next ``size`` bytes into an independent sub-decoder.

        The parent advances by ``size`` bytes. The returned decoder owns a
        private in-memory copy positioned at offset 0 and inherits this
        decoder's endianness and config.

        Raises:
            ValueError: If size is negative
            ReadFailure: If fewer than ``size`` bytes remain
        """
        _require_count("slice size", size)
        start = self.offset()
        data = self.read(size)
        _logger.debug("slice of %d bytes at offset %d", size, start)
        return TypedStream(MemoryStream(data), self._endianness, self._config)
