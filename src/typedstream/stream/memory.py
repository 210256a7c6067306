"""In-memory stream backend."""

from __future__ import annotations

import io

from .resource import ResourceStream


class MemoryStream(ResourceStream):
    """Stream over an independent copy of a bytes buffer.

    The data is copied into a private io.BytesIO, so later changes to the
    caller's buffer (e.g. a bytearray) are not visible through the stream.

    Example:
        >>> stream = MemoryStream(b"\\x01\\x02\\x03")
        >>> stream.read(2)
        b'\\x01\\x02'
        >>> stream.offset()
        2
    """

    def __init__(self, data: bytes | bytearray | memoryview = b"") -> None:
        super().__init__(io.BytesIO(bytes(data)), close=True)

    def getvalue(self) -> bytes:
        """Return the complete backing buffer, regardless of offset."""
        return self.handle.getvalue()  # type: ignore[attr-defined]

    def __len__(self) -> int:
        return len(self.getvalue())
