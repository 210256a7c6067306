"""Stream backends over Python binary file objects.

ResourceStream adapts anything with ``read``/``seek``/``tell`` (an open file,
io.BytesIO, a buffered socket file) to the Stream contract. FileStream opens a
path and owns the resulting handle.
"""

from __future__ import annotations

import io
import logging
import os
from typing import IO, Any

from ..exceptions import ReadFailure
from .base import Stream

_logger = logging.getLogger(__name__)


class ResourceStream(Stream):
    """Stream over a binary file-like object.

    The handle is borrowed by default. Pass ``close=True`` to hand ownership
    to the stream, in which case ``close()`` (or leaving a ``with`` block)
    closes it.

    Example:
        >>> with open("capture.bin", "rb") as fh:
        ...     stream = ResourceStream(fh)
        ...     header = stream.read(4)
    """

    def __init__(self, handle: IO[bytes], close: bool = False) -> None:
        """Wrap an open binary handle.

        Args:
            handle: Binary file-like object supporting read, seek and tell
            close: If True, the stream owns the handle and closes it
        """
        self._handle = handle
        self._owns_handle = close

    @property
    def handle(self) -> IO[bytes]:
        return self._handle

    @property
    def closed(self) -> bool:
        return bool(self._handle.closed)

    def _is_readable(self) -> bool:
        if self._handle.closed:
            return False
        readable = getattr(self._handle, "readable", None)
        return readable() if callable(readable) else True

    def read(self, size: int) -> bytes:
        if size < 0:
            raise ValueError(f"read size must be >= 0, got {size}")
        if not self._is_readable():
            raise ReadFailure("Stream is not open for reading")
        if size == 0:
            return b""

        start = self._handle.tell()
        chunk = self._handle.read(size)
        if len(chunk) != size:
            raise ReadFailure(
                f"Read of {size} bytes at offset {start} returned only {len(chunk)} bytes"
            )
        return chunk

    def seek(self, offset: int) -> int:
        if offset < 0:
            raise ValueError(f"seek offset must be >= 0, got {offset}")
        return self._handle.seek(offset, io.SEEK_SET)

    def is_completed(self) -> bool:
        if self._handle.closed:
            return True
        # Buffered readers can answer without discarding their buffer
        peek = getattr(self._handle, "peek", None)
        if callable(peek) and self._is_readable():
            return not peek(1)
        position = self._handle.tell()
        end = self._handle.seek(0, io.SEEK_END)
        self._handle.seek(position, io.SEEK_SET)
        return position >= end

    def offset(self) -> int:
        return self._handle.tell()

    def close(self) -> None:
        """Close the handle if this stream owns it; otherwise do nothing."""
        if self._owns_handle and not self._handle.closed:
            _logger.debug("Closing owned handle %r", self._handle)
            self._handle.close()

    def __enter__(self) -> ResourceStream:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


class FileStream(ResourceStream):
    """Stream over a file on disk, opened in binary read mode.

    Example:
        >>> with FileStream("image.bmp") as stream:
        ...     magic = stream.read(2)
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        """Open ``path`` for reading.

        Args:
            path: Filesystem path

        Raises:
            OSError: If the file cannot be opened
        """
        self.path = os.fspath(path)
        _logger.debug("Opening %s", self.path)
        super().__init__(open(self.path, "rb"), close=True)
