"""Abstract byte-stream contract.

TypedStream consumes exactly these six operations and nothing else, so any
source that can provide them (in-memory buffers, files, sockets wrapped in a
buffer) can be decoded.

Design Pattern: Adapter
- Stream: abstract interface consumed by the decoder
- ResourceStream: adapter over any binary file-like object
- MemoryStream / FileStream: convenience constructors for common sources
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class Stream(ABC):
    """Sequential, seekable source of bytes.

    Offsets are absolute byte positions starting at 0. Seeking past the end
    of data is permitted; any read from there fails with ReadFailure.
    """

    @abstractmethod
    def read(self, size: int) -> bytes:
        """Read exactly ``size`` bytes and advance the offset.

        Args:
            size: Number of bytes to read (>= 0)

        Returns:
            Exactly ``size`` bytes

        Raises:
            ValueError: If size is negative
            ReadFailure: If fewer than ``size`` bytes are available or the
                source is not open for reading
        """
        pass

    @abstractmethod
    def seek(self, offset: int) -> int:
        """Move to an absolute offset.

        Args:
            offset: Target position (>= 0)

        Returns:
            The new offset

        Raises:
            ValueError: If offset is negative
        """
        pass

    def rewind(self) -> None:
        """Return to the start of the stream (same as ``seek(0)``)."""
        self.seek(0)

    def move(self, delta: int) -> int:
        """Move relative to the current offset.

        Args:
            delta: Signed number of bytes to move by

        Returns:
            The new offset
        """
        return self.seek(self.offset() + delta)

    @abstractmethod
    def is_completed(self) -> bool:
        """Return True when no further bytes are available."""
        pass

    @abstractmethod
    def offset(self) -> int:
        """Return the current absolute byte position."""
        pass
