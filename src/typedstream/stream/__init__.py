"""Byte-stream contract and concrete backends.

The decoder only depends on the abstract Stream; the backends here cover the
common sources (bytes in memory, open file objects, paths on disk).
"""

from __future__ import annotations

from .base import Stream
from .memory import MemoryStream
from .resource import FileStream, ResourceStream

__all__ = [
    "Stream",
    "ResourceStream",
    "MemoryStream",
    "FileStream",
]
