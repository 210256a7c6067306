"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import Callable

import pytest

from typedstream import Endianness, MemoryStream, TypedStream


@pytest.fixture
def make_reader() -> Callable[..., TypedStream]:
    """Factory building a TypedStream over an in-memory copy of some bytes."""

    def _make(data: bytes, endianness: Endianness | None = None) -> TypedStream:
        return TypedStream(MemoryStream(data), endianness)

    return _make


@pytest.fixture
def sample_payload() -> bytes:
    """Sample binary payload for testing."""
    return b"\x78\x56\x34\x12AB\x00XY"
