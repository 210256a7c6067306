"""Byte-order policy.

Every multi-byte decode either receives an explicit Endianness for that one
call or falls back to the decoder default. "Automatic" is not a member of the
enum: it is materialized once, with Endianness.auto(), when a decoder is
built.
"""

from __future__ import annotations

import enum
import sys


class Endianness(enum.Enum):
    """Byte-order convention for multi-byte values."""

    LITTLE = "little"
    BIG = "big"

    @classmethod
    def auto(cls) -> Endianness:
        """Return the host's native byte order."""
        return cls.LITTLE if sys.byteorder == "little" else cls.BIG

    @classmethod
    def parse(cls, value: str | Endianness | None) -> Endianness:
        """Convert a user-facing name into an Endianness.

        Accepts "little", "big" or "auto" (case-insensitive), an existing
        member, or None (same as "auto").

        Raises:
            ValueError: If the name is not recognised
        """
        if value is None:
            return cls.auto()
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(
                f"Invalid endianness {value!r}. Expected 'little', 'big' or 'auto'."
            )

        name = value.strip().lower()
        if name == "auto":
            return cls.auto()
        try:
            return cls(name)
        except ValueError:
            raise ValueError(
                f"Invalid endianness {value!r}. Expected 'little', 'big' or 'auto'."
            ) from None

    @property
    def struct_prefix(self) -> str:
        """Byte-order prefix character for the struct module."""
        return "<" if self is Endianness.LITTLE else ">"


def resolve(explicit: Endianness | None, default: Endianness) -> Endianness:
    """Pick the byte order for a single decode call.

    Args:
        explicit: Per-call override, or None to use the default
        default: The decoder's configured (already concrete) endianness

    Returns:
        ``explicit`` when given, otherwise ``default``
    """
    return default if explicit is None else explicit
