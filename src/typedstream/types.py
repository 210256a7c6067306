"""Primitive wire types.

Each Type knows its fixed byte width and how to build the struct format that
unpacks it in a given byte order. Widths never depend on endianness.
"""

from __future__ import annotations

import enum

from .endianness import Endianness


class Type(enum.Enum):
    """Closed set of primitive numeric wire types.

    The value of each member is its struct type code; ``size`` is the fixed
    width in bytes.

    Example:
        >>> Type.UINT32.size
        4
        >>> Type.UINT32.to_format(Endianness.BIG)
        '>I'
    """

    INT8 = "b"
    UINT8 = "B"
    INT16 = "h"
    UINT16 = "H"
    INT32 = "i"
    UINT32 = "I"
    INT64 = "q"
    UINT64 = "Q"
    FLOAT32 = "f"
    FLOAT64 = "d"

    @property
    def code(self) -> str:
        """struct type code, without a byte-order prefix."""
        return self.value

    @property
    def size(self) -> int:
        """Width in bytes (1, 2, 4 or 8)."""
        return _SIZES[self]

    @property
    def is_integer(self) -> bool:
        return self not in (Type.FLOAT32, Type.FLOAT64)

    @property
    def is_signed(self) -> bool:
        return self.code.islower() and self.is_integer

    def to_format(self, endianness: Endianness, count: int = 1) -> str:
        """Build the struct format for ``count`` values of this type.

        Args:
            endianness: Byte order to unpack with
            count: Number of consecutive values (default 1)

        Returns:
            Format string such as ``"<I"`` or ``">3h"``
        """
        repeat = str(count) if count != 1 else ""
        return f"{endianness.struct_prefix}{repeat}{self.code}"

    @classmethod
    def parse(cls, name: str | Type) -> Type:
        """Look up a type by its case-insensitive name (``"uint32"``).

        Raises:
            ValueError: If no such type exists
        """
        if isinstance(name, cls):
            return name
        try:
            return cls[name.strip().upper()]
        except KeyError:
            choices = ", ".join(member.name.lower() for member in cls)
            raise ValueError(f"Unknown type {name!r}. Expected one of: {choices}") from None


_SIZES: dict[Type, int] = {
    Type.INT8: 1,
    Type.UINT8: 1,
    Type.INT16: 2,
    Type.UINT16: 2,
    Type.INT32: 4,
    Type.UINT32: 4,
    Type.INT64: 8,
    Type.UINT64: 8,
    Type.FLOAT32: 4,
    Type.FLOAT64: 8,
}
