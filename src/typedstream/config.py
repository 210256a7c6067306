"""Decoder configuration.

DecoderConfig is an immutable Pydantic model, so an invalid option fails at
construction instead of halfway through a decode.
"""

from __future__ import annotations

import codecs
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .endianness import Endianness


class DecoderConfig(BaseModel):
    """Options shared by a TypedStream and every decoder derived from it.

    Example:
        >>> config = DecoderConfig(endianness="big", encoding="utf-8")
        >>> config.endianness
        <Endianness.BIG: 'big'>

    Attributes:
        endianness: Default byte order; None means the host's native order
        encoding: Text codec used by char() and string()
        max_string_length: Upper bound on unsized (NUL-terminated) strings,
            or None for no bound beyond end of data
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_default=True,
    )

    endianness: Optional[Endianness] = None
    encoding: str = "latin-1"
    max_string_length: Optional[int] = Field(default=None, ge=1)

    @field_validator("endianness", mode="before")
    @classmethod
    def _parse_endianness(cls, value: Any) -> Any:
        # Keep None as "automatic"; it is resolved by the decoder, not here
        if value is None or isinstance(value, Endianness):
            return value
        if isinstance(value, str) and value.strip().lower() == "auto":
            return None
        return Endianness.parse(value)

    @field_validator("encoding")
    @classmethod
    def _check_encoding(cls, value: str) -> str:
        try:
            return codecs.lookup(value).name
        except LookupError as e:
            raise ValueError(f"Unknown text encoding: {value!r}") from e

    def resolved_endianness(self) -> Endianness:
        """Return the configured endianness, materializing "automatic"."""
        return Endianness.auto() if self.endianness is None else self.endianness
