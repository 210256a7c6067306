"""Exception hierarchy for typedstream.

All exceptions raised by the package inherit from TypedStreamError, so a
caller can catch any typedstream-specific failure with a single clause.
Malformed call arguments (negative sizes, unsupported types) are reported
with the built-in ValueError instead.
"""

from __future__ import annotations


class TypedStreamError(Exception):
    """Base exception for all typedstream errors."""

    pass


class ReadFailure(TypedStreamError):
    """Raised when the underlying stream cannot supply the requested bytes.

    Examples:
        - Fewer bytes remain than the decode operation needs
        - Unsized string reaches end of data before its NUL terminator
        - The source handle is closed or not open for reading
    """

    pass


# Name used by the original PHP library
NonReadableError = ReadFailure


class DecodeError(TypedStreamError):
    """Raised when raw bytes cannot be turned into text.

    Only reachable when DecoderConfig.encoding is set to a codec that can
    reject input (e.g. "utf-8"); the default "latin-1" maps every byte.
    """

    pass
