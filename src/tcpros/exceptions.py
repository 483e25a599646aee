"""Exception hierarchy for tcpros.

All exceptions inherit from TcprosError for easy catching of any tcpros-specific error.
Negotiation mismatches (wrong topic, type or md5sum) are not exceptions; the
validators return them as data.
"""

from __future__ import annotations


class TcprosError(Exception):
    """Base exception for all tcpros errors."""

    pass


class EncodeError(TcprosError):
    """Raised when encoding a message fails.

    Examples:
        - Message writes a different number of bytes than it reports
        - Value does not fit in its wire width
    """

    pass


class DecodeError(TcprosError):
    """Raised when decoding binary data fails.

    Examples:
        - Truncated data (insufficient bytes)
        - Invalid UTF-8 in a length-prefixed string
        - Message type's deserialize routine fails
    """

    pass


class MalformedHeaderError(DecodeError):
    """Raised when a connection header block cannot be decoded.

    Examples:
        - Declared total length is not reachable with the bytes present
        - A field's length prefix runs past the end of the buffer
    """

    pass


class FramingError(TcprosError):
    """Raised when framing operations fail.

    Examples:
        - Length field inconsistency
        - Truncated frame
        - Unknown success flag in a service response
    """

    pass


class ServiceCallError(TcprosError):
    """Raised when a service response carries the failure flag.

    The peer's error text is available as ``message``.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
