"""Message and service response framing for tcpros.

This module provides length-prefixed message framing, the message type
registry, and success/failure framing for service responses.
"""

from __future__ import annotations

from .message import (
    MESSAGE_REGISTRY,
    clear_registry,
    decode_by_type,
    decode_message,
    encode_message,
    lookup_message,
    register_message,
    unframe_message,
)
from .response import (
    SERVICE_ERROR_MESSAGE,
    decode_response,
    encode_response,
)

__all__ = [
    "encode_message",
    "decode_message",
    "unframe_message",
    "MESSAGE_REGISTRY",
    "register_message",
    "lookup_message",
    "decode_by_type",
    "clear_registry",
    "SERVICE_ERROR_MESSAGE",
    "encode_response",
    "decode_response",
]
