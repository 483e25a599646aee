"""tcpros: TCPROS connection header and message framing codec

A Python library for the wire-level handshake and framing used by ROS
publish/subscribe and service connections over a byte stream. It builds,
encodes, parses and validates connection headers, and frames message and
service response payloads. Sockets, discovery and name resolution belong to
the transport layer that calls it.

Key Features:
- Byte-exact header block encoding and decoding
- Builders for subscriber, publisher, service client and service server headers
- Typed connection header record with wildcard-aware validation
- Pydantic-based message base class with an explicit type registry

Quick Start:
    >>> from tcpros import (
    ...     create_subscriber_header, read_header, validate_subscriber_header)
    >>>
    >>> data = create_subscriber_header(
    ...     "/listener", "992ce8a1687cec8c8bd883ec73ca41d1", "/chatter",
    ...     "std_msgs/String", "string data\\n")
    >>> header = read_header(data)
    >>> validate_subscriber_header(
    ...     header, "/chatter", "std_msgs/String", "992ce8a1687cec8c8bd883ec73ca41d1")
    ValidationResult(accepted=True, reason=None)
"""

from __future__ import annotations

from .codec import (
    ByteReader,
    ByteWriter,
    deserialize_fields,
    read_fields,
    serialize_fields,
    write_fields,
)
from .config import HandshakeConfig
from .exceptions import (
    DecodeError,
    EncodeError,
    FramingError,
    MalformedHeaderError,
    ServiceCallError,
    TcprosError,
)
from .framing import (
    MESSAGE_REGISTRY,
    SERVICE_ERROR_MESSAGE,
    clear_registry,
    decode_by_type,
    decode_message,
    decode_response,
    encode_message,
    encode_response,
    lookup_message,
    register_message,
    unframe_message,
)
from .header import (
    WILDCARD,
    ConnectionHeader,
    ValidationResult,
    create_error_header,
    create_publisher_header,
    create_service_client_header,
    create_service_server_header,
    create_subscriber_header,
    decode_error_header,
    parse_fields,
    parse_header,
    publisher_fields,
    read_header,
    service_client_fields,
    service_server_fields,
    subscriber_fields,
    validate_publisher_header,
    validate_subscriber_header,
)
from .models import RosMessage

__version__ = "0.1.0"

__all__ = [
    # Byte primitives
    "ByteReader",
    "ByteWriter",
    # Field codec
    "serialize_fields",
    "deserialize_fields",
    "write_fields",
    "read_fields",
    # Header builders
    "subscriber_fields",
    "publisher_fields",
    "service_client_fields",
    "service_server_fields",
    "create_subscriber_header",
    "create_publisher_header",
    "create_service_client_header",
    "create_service_server_header",
    "create_error_header",
    # Header parsing and validation
    "ConnectionHeader",
    "parse_fields",
    "parse_header",
    "read_header",
    "decode_error_header",
    "WILDCARD",
    "ValidationResult",
    "validate_subscriber_header",
    "validate_publisher_header",
    # Framing
    "RosMessage",
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
    # Configuration
    "HandshakeConfig",
    # Exceptions
    "TcprosError",
    "EncodeError",
    "DecodeError",
    "MalformedHeaderError",
    "FramingError",
    "ServiceCallError",
    # Version
    "__version__",
]
