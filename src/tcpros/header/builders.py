"""Connection header builders for each TCPROS role.

Builders are pure formatting functions: they prefix fixed keys onto the
supplied values in a fixed wire order and perform no validation.
"""

from __future__ import annotations

from ..codec.bytestream import ByteWriter
from ..codec.fields import serialize_fields

CALLER_ID_PREFIX = "callerid="
MD5_PREFIX = "md5sum="
TOPIC_PREFIX = "topic="
SERVICE_PREFIX = "service="
TYPE_PREFIX = "type="
ERROR_PREFIX = "error="
MESSAGE_DEFINITION_PREFIX = "message_definition="

LATCHING_FIELD = "latching=1"
PERSISTENT_FIELD = "persistent=1"
TCP_NODELAY_FIELD = "tcp_nodelay=1"


def subscriber_fields(
    caller_id: str,
    md5sum: str,
    topic: str,
    message_type: str,
    message_definition: str,
    tcp_nodelay: bool = False,
) -> list[str]:
    """Fields a subscriber sends when connecting to a publisher."""
    fields = [
        CALLER_ID_PREFIX + caller_id,
        MD5_PREFIX + md5sum,
        TOPIC_PREFIX + topic,
        TYPE_PREFIX + message_type,
        MESSAGE_DEFINITION_PREFIX + message_definition,
    ]
    if tcp_nodelay:
        fields.append(TCP_NODELAY_FIELD)
    return fields


def publisher_fields(
    caller_id: str,
    md5sum: str,
    message_type: str,
    message_definition: str,
    latching: bool = False,
) -> list[str]:
    """Fields a publisher answers a subscriber with."""
    fields = [
        CALLER_ID_PREFIX + caller_id,
        MD5_PREFIX + md5sum,
        TYPE_PREFIX + message_type,
        MESSAGE_DEFINITION_PREFIX + message_definition,
    ]
    if latching:
        fields.append(LATCHING_FIELD)
    return fields


def service_client_fields(
    caller_id: str, service: str, md5sum: str, persistent: bool = False
) -> list[str]:
    """Fields a service client sends when connecting to a service server."""
    fields = [
        CALLER_ID_PREFIX + caller_id,
        SERVICE_PREFIX + service,
        MD5_PREFIX + md5sum,
    ]
    if persistent:
        fields.append(PERSISTENT_FIELD)
    return fields


def service_server_fields(caller_id: str, md5sum: str, service_type: str) -> list[str]:
    """Fields a service server answers a client with."""
    return [
        CALLER_ID_PREFIX + caller_id,
        MD5_PREFIX + md5sum,
        TYPE_PREFIX + service_type,
    ]


def create_subscriber_header(
    caller_id: str,
    md5sum: str,
    topic: str,
    message_type: str,
    message_definition: str,
    tcp_nodelay: bool = False,
    *,
    count_prefixes: bool = False,
) -> bytes:
    """Build and serialize a subscriber connection header.

    Args:
        caller_id: Name of the subscribing node
        md5sum: Expected message md5sum, or "*"
        topic: Resolved topic name
        message_type: Message type name, or "*"
        message_definition: Full message definition text
        tcp_nodelay: Ask the publisher to disable Nagle's algorithm
        count_prefixes: Include per-field length prefixes in the declared total

    Returns:
        Encoded header block

    Example:
        >>> data = create_subscriber_header(
        ...     "/listener", "992ce8a1687cec8c8bd883ec73ca41d1", "/chatter",
        ...     "std_msgs/String", "string data\\n", tcp_nodelay=True)
    """
    fields = subscriber_fields(
        caller_id, md5sum, topic, message_type, message_definition, tcp_nodelay
    )
    return serialize_fields(fields, count_prefixes=count_prefixes)


def create_publisher_header(
    caller_id: str,
    md5sum: str,
    message_type: str,
    message_definition: str,
    latching: bool = False,
    *,
    count_prefixes: bool = False,
) -> bytes:
    """Build and serialize a publisher connection header."""
    fields = publisher_fields(caller_id, md5sum, message_type, message_definition, latching)
    return serialize_fields(fields, count_prefixes=count_prefixes)


def create_service_client_header(
    caller_id: str,
    service: str,
    md5sum: str,
    persistent: bool = False,
    *,
    count_prefixes: bool = False,
) -> bytes:
    """Build and serialize a service client connection header."""
    fields = service_client_fields(caller_id, service, md5sum, persistent)
    return serialize_fields(fields, count_prefixes=count_prefixes)


def create_service_server_header(
    caller_id: str,
    md5sum: str,
    service_type: str,
    *,
    count_prefixes: bool = False,
) -> bytes:
    """Build and serialize a service server connection header."""
    fields = service_server_fields(caller_id, md5sum, service_type)
    return serialize_fields(fields, count_prefixes=count_prefixes)


def create_error_header(message: str) -> bytes:
    """Encode a header rejection reason as a single length-prefixed string.

    Example:
        >>> create_error_header("bad")
        b'\\x03\\x00\\x00\\x00bad'
    """
    writer = ByteWriter()
    writer.write_string(message)
    return writer.to_bytes()
