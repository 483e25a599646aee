"""Message framing and the message type registry.

Message block layout:
- [Length (u32 LE, optional)] [Message bytes]

The length prefix uses the same little-endian byte order as header blocks.
"""

from __future__ import annotations

from typing import TypeVar

from ..codec.bytestream import ByteReader, ByteWriter
from ..exceptions import DecodeError, EncodeError, FramingError
from ..models.base import RosMessage

T = TypeVar("T", bound=RosMessage)

# Global registry: ros_type -> message class
MESSAGE_REGISTRY: dict[str, type[RosMessage]] = {}


def encode_message(message: RosMessage, prepend_length: bool = True) -> bytes:
    """Encode a message, optionally behind a u32 length prefix.

    Args:
        message: Message to encode
        prepend_length: If True, prepend the message's reported size

    Returns:
        Framed message bytes

    Raises:
        EncodeError: If the message writes a different number of bytes than
            message_size() reported
    """
    size = message.message_size()
    writer = ByteWriter()
    if prepend_length:
        writer.write_uint32(size)
    start = len(writer)
    message.serialize(writer)

    written = len(writer) - start
    if written != size:
        raise EncodeError(
            f"{type(message).__name__} reported {size} bytes but wrote {written} bytes"
        )

    return writer.to_bytes()


def decode_message(message_class: type[T], data: bytes) -> T:
    """Decode a message by handing a reader to the type's own deserialize.

    Args:
        message_class: Message class to construct
        data: Message bytes, without a length prefix

    Raises:
        DecodeError: If the data is truncated or the type rejects it
    """
    reader = ByteReader(data)
    try:
        return message_class.deserialize(reader)
    except DecodeError:
        raise
    except Exception as e:
        raise DecodeError(f"Failed to construct {message_class.__name__}: {e}") from e


def unframe_message(framed: bytes) -> bytes:
    """Strip and check a u32 length prefix.

    Raises:
        FramingError: If the frame is shorter than its prefix or the length
            does not match the payload

    Example:
        >>> unframe_message(b"\\x02\\x00\\x00\\x00hi")
        b'hi'
    """
    if len(framed) < 4:
        raise FramingError(f"Frame too short for length prefix: {len(framed)} bytes")

    reader = ByteReader(framed)
    expected = reader.read_uint32()
    if reader.remaining() != expected:
        raise FramingError(
            f"Length mismatch: prefix says {expected} bytes, "
            f"but got {reader.remaining()} bytes"
        )
    return reader.read_bytes(expected)


def register_message(message_class: type[RosMessage]) -> type[RosMessage]:
    """Register a message class for lookup by its ros_type.

    Returns the class so this can be used as a decorator.

    Raises:
        ValueError: If the class has no ros_type or the name is already taken
    """
    type_name = message_class.ros_type
    if not type_name:
        raise ValueError(
            f"{message_class.__name__} has no ros_type attribute. Cannot register."
        )

    existing = MESSAGE_REGISTRY.get(type_name)
    if existing is not None and existing is not message_class:
        raise ValueError(
            f"Message type {type_name} already registered to {existing.__name__}. "
            f"Cannot register {message_class.__name__}."
        )

    MESSAGE_REGISTRY[type_name] = message_class
    return message_class


def lookup_message(type_name: str) -> type[RosMessage]:
    """Return the registered class for a type name.

    Raises:
        DecodeError: If no class is registered under that name
    """
    try:
        return MESSAGE_REGISTRY[type_name]
    except KeyError:
        registered = ", ".join(sorted(MESSAGE_REGISTRY)) or "none"
        raise DecodeError(
            f"Unknown message type {type_name!r}. Registered types: {registered}"
        ) from None


def decode_by_type(type_name: str, data: bytes) -> RosMessage:
    """Decode data as the registered message type named type_name."""
    return decode_message(lookup_message(type_name), data)


def clear_registry() -> None:
    """Clear the message registry (useful for testing)."""
    MESSAGE_REGISTRY.clear()
