"""Service response framing.

Response block layout:
- Success: [0x01] [Length (u32 LE)] [Response bytes]
- Failure: [0x00] [Length (u32 LE)] [UTF-8 error text]
"""

from __future__ import annotations

from typing import TypeVar

from ..codec.bytestream import ByteReader, ByteWriter
from ..exceptions import DecodeError, FramingError, ServiceCallError
from ..models.base import RosMessage
from .message import decode_message, encode_message

T = TypeVar("T", bound=RosMessage)

SERVICE_ERROR_MESSAGE = "Unable to handle service call"

_SUCCESS = 1
_FAILURE = 0


def encode_response(response: RosMessage | None, success: bool = True) -> bytes:
    """Encode a service outcome.

    The failure text is always SERVICE_ERROR_MESSAGE; the response is ignored
    when success is False.

    Raises:
        ValueError: If success is True but no response is given

    Example:
        >>> encode_response(None, success=False)[:5]
        b'\\x00\\x1d\\x00\\x00\\x00'
    """
    writer = ByteWriter()
    if success:
        if response is None:
            raise ValueError("A successful service response requires a response message")
        writer.write_uint8(_SUCCESS)
        writer.write_bytes(encode_message(response, prepend_length=True))
    else:
        writer.write_uint8(_FAILURE)
        writer.write_string(SERVICE_ERROR_MESSAGE)
    return writer.to_bytes()


def decode_response(message_class: type[T], data: bytes) -> T:
    """Decode a service response block.

    Args:
        message_class: Expected response class
        data: Full response block including the success flag

    Returns:
        Decoded response message

    Raises:
        ServiceCallError: If the server reported failure
        FramingError: If the block is truncated or the flag is unknown
        DecodeError: If the response type rejects the payload
    """
    reader = ByteReader(data)
    try:
        flag = reader.read_uint8()
        if flag == _FAILURE:
            raise ServiceCallError(reader.read_string())
        if flag != _SUCCESS:
            raise FramingError(f"Unknown service response flag: {flag}")
        length = reader.read_uint32()
        payload = reader.read_bytes(length)
    except DecodeError as e:
        raise FramingError(f"Truncated service response: {e}") from e

    return decode_message(message_class, payload)
