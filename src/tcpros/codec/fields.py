"""Connection header field block codec.

A header block on the wire is:
- [Total length (u32 LE)] then repeated [Field length (u32 LE)] [UTF-8 "key=value"]

By default the total length is the sum of the field byte lengths only, not
counting each field's own 4-byte prefix. Pass ``count_prefixes=True`` to
include the prefixes, which is the accounting standard ROS peers use.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..exceptions import DecodeError, MalformedHeaderError
from .bytestream import ByteReader, ByteWriter

_PREFIX_SIZE = 4


def _field_size(field: str, count_prefixes: bool) -> int:
    size = len(field.encode("utf-8"))
    return size + _PREFIX_SIZE if count_prefixes else size


def write_fields(
    writer: ByteWriter, fields: Sequence[str], *, count_prefixes: bool = False
) -> None:
    """Write a header field block into an existing writer.

    Args:
        writer: Destination writer
        fields: Ordered "key=value" strings
        count_prefixes: Include per-field length prefixes in the declared total
    """
    total_length = sum(_field_size(field, count_prefixes) for field in fields)
    writer.write_uint32(total_length)
    for field in fields:
        writer.write_string(field)


def serialize_fields(fields: Sequence[str], *, count_prefixes: bool = False) -> bytes:
    """Serialize an ordered list of header fields.

    Any list, including an empty one, is accepted.

    Args:
        fields: Ordered "key=value" strings
        count_prefixes: Include per-field length prefixes in the declared total

    Returns:
        Encoded header block

    Example:
        >>> serialize_fields(["a=1"])
        b'\\x03\\x00\\x00\\x00\\x03\\x00\\x00\\x00a=1'
    """
    writer = ByteWriter()
    write_fields(writer, fields, count_prefixes=count_prefixes)
    return writer.to_bytes()


def read_fields(reader: ByteReader, *, count_prefixes: bool = False) -> list[str]:
    """Read a header field block from a reader positioned at its total length.

    Fields are read until their accumulated size reaches or exceeds the
    declared total.

    Raises:
        MalformedHeaderError: If the block is truncated or contains invalid UTF-8
    """
    try:
        total_length = reader.read_uint32()
    except DecodeError as e:
        raise MalformedHeaderError(f"Truncated header: missing total length ({e})") from e

    fields: list[str] = []
    consumed = 0
    while consumed < total_length:
        try:
            field = reader.read_string()
        except DecodeError as e:
            raise MalformedHeaderError(
                f"Truncated header: declared {total_length} bytes, "
                f"read {consumed} before failure ({e})"
            ) from e
        consumed += _field_size(field, count_prefixes)
        fields.append(field)

    return fields


def deserialize_fields(data: bytes, *, count_prefixes: bool = False) -> list[str]:
    """Deserialize a header field block.

    Args:
        data: Encoded header block
        count_prefixes: Declared total includes per-field length prefixes

    Returns:
        Ordered list of field strings

    Raises:
        MalformedHeaderError: If the declared total is not reachable
    """
    return read_fields(ByteReader(data), count_prefixes=count_prefixes)
