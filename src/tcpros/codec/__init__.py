"""Binary codec for tcpros.

This module provides the byte-level primitives and the connection header
field block codec.
"""

from __future__ import annotations

from .bytestream import ByteReader, ByteWriter
from .fields import deserialize_fields, read_fields, serialize_fields, write_fields

__all__ = [
    "ByteReader",
    "ByteWriter",
    "serialize_fields",
    "deserialize_fields",
    "write_fields",
    "read_fields",
]
