"""Byte-level reading and writing utilities.

This module provides the little-endian primitives every TCPROS block is made
of: unsigned integers, raw bytes and u32-length-prefixed UTF-8 strings.
"""

from __future__ import annotations

import struct

from ..exceptions import DecodeError

_UINT32_MAX = 0xFFFFFFFF


class ByteWriter:
    """Accumulates little-endian values into a byte buffer.

    Example:
        >>> writer = ByteWriter()
        >>> writer.write_uint8(1)
        >>> writer.write_string("callerid=/talker")
        >>> data = writer.to_bytes()
    """

    def __init__(self) -> None:
        self._buffer = bytearray()

    def write_uint8(self, value: int) -> None:
        """Write a single unsigned byte.

        Raises:
            ValueError: If value is outside 0-255
        """
        if not 0 <= value <= 0xFF:
            raise ValueError(f"uint8 value must be 0-255, got {value}")
        self._buffer.append(value)

    def write_uint32(self, value: int) -> None:
        """Write an unsigned 32-bit little-endian integer.

        Raises:
            ValueError: If value does not fit in 32 bits
        """
        if not 0 <= value <= _UINT32_MAX:
            raise ValueError(f"uint32 value must be 0-{_UINT32_MAX}, got {value}")
        self._buffer.extend(struct.pack("<I", value))

    def write_bytes(self, data: bytes) -> None:
        self._buffer.extend(data)

    def write_string(self, value: str) -> None:
        """Write a string as a u32 byte length followed by its UTF-8 bytes."""
        encoded = value.encode("utf-8")
        self.write_uint32(len(encoded))
        self._buffer.extend(encoded)

    def to_bytes(self) -> bytes:
        return bytes(self._buffer)

    def __len__(self) -> int:
        return len(self._buffer)


class ByteReader:
    """Reads little-endian values from a byte buffer with a moving cursor.

    Every read either consumes exactly the bytes it needs or raises
    DecodeError without moving the cursor.

    Example:
        >>> reader = ByteReader(data)
        >>> flag = reader.read_uint8()
        >>> text = reader.read_string()
    """

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._position = 0

    def _take(self, num_bytes: int) -> bytes:
        if num_bytes < 0:
            raise ValueError(f"num_bytes must be >= 0, got {num_bytes}")
        end = self._position + num_bytes
        if end > len(self._data):
            raise DecodeError(
                f"Not enough bytes: need {num_bytes}, have {self.remaining()}"
            )
        chunk = self._data[self._position : end]
        self._position = end
        return chunk

    def read_uint8(self) -> int:
        return self._take(1)[0]

    def read_uint32(self) -> int:
        """Read an unsigned 32-bit little-endian integer.

        Raises:
            DecodeError: If fewer than 4 bytes remain
        """
        return struct.unpack("<I", self._take(4))[0]

    def read_bytes(self, num_bytes: int) -> bytes:
        return self._take(num_bytes)

    def read_string(self) -> str:
        """Read a u32-length-prefixed UTF-8 string.

        Raises:
            DecodeError: If the buffer is truncated or the bytes are not UTF-8
        """
        start = self._position
        length = self.read_uint32()
        try:
            raw = self._take(length)
        except DecodeError:
            self._position = start
            raise
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            self._position = start
            raise DecodeError(f"Invalid UTF-8 in string at offset {start}: {e}") from e

    def remaining(self) -> int:
        return len(self._data) - self._position

    def position(self) -> int:
        return self._position
