"""Unit tests for byte stream utilities."""

from __future__ import annotations

import pytest

from tcpros.codec.bytestream import ByteReader, ByteWriter
from tcpros.exceptions import DecodeError


class TestByteWriter:
    """Test ByteWriter functionality."""

    def test_write_uint8(self) -> None:
        """Test writing single bytes."""
        writer = ByteWriter()
        writer.write_uint8(0)
        writer.write_uint8(255)

        assert writer.to_bytes() == b"\x00\xff"
        assert len(writer) == 2

    def test_write_uint32_little_endian(self) -> None:
        """Test u32 values are little-endian."""
        writer = ByteWriter()
        writer.write_uint32(0x01020304)

        assert writer.to_bytes() == b"\x04\x03\x02\x01"

    def test_write_bounds(self) -> None:
        """Test out-of-range integers are rejected."""
        writer = ByteWriter()

        with pytest.raises(ValueError, match="uint8"):
            writer.write_uint8(256)

        with pytest.raises(ValueError, match="uint32"):
            writer.write_uint32(-1)

        with pytest.raises(ValueError, match="uint32"):
            writer.write_uint32(2**32)

    def test_write_string_utf8_length(self) -> None:
        """Test string prefix is the UTF-8 byte length, not character count."""
        writer = ByteWriter()
        writer.write_string("é")

        assert writer.to_bytes() == b"\x02\x00\x00\x00\xc3\xa9"


class TestByteReader:
    """Test ByteReader functionality."""

    def test_read_primitives(self) -> None:
        """Test reading back what the writer produced."""
        writer = ByteWriter()
        writer.write_uint8(7)
        writer.write_uint32(123456)
        writer.write_string("topic=/chatter")
        writer.write_bytes(b"\xde\xad")

        reader = ByteReader(writer.to_bytes())
        assert reader.read_uint8() == 7
        assert reader.read_uint32() == 123456
        assert reader.read_string() == "topic=/chatter"
        assert reader.read_bytes(2) == b"\xde\xad"
        assert reader.remaining() == 0

    def test_read_past_end(self) -> None:
        """Test truncated reads raise DecodeError."""
        reader = ByteReader(b"\x01\x02")

        with pytest.raises(DecodeError, match="Not enough bytes"):
            reader.read_uint32()

        # Failed read does not move the cursor
        assert reader.position() == 0
        assert reader.read_bytes(2) == b"\x01\x02"

    def test_read_string_truncated_body(self) -> None:
        """Test a string whose prefix claims more bytes than remain."""
        reader = ByteReader(b"\x10\x00\x00\x00abc")

        with pytest.raises(DecodeError):
            reader.read_string()

        assert reader.position() == 0

    def test_read_string_invalid_utf8(self) -> None:
        """Test invalid UTF-8 raises DecodeError."""
        reader = ByteReader(b"\x01\x00\x00\x00\xff")

        with pytest.raises(DecodeError, match="UTF-8"):
            reader.read_string()
