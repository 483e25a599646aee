"""Unit tests for connection header parsing."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from tcpros.codec import serialize_fields
from tcpros.exceptions import MalformedHeaderError
from tcpros.header import (
    ConnectionHeader,
    create_error_header,
    decode_error_header,
    parse_fields,
    parse_header,
    read_header,
)


class TestParseFields:
    """Test splitting fields into a mapping."""

    def test_basic(self, subscriber_fields_list: list[str]) -> None:
        """Test well-formed fields become key/value pairs."""
        values = parse_fields(subscriber_fields_list)

        assert values["topic"] == "/chatter"
        assert values["message_definition"] == "string data\n"

    def test_splits_on_first_delimiter(self) -> None:
        """Test values may contain '='."""
        assert parse_fields(["message_definition=int32 a=1"]) == {
            "message_definition": "int32 a=1"
        }

    def test_empty_value(self) -> None:
        """Test an empty value is kept."""
        assert parse_fields(["message_definition="]) == {"message_definition": ""}

    def test_malformed_field_dropped(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test a field with no delimiter is logged and skipped."""
        with caplog.at_level(logging.WARNING, logger="tcpros.header.parser"):
            values = parse_fields(["topic=/a", "nodelimiterhere", "type=T"])

        assert values == {"topic": "/a", "type": "T"}
        assert "nodelimiterhere" not in values
        assert "nodelimiterhere" in caplog.text

    def test_empty_key_dropped(self) -> None:
        """Test a field starting with '=' is skipped."""
        assert parse_fields(["=value", "type=T"]) == {"type": "T"}

    def test_duplicate_last_wins(self) -> None:
        """Test the later occurrence of a key wins."""
        assert parse_fields(["type=A", "type=B"]) == {"type": "B"}


class TestConnectionHeader:
    """Test the typed header record."""

    def test_known_fields(self, subscriber_fields_list: list[str]) -> None:
        """Test known keys land on typed attributes."""
        header = parse_header(subscriber_fields_list)

        assert header.callerid == "/listener"
        assert header.topic == "/chatter"
        assert header.type == "std_msgs/String"
        assert header.md5sum == "992ce8a1687cec8c8bd883ec73ca41d1"
        assert header.service is None
        assert header.extra == {}

    def test_flags(self) -> None:
        """Test flags are true only for the value "1"."""
        header = parse_header(["latching=1", "tcp_nodelay=0"])

        assert header.latching is True
        assert header.tcp_nodelay is False
        assert header.persistent is False

    def test_unknown_keys_in_extra(self) -> None:
        """Test unrecognised keys are preserved."""
        header = parse_header(["custom=1", "topic=/a"])

        assert header.extra == {"custom": "1"}
        assert header.topic == "/a"

    def test_extra_is_independent_copy(self) -> None:
        """Test changing extra does not touch the parsed mapping."""
        values = {"custom": "1"}
        header = ConnectionHeader.from_mapping(values)

        header.extra["other"] = "2"

        assert values == {"custom": "1"}
        assert ConnectionHeader.from_mapping(values).extra == {"custom": "1"}

    def test_error_field(self) -> None:
        """Test the error key is surfaced."""
        assert parse_header(["error=topic mismatch"]).error == "topic mismatch"

    def test_frozen(self) -> None:
        """Test parsed headers are immutable."""
        header = ConnectionHeader(topic="/a")

        with pytest.raises(ValidationError):
            header.topic = "/b"  # type: ignore[misc]


class TestReadHeader:
    """Test decoding straight from bytes."""

    def test_read_header(self, subscriber_fields_list: list[str]) -> None:
        """Test the full receive path."""
        header = read_header(serialize_fields(subscriber_fields_list))

        assert header.topic == "/chatter"

    def test_read_header_malformed(self) -> None:
        """Test malformed blocks propagate."""
        with pytest.raises(MalformedHeaderError):
            read_header(b"\xff\x00\x00\x00")

    def test_error_header_roundtrip(self) -> None:
        """Test decoding a rejection reason."""
        assert decode_error_header(create_error_header("nope")) == "nope"

    def test_error_header_truncated(self) -> None:
        """Test truncated error headers raise."""
        with pytest.raises(MalformedHeaderError):
            decode_error_header(b"\x09\x00\x00\x00no")
