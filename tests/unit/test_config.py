"""Unit tests for handshake configuration."""

from __future__ import annotations

import pytest
from sample_messages import MisreportedSize, String

from tcpros import HandshakeConfig, read_header


class TestHandshakeConfig:
    """Test configuration validation and header helpers."""

    def test_defaults(self) -> None:
        """Test flags default to off."""
        config = HandshakeConfig(caller_id="/node")

        assert not config.tcp_nodelay
        assert not config.latching
        assert not config.persistent
        assert not config.count_prefixes

    def test_invalid_caller_id(self) -> None:
        """Test empty or delimiter-bearing caller ids are rejected."""
        with pytest.raises(ValueError, match="non-empty"):
            HandshakeConfig(caller_id="")

        with pytest.raises(ValueError, match="must not contain"):
            HandshakeConfig(caller_id="/a=b")

    def test_subscriber_header(self) -> None:
        """Test the subscriber helper uses the message class metadata."""
        config = HandshakeConfig(caller_id="/listener", tcp_nodelay=True)
        header = read_header(config.subscriber_header("/chatter", String))

        assert header.callerid == "/listener"
        assert header.topic == "/chatter"
        assert header.type == String.ros_type
        assert header.md5sum == String.ros_md5sum
        assert header.message_definition == String.ros_message_definition
        assert header.tcp_nodelay is True

    def test_publisher_header(self) -> None:
        """Test the publisher helper applies latching."""
        config = HandshakeConfig(caller_id="/talker", latching=True)
        header = read_header(config.publisher_header(String))

        assert header.latching is True
        assert header.topic is None

    def test_service_headers(self) -> None:
        """Test the service helpers."""
        config = HandshakeConfig(caller_id="/node", persistent=True, count_prefixes=True)

        client = read_header(
            config.service_client_header("/add_two_ints", "6a2e34150c00229791cc89ff309fff21"),
            count_prefixes=True,
        )
        server = read_header(
            config.service_server_header(
                "6a2e34150c00229791cc89ff309fff21", "rospy_tutorials/AddTwoInts"
            ),
            count_prefixes=True,
        )

        assert client.service == "/add_two_ints"
        assert client.persistent is True
        assert server.type == "rospy_tutorials/AddTwoInts"

    def test_missing_metadata(self) -> None:
        """Test message classes without an md5sum cannot build headers."""
        config = HandshakeConfig(caller_id="/node")

        with pytest.raises(ValueError, match="ros_md5sum"):
            config.publisher_header(MisreportedSize)
