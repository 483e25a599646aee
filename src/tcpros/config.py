"""Handshake configuration for a local tcpros endpoint.

This module provides a configuration dataclass holding the per-node options
that go into every connection header, with helpers that build each role's
header from a message class.
"""

from __future__ import annotations

from dataclasses import dataclass

from .header.builders import (
    create_publisher_header,
    create_service_client_header,
    create_service_server_header,
    create_subscriber_header,
)
from .models.base import RosMessage


@dataclass
class HandshakeConfig:
    """Options a local node applies to the headers it sends.

    Attributes:
        caller_id: Name of the local node, sent as "callerid"
        tcp_nodelay: Subscribers ask publishers to disable Nagle's algorithm
        latching: Publishers resend their last message to new subscribers
        persistent: Service clients keep the connection open across calls
        count_prefixes: Header total length counts per-field length prefixes
            (needed to talk to standard ROS peers)

    Examples:
        ```python
        from tcpros import HandshakeConfig

        config = HandshakeConfig(caller_id="/listener", tcp_nodelay=True)
        header = config.subscriber_header("/chatter", String)
        ```
    """

    caller_id: str
    tcp_nodelay: bool = False
    latching: bool = False
    persistent: bool = False
    count_prefixes: bool = False

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if not self.caller_id:
            raise ValueError("caller_id must be a non-empty node name")

        if "=" in self.caller_id:
            raise ValueError(f"caller_id must not contain '=', got {self.caller_id!r}")

    def subscriber_header(self, topic: str, message_class: type[RosMessage]) -> bytes:
        """Build the header a subscriber sends for message_class on topic."""
        return create_subscriber_header(
            self.caller_id,
            _require_md5sum(message_class),
            topic,
            _require_type(message_class),
            message_class.ros_message_definition,
            self.tcp_nodelay,
            count_prefixes=self.count_prefixes,
        )

    def publisher_header(self, message_class: type[RosMessage]) -> bytes:
        """Build the header a publisher answers with for message_class."""
        return create_publisher_header(
            self.caller_id,
            _require_md5sum(message_class),
            _require_type(message_class),
            message_class.ros_message_definition,
            self.latching,
            count_prefixes=self.count_prefixes,
        )

    def service_client_header(self, service: str, service_md5sum: str) -> bytes:
        """Build the header a service client sends to service."""
        return create_service_client_header(
            self.caller_id,
            service,
            service_md5sum,
            self.persistent,
            count_prefixes=self.count_prefixes,
        )

    def service_server_header(self, service_md5sum: str, service_type: str) -> bytes:
        """Build the header a service server answers with."""
        return create_service_server_header(
            self.caller_id,
            service_md5sum,
            service_type,
            count_prefixes=self.count_prefixes,
        )


def _require_type(message_class: type[RosMessage]) -> str:
    if not message_class.ros_type:
        raise ValueError(f"{message_class.__name__} has no ros_type attribute")
    return message_class.ros_type


def _require_md5sum(message_class: type[RosMessage]) -> str:
    if not message_class.ros_md5sum:
        raise ValueError(f"{message_class.__name__} has no ros_md5sum attribute")
    return message_class.ros_md5sum
