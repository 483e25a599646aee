#!/usr/bin/env python3
"""Connection handshake example for tcpros.

This example demonstrates:
1. Building and validating a subscriber header
2. Rejecting a mismatched subscriber with an error header
3. Framing messages and a service response
"""

from __future__ import annotations

from typing import ClassVar

from tcpros import (
    ByteReader,
    ByteWriter,
    HandshakeConfig,
    RosMessage,
    create_error_header,
    decode_error_header,
    decode_message,
    encode_message,
    encode_response,
    read_header,
    unframe_message,
    validate_subscriber_header,
)


class String(RosMessage):
    """std_msgs/String."""

    ros_type: ClassVar[str | None] = "std_msgs/String"
    ros_md5sum: ClassVar[str | None] = "992ce8a1687cec8c8bd883ec73ca41d1"
    ros_message_definition: ClassVar[str] = "string data\n"

    data: str = ""

    def message_size(self) -> int:
        return 4 + len(self.data.encode("utf-8"))

    def serialize(self, writer: ByteWriter) -> None:
        writer.write_string(self.data)

    @classmethod
    def deserialize(cls, reader: ByteReader) -> String:
        return cls(data=reader.read_string())


def main() -> None:
    """Run the handshake example."""
    print("=" * 60)
    print("tcpros Connection Handshake Example")
    print("=" * 60)
    print()

    listener = HandshakeConfig(caller_id="/listener", tcp_nodelay=True)
    talker = HandshakeConfig(caller_id="/talker")

    # Subscriber side
    request_bytes = listener.subscriber_header("/chatter", String)
    print("1. Subscriber header:")
    print(f"   {len(request_bytes)} bytes")
    print()

    # Publisher side
    print("2. Publisher validating request...")
    request = read_header(request_bytes)
    result = validate_subscriber_header(
        request, "/chatter", String.ros_type or "", String.ros_md5sum or ""
    )
    print(f"   From: {request.callerid}")
    print(f"   Accepted: {result.accepted}")
    print(f"   tcp_nodelay: {request.tcp_nodelay}")
    print()

    print("3. Rejecting a subscriber on the wrong topic...")
    wrong = read_header(listener.subscriber_header("/rosout", String))
    result = validate_subscriber_header(
        wrong, "/chatter", String.ros_type or "", String.ros_md5sum or ""
    )
    if not result.accepted and result.reason is not None:
        error_bytes = create_error_header(result.reason)
        print(f"   Sent back: {decode_error_header(error_bytes)}")
    print()

    print("4. Framing messages...")
    reply = talker.publisher_header(String)
    frame = encode_message(String(data="hello world"))
    print(f"   Publisher header: {len(reply)} bytes")
    print(f"   Message frame: {len(frame)} bytes")
    print(f"   Decoded: {decode_message(String, unframe_message(frame)).data!r}")
    print()

    print("5. Service responses...")
    print(f"   Success: {encode_response(String(data='ok')).hex()}")
    print(f"   Failure: {encode_response(None, success=False).hex()}")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
