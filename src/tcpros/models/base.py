"""Base message class for tcpros.

This module provides the RosMessage class that every message or service
payload type inherits from. It is the whole contract between the framing
layer and a message type: a size query, a serialize-into-writer operation and
a construct-from-reader operation.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict

from ..codec.bytestream import ByteReader, ByteWriter

M = TypeVar("M", bound="RosMessage")


class RosMessage(BaseModel):
    """Base class for all tcpros message types.

    Subclasses declare their fields with Pydantic and implement the three
    wire operations. Type metadata used during the handshake is set as
    ClassVar attributes.

    Example:
        >>> class String(RosMessage):
        ...     ros_type: ClassVar[str] = "std_msgs/String"
        ...     ros_md5sum: ClassVar[str] = "992ce8a1687cec8c8bd883ec73ca41d1"
        ...     ros_message_definition: ClassVar[str] = "string data\\n"
        ...
        ...     data: str = ""
        ...
        ...     def message_size(self) -> int:
        ...         return 4 + len(self.data.encode("utf-8"))
        ...
        ...     def serialize(self, writer: ByteWriter) -> None:
        ...         writer.write_string(self.data)
        ...
        ...     @classmethod
        ...     def deserialize(cls, reader: ByteReader) -> "String":
        ...         return cls(data=reader.read_string())

    Attributes:
        ros_type: Fully qualified type name, e.g. "std_msgs/String"
        ros_md5sum: md5sum of the type's field layout
        ros_message_definition: Full message definition text
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",
    )

    ros_type: ClassVar[str | None] = None
    ros_md5sum: ClassVar[str | None] = None
    ros_message_definition: ClassVar[str] = ""

    @abstractmethod
    def message_size(self) -> int:
        """Return the number of bytes serialize() will write."""

    @abstractmethod
    def serialize(self, writer: ByteWriter) -> None:
        """Write this message's wire encoding into writer."""

    @classmethod
    @abstractmethod
    def deserialize(cls: type[M], reader: ByteReader) -> M:
        """Construct a message from a reader positioned at its first byte."""
