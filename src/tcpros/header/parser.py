"""Connection header parsing.

Turns a decoded field list into a key/value mapping and then into a typed
ConnectionHeader record.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from pydantic import BaseModel, ConfigDict, Field

from ..codec.bytestream import ByteReader
from ..codec.fields import deserialize_fields
from ..exceptions import DecodeError, MalformedHeaderError

logger = logging.getLogger(__name__)

_FLAG_TRUE = "1"
_KNOWN_STRING_KEYS = (
    "callerid",
    "md5sum",
    "topic",
    "service",
    "type",
    "message_definition",
    "error",
)
_KNOWN_FLAG_KEYS = ("latching", "persistent", "tcp_nodelay")


class ConnectionHeader(BaseModel):
    """Typed view of a parsed connection header.

    String fields are None when the peer did not send them. Flag fields are
    True only when the peer sent the value "1". Keys this record does not know
    about are kept in ``extra``.

    Only the top-level attributes are frozen. ``extra`` is a plain dict built
    fresh for each header, so changing it never affects the mapping the
    header was parsed from.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    callerid: str | None = None
    md5sum: str | None = None
    topic: str | None = None
    service: str | None = None
    type: str | None = None
    message_definition: str | None = None
    error: str | None = None

    latching: bool = False
    persistent: bool = False
    tcp_nodelay: bool = False

    extra: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> ConnectionHeader:
        """Build a header record from a parsed key/value mapping."""
        known = {key: values[key] for key in _KNOWN_STRING_KEYS if key in values}
        flags = {key: values.get(key) == _FLAG_TRUE for key in _KNOWN_FLAG_KEYS}
        extra = {
            key: value
            for key, value in values.items()
            if key not in _KNOWN_STRING_KEYS and key not in _KNOWN_FLAG_KEYS
        }
        return cls(**known, **flags, extra=extra)


def parse_fields(fields: Sequence[str]) -> dict[str, str]:
    """Split "key=value" fields into a mapping.

    Each field is split on its first "=". A field without "=" or with an empty
    key is logged and skipped; parsing continues with the next field. When a
    key repeats, the last occurrence wins.

    Args:
        fields: Decoded header fields in wire order

    Returns:
        Mapping of field name to value
    """
    values: dict[str, str] = {}
    for field in fields:
        key, sep, value = field.partition("=")
        if not sep or not key:
            logger.warning("Invalid connection header while parsing field %r", field)
            continue
        values[key] = value
    return values


def parse_header(fields: Sequence[str]) -> ConnectionHeader:
    """Parse decoded header fields into a ConnectionHeader."""
    return ConnectionHeader.from_mapping(parse_fields(fields))


def read_header(data: bytes, *, count_prefixes: bool = False) -> ConnectionHeader:
    """Decode and parse a raw header block.

    Raises:
        MalformedHeaderError: If the block itself is malformed
    """
    return parse_header(deserialize_fields(data, count_prefixes=count_prefixes))


def decode_error_header(data: bytes) -> str:
    """Decode the rejection reason carried by an error header.

    Raises:
        MalformedHeaderError: If the block is truncated or not UTF-8
    """
    try:
        return ByteReader(data).read_string()
    except DecodeError as e:
        raise MalformedHeaderError(f"Malformed error header: {e}") from e
