"""Header inspection CLI command."""

from __future__ import annotations

import binascii
from pathlib import Path

from ..codec.fields import deserialize_fields
from ..header.parser import ConnectionHeader, parse_fields


def load_header_bytes(file_path: Path, as_hex: bool = False) -> bytes:
    """Read a captured header block from disk.

    Args:
        file_path: File holding the raw block, or its hex dump
        as_hex: Treat the file as hex text (whitespace ignored)

    Raises:
        ValueError: If as_hex is set and the file is not valid hex
    """
    if not as_hex:
        return file_path.read_bytes()

    text = "".join(file_path.read_text(encoding="utf-8").split())
    try:
        return binascii.unhexlify(text)
    except binascii.Error as e:
        raise ValueError(f"{file_path} is not valid hex: {e}") from e


def inspect_header(data: bytes, count_prefixes: bool = False) -> None:
    """Print the fields of a header block and the typed view of them.

    Raises:
        MalformedHeaderError: If the block cannot be decoded
    """
    fields = deserialize_fields(data, count_prefixes=count_prefixes)
    values = parse_fields(fields)
    header = ConnectionHeader.from_mapping(values)

    print("|" * 7, "tcpros: connection header", "|" * 7)
    print(f"{len(fields)} field{'s' if len(fields) != 1 else ''} decoded.")
    print()

    for field in fields:
        key, sep, value = field.partition("=")
        if not sep:
            print(f"  ! {field!r} (no '=' delimiter, dropped)")
            continue
        if not key:
            print(f"  ! {field!r} (empty key, dropped)")
            continue
        if key == "message_definition":
            lines = value.count("\n")
            print(f"  {key:<20} <{len(value)} chars, {lines} lines>")
        else:
            print(f"  {key:<20} {value}")

    flags = [name for name in ("latching", "persistent", "tcp_nodelay") if getattr(header, name)]
    print()
    print(f"Flags: {', '.join(flags) if flags else 'none'}")
    if header.error is not None:
        print(f"Peer error: {header.error}")
