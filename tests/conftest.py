"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from tcpros import clear_registry


@pytest.fixture
def chatter_md5sum() -> str:
    """md5sum of std_msgs/String."""
    return "992ce8a1687cec8c8bd883ec73ca41d1"


@pytest.fixture
def subscriber_fields_list() -> list[str]:
    """Fields a subscriber to /chatter sends."""
    return [
        "callerid=/listener",
        "md5sum=992ce8a1687cec8c8bd883ec73ca41d1",
        "topic=/chatter",
        "type=std_msgs/String",
        "message_definition=string data\n",
    ]


@pytest.fixture
def empty_registry() -> Iterator[None]:
    """Run a test against an empty message registry."""
    clear_registry()
    yield
    clear_registry()
