"""Connection header validation for the passive side of a handshake.

Validators never raise for a mismatch. They return a ValidationResult and the
caller decides whether to answer with an error header.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from .parser import ConnectionHeader

logger = logging.getLogger(__name__)

WILDCARD = "*"


class ValidationResult(NamedTuple):
    """Outcome of a header check. ``reason`` is None when accepted."""

    accepted: bool
    reason: str | None = None


_ACCEPTED = ValidationResult(True, None)


def _reject(reason: str) -> ValidationResult:
    logger.debug("Rejecting connection header: %s", reason)
    return ValidationResult(False, reason)


def _missing(field_name: str) -> ValidationResult:
    return _reject(f"Connection header missing expected field [{field_name}]")


def _check_type_and_md5(
    header: ConnectionHeader, message_type: str, md5sum: str
) -> ValidationResult:
    if header.type != message_type and header.type != WILDCARD:
        return _reject(f"Got incorrect type [{header.type}] expected [{message_type}]")
    if header.md5sum != md5sum and header.md5sum != WILDCARD:
        return _reject(f"Got incorrect md5sum [{header.md5sum}] expected [{md5sum}]")
    return _ACCEPTED


def validate_subscriber_header(
    header: ConnectionHeader, topic: str, message_type: str, md5sum: str
) -> ValidationResult:
    """Check a header received from a subscriber against what we publish.

    Checks run in order and stop at the first failure: topic, type and md5sum
    present; topic equal; type equal or "*"; md5sum equal or "*".

    Args:
        header: Parsed header from the subscriber
        topic: Topic we publish on
        message_type: Message type we publish
        md5sum: md5sum of the message type we publish

    Returns:
        ValidationResult with a human-readable reason on rejection

    Example:
        >>> header = ConnectionHeader(topic="/a", type="T", md5sum="m")
        >>> validate_subscriber_header(header, "/a", "T", "m")
        ValidationResult(accepted=True, reason=None)
    """
    if not header.topic:
        return _missing("topic")
    if not header.type:
        return _missing("type")
    if not header.md5sum:
        return _missing("md5sum")
    if header.topic != topic:
        return _reject(f"Got incorrect topic [{header.topic}] expected [{topic}]")
    return _check_type_and_md5(header, message_type, md5sum)


def validate_publisher_header(
    header: ConnectionHeader, message_type: str, md5sum: str
) -> ValidationResult:
    """Check a header received from a publisher against what we subscribe to.

    Same rules as validate_subscriber_header without the topic check.
    """
    if not header.type:
        return _missing("type")
    if not header.md5sum:
        return _missing("md5sum")
    return _check_type_and_md5(header, message_type, md5sum)
