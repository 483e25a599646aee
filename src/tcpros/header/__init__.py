"""Connection header building, parsing and validation."""

from __future__ import annotations

from .builders import (
    CALLER_ID_PREFIX,
    ERROR_PREFIX,
    LATCHING_FIELD,
    MD5_PREFIX,
    MESSAGE_DEFINITION_PREFIX,
    PERSISTENT_FIELD,
    SERVICE_PREFIX,
    TCP_NODELAY_FIELD,
    TOPIC_PREFIX,
    TYPE_PREFIX,
    create_error_header,
    create_publisher_header,
    create_service_client_header,
    create_service_server_header,
    create_subscriber_header,
    publisher_fields,
    service_client_fields,
    service_server_fields,
    subscriber_fields,
)
from .parser import (
    ConnectionHeader,
    decode_error_header,
    parse_fields,
    parse_header,
    read_header,
)
from .validators import (
    WILDCARD,
    ValidationResult,
    validate_publisher_header,
    validate_subscriber_header,
)

__all__ = [
    # Builders
    "subscriber_fields",
    "publisher_fields",
    "service_client_fields",
    "service_server_fields",
    "create_subscriber_header",
    "create_publisher_header",
    "create_service_client_header",
    "create_service_server_header",
    "create_error_header",
    # Field prefixes
    "CALLER_ID_PREFIX",
    "MD5_PREFIX",
    "TOPIC_PREFIX",
    "SERVICE_PREFIX",
    "TYPE_PREFIX",
    "ERROR_PREFIX",
    "MESSAGE_DEFINITION_PREFIX",
    "LATCHING_FIELD",
    "PERSISTENT_FIELD",
    "TCP_NODELAY_FIELD",
    # Parsing
    "ConnectionHeader",
    "parse_fields",
    "parse_header",
    "read_header",
    "decode_error_header",
    # Validation
    "WILDCARD",
    "ValidationResult",
    "validate_subscriber_header",
    "validate_publisher_header",
]
