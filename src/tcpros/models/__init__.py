"""Message type base class for tcpros."""

from __future__ import annotations

from .base import RosMessage

__all__ = ["RosMessage"]
