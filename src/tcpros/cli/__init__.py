"""Command-line interface for tcpros."""
