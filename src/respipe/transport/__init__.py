"""src/respipe/transport/__init__.py

Transport layer module for Respipe.

This module provides low-level connection management: TCP connections with
optional TLS encryption, exposed to the response pipeline as a binary stream.
"""

from .connection import Connection
from .tls import create_ssl_context

__all__ = ["Connection", "create_ssl_context"]
