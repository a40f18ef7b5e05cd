"""src/respipe/transport/tls.py

TLS configuration for Respipe.
"""

import ssl
from typing import Optional


def create_ssl_context(cafile: Optional[str] = None) -> ssl.SSLContext:
    """
    Create a verifying client context, TLS 1.2 minimum.

    Hostname checking and certificate verification stay on. ``cafile`` is a
    PEM bundle trusted on top of the system store, for servers signed by a
    private CA.
    """
    context = ssl.create_default_context()
    context.minimum_version = ssl.TLSVersion.TLSv1_2
    if cafile:
        context.load_verify_locations(cafile=cafile)
    return context
