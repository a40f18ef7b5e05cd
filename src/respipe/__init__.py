"""src/respipe/__init__.py

Respipe - Minimal HTTP(S) response decoding pipeline.

Respipe fetches a URL with a single ``GET`` over a ``Connection: close``
socket, reads the response to end of stream and rebuilds the body by
undoing chunked transfer-coding first and gzip content-encoding second.
The result is decoded as UTF-8 (lossy, declared charsets are ignored).

Key Features:
    - Zero external dependencies
    - HTTP and HTTPS (verified TLS 1.2+)
    - Chunked and gzip body decoding in the correct order
    - Explicit, typed exception hierarchy
    - Memory optimized with __slots__

Example:
    Loading a page::

        import respipe

        response = respipe.load("https://example.org/")
        print(response.headers.get("content-type"))
        print(response.body)

    Decoding a captured response::

        import io
        from respipe import ResponseAssembler

        raw = b"HTTP/1.1 200 OK\\r\\nContent-Length: 5\\r\\n\\r\\nHello"
        response = ResponseAssembler(io.BytesIO(raw)).assemble()
        assert response.body == "Hello"
"""

import logging

from respipe.client.request import Request, load
from respipe.client.response import Response
from respipe.exceptions import (
    ChunkDecodeError,
    GzipDecodeError,
    MalformedHeaderLine,
    MalformedStatusLine,
    RespipeError,
    StreamReadError,
)
from respipe.http.assembler import ResponseAssembler
from respipe.http.headers import Headers
from respipe.utils.timing import Timeout
from respipe.version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "load",
    "Request",
    "Response",
    "ResponseAssembler",
    "Headers",
    "Timeout",
    "RespipeError",
    "MalformedStatusLine",
    "MalformedHeaderLine",
    "ChunkDecodeError",
    "GzipDecodeError",
    "StreamReadError",
    "__version__",
]
