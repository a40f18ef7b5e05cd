import gzip
from typing import Callable, Dict, Optional

import pytest


@pytest.fixture
def raw_response() -> Callable[..., bytes]:
    """Fixture building raw HTTP response bytes from parts."""

    def _raw_response(
        body: bytes = b"",
        headers: Optional[Dict[str, str]] = None,
        status_line: str = "HTTP/1.1 200 OK",
    ) -> bytes:
        head = status_line + "\r\n"
        for name, value in (headers or {}).items():
            head += f"{name}: {value}\r\n"
        return (head + "\r\n").encode("iso-8859-1") + body

    return _raw_response


@pytest.fixture
def gzip_hello() -> bytes:
    """Gzip-compressed b"Hello"."""
    return gzip.compress(b"Hello")
