"""src/respipe/http/http11.py

HTTP/1.1 status line and header parsing.
"""

import socket
from typing import IO, Dict, NamedTuple, Optional, Tuple

from respipe.exceptions import (
    MalformedHeaderLine,
    MalformedStatusLine,
    ProtocolError,
    ReadTimeout,
    StreamReadError,
)
from respipe.http.headers import Headers

__all__ = ["StatusLine", "HttpParser"]

CRLF = b"\r\n"


class StatusLine(NamedTuple):
    """Parsed status line. Diagnostic only, not kept on the Response."""

    version: str
    status: str
    reason: str


class HttpParser:
    """
    Line-oriented HTTP/1.1 response head parser.

    Handles:
    - Status Line parsing.
    - Header parsing into a :class:`Headers` table (last write wins).
    - Defensive sizing of lines, header count and body.
    """

    def __init__(
        self,
        max_line_size: int = 8192,
        max_field_count: int = 100,
        max_body_size: Optional[int] = None,
    ):
        self.max_line_size = max_line_size
        self.max_field_count = max_field_count
        self.max_body_size = max_body_size

    def read_line(self, stream: IO[bytes]) -> bytes:
        """
        Read one line (terminator included) from the stream.

        Returns b"" at end of stream.

        Raises:
            ProtocolError: If the line exceeds ``max_line_size``.
            ReadTimeout: If the socket read timed out.
            StreamReadError: On any other I/O failure.
        """
        try:
            line = stream.readline(self.max_line_size + 1)
        except socket.timeout as exc:
            raise ReadTimeout(f"Timed out reading line: {exc}") from exc
        except OSError as exc:
            raise StreamReadError(f"Failed to read line: {exc}") from exc

        if len(line) > self.max_line_size:
            raise ProtocolError(
                f"Line exceeds maximum size of {self.max_line_size} bytes"
            )
        return line

    @staticmethod
    def parse_status_line(line: bytes) -> StatusLine:
        """
        Split ``VERSION STATUS REASON`` into its three fields.

        The split is capped at three parts so the reason phrase keeps its
        spaces.

        Raises:
            MalformedStatusLine: If fewer than three fields are present.
        """
        text = line.decode("iso-8859-1")
        if text.endswith("\r\n"):
            text = text[:-2]

        parts = text.split(" ", 2)
        if len(parts) < 3:
            raise MalformedStatusLine(f"Invalid status line: {text!r}")

        version, status, reason = parts
        return StatusLine(version, status, reason)

    @staticmethod
    def parse_header_line(line: bytes) -> Tuple[str, str]:
        """
        Split a header line on its first colon.

        Returns:
            Tuple of (lower-cased name, stripped value).

        Raises:
            MalformedHeaderLine: If the line has no colon.
        """
        text = line.decode("iso-8859-1")
        if ":" not in text:
            raise MalformedHeaderLine(f"Invalid header line: {text!r}")

        key, value = text.split(":", 1)
        return key.lower(), value.strip()

    def read_status_line(self, stream: IO[bytes]) -> StatusLine:
        """Consume exactly one line from the stream and parse it."""
        return self.parse_status_line(self.read_line(stream))

    def read_headers(self, stream: IO[bytes]) -> Headers:
        """
        Consume header lines up to and including the blank CRLF line.

        Raises:
            MalformedHeaderLine: On a line without a colon.
            StreamReadError: If the stream ends before the blank line.
            ProtocolError: If more than ``max_field_count`` headers arrive.
        """
        headers: Dict[str, str] = {}
        count = 0

        while True:
            line = self.read_line(stream)
            if line == CRLF:
                break
            if not line:
                raise StreamReadError("Stream closed before end of headers")

            count += 1
            if count > self.max_field_count:
                raise ProtocolError(
                    f"Too many headers (limit {self.max_field_count})"
                )

            key, value = self.parse_header_line(line)
            headers[key] = value

        return Headers(headers)
