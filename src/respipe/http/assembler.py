"""src/respipe/http/assembler.py

Response assembly: status line, headers, body read and decode stages.
"""

import enum
import logging
from typing import IO, Dict, Optional

from respipe.client.response import Response
from respipe.exceptions import TruncatedBodyError
from respipe.http.body import decode_chunked, decode_gzip, decode_text, read_to_end
from respipe.http.headers import Headers
from respipe.http.http11 import HttpParser

__all__ = ["State", "ResponseAssembler"]

logger = logging.getLogger(__name__)


class State(enum.Enum):
    """Assembly stages, visited strictly in declaration order."""

    AWAIT_STATUS_LINE = "await_status_line"
    AWAIT_HEADERS = "await_headers"
    READ_BODY = "read_body"
    CONDITIONAL_CHUNK_DECODE = "conditional_chunk_decode"
    CONDITIONAL_GZIP_DECODE = "conditional_gzip_decode"
    TEXT_CONVERT = "text_convert"
    DONE = "done"


class ResponseAssembler:
    """
    Turns a response byte stream into a :class:`Response`.

    The body is read to end of stream, then de-chunked if
    ``Transfer-Encoding`` is exactly ``chunked``, then gunzipped if
    ``Content-Encoding`` is exactly ``gzip``. Undoing the framing before the
    compression is mandatory; the reverse order cannot parse the bytes.

    Attributes:
        stream: Binary stream positioned at the start of the status line.
        parser: Parser used for the head and for size limits.
        strict_length: Raise :class:`TruncatedBodyError` when fewer bytes
            than a declared ``Content-Length`` arrive.
        state: Current :class:`State`; after a failure it names the stage
            that failed.
    """

    __slots__ = ("stream", "parser", "strict_length", "state")

    def __init__(
        self,
        stream: IO[bytes],
        limits: Optional[Dict[str, int]] = None,
        strict_length: bool = False,
    ) -> None:
        self.stream = stream
        self.parser = HttpParser(**(limits or {}))
        self.strict_length = strict_length
        self.state = State.AWAIT_STATUS_LINE

    def assemble(self) -> Response:
        """
        Run every stage and return the finished Response.

        Raises:
            MalformedStatusLine: Status line has fewer than three fields.
            MalformedHeaderLine: A header line has no colon.
            ChunkDecodeError: Chunked framing is broken.
            GzipDecodeError: Gzip stream is broken.
            TruncatedBodyError: Short body with ``strict_length`` enabled.
            StreamReadError: The stream failed while reading.
        """
        self.state = State.AWAIT_STATUS_LINE
        status_line = self.parser.read_status_line(self.stream)
        logger.info(
            "version: %s, status: %s, explanation: %s",
            status_line.version,
            status_line.status,
            status_line.reason,
        )

        self.state = State.AWAIT_HEADERS
        headers = self.parser.read_headers(self.stream)

        self.state = State.READ_BODY
        buffer = read_to_end(self.stream, max_size=self.parser.max_body_size)
        self._check_length(headers, buffer)

        self.state = State.CONDITIONAL_CHUNK_DECODE
        buffer = self._transfer_decode(headers, buffer)

        self.state = State.CONDITIONAL_GZIP_DECODE
        buffer = self._content_decode(headers, buffer)

        self.state = State.TEXT_CONVERT
        body = decode_text(buffer)

        self.state = State.DONE
        return Response(headers, body)

    @staticmethod
    def _transfer_decode(headers: Headers, buffer: bytes) -> bytes:
        if headers.get("transfer-encoding") != "chunked":
            return buffer
        logger.debug("Decoding chunked body (%d bytes framed)", len(buffer))
        return decode_chunked(buffer)

    @staticmethod
    def _content_decode(headers: Headers, buffer: bytes) -> bytes:
        if headers.get("content-encoding") != "gzip":
            return buffer
        logger.debug("Decompressing gzip body (%d bytes)", len(buffer))
        return decode_gzip(buffer)

    def _check_length(self, headers: Headers, buffer: bytes) -> None:
        content_length = headers.get("content-length")
        if content_length is None or headers.get("transfer-encoding") == "chunked":
            return

        try:
            expected = int(content_length)
        except ValueError:
            logger.debug("Ignoring non-numeric Content-Length %r", content_length)
            return

        if len(buffer) >= expected:
            return

        if self.strict_length:
            raise TruncatedBodyError(
                f"Body truncated: expected {expected} bytes, got {len(buffer)}"
            )
        logger.debug(
            "Stream ended after %d of %d declared bytes", len(buffer), expected
        )
