"""src/respipe/http/body.py

HTTP body handling (read-to-end, chunked framing, gzip, text) for Respipe.
"""

import gzip
import logging
import re
import socket
import ssl
import zlib
from typing import IO, Generator, Iterable, Iterator, Optional

from respipe.exceptions import (
    ChunkDecodeError,
    GzipDecodeError,
    ProtocolError,
    ReadTimeout,
    StreamReadError,
)

__all__ = [
    "read_to_end",
    "iter_decode_chunked",
    "decode_chunked",
    "iter_encode_chunked",
    "encode_chunked",
    "decode_gzip",
    "decode_text",
]

logger = logging.getLogger(__name__)

_CHUNK_SIZE = re.compile(rb"[0-9A-Fa-f]+")


def read_to_end(
    stream: IO[bytes], chunk_size: int = 65536, max_size: Optional[int] = None
) -> bytes:
    """
    Read the stream until it is exhausted.

    End of stream terminates the body whether it comes as a clean close or
    as a TLS close without close_notify. Whatever arrived before it is the
    body; a short body is not an error here.

    Args:
        stream: Binary stream positioned after the header block.
        chunk_size: Upper bound for a single read.
        max_size: Optional body size limit.

    Raises:
        ProtocolError: If the body exceeds ``max_size``.
        ReadTimeout: If the socket read timed out.
        StreamReadError: On any other I/O failure.
    """
    # read1 performs at most one raw read, so bytes received before a
    # ragged close are not discarded with the exception.
    read = getattr(stream, "read1", stream.read)
    buffer = bytearray()

    while True:
        try:
            chunk = read(chunk_size)
        except ssl.SSLEOFError:
            logger.debug("TLS stream closed without close_notify, ending body")
            break
        except socket.timeout as exc:
            raise ReadTimeout(f"Timed out reading body: {exc}") from exc
        except OSError as exc:
            raise StreamReadError(f"Failed to read body: {exc}") from exc

        if not chunk:
            break

        buffer += chunk
        if max_size is not None and len(buffer) > max_size:
            raise ProtocolError(f"Body exceeds maximum size of {max_size} bytes")

    return bytes(buffer)


def iter_decode_chunked(data: bytes) -> Generator[bytes, None, None]:
    """Iterate over the payload pieces of a chunked transfer-encoded buffer."""
    pos = 0
    while True:
        eol = data.find(b"\r\n", pos)
        if eol == -1:
            raise ChunkDecodeError("Truncated chunk size line")

        line = data[pos:eol]
        size_field = line.split(b";", 1)[0].strip()
        if not _CHUNK_SIZE.fullmatch(size_field):
            raise ChunkDecodeError(f"Invalid chunk size: {line!r}")

        size = int(size_field, 16)
        pos = eol + 2

        if size == 0:
            # Skip trailer fields up to the final empty line
            while pos < len(data):
                eol = data.find(b"\r\n", pos)
                if eol == -1 or eol == pos:
                    break
                pos = eol + 2
            return

        end = pos + size
        if end > len(data):
            raise ChunkDecodeError(
                f"Truncated chunk: expected {size} bytes, got {len(data) - pos}"
            )
        if data[end : end + 2] != b"\r\n":
            raise ChunkDecodeError("Missing CRLF after chunk data")

        yield data[pos:end]
        pos = end + 2


def decode_chunked(data: bytes) -> bytes:
    """
    Strip chunked framing from a complete body buffer.

    Raises:
        ChunkDecodeError: On a bad size line, short chunk data, missing CRLF
            or missing terminating zero-length chunk.
    """
    return b"".join(iter_decode_chunked(data))


def iter_encode_chunked(chunks: Iterable[bytes]) -> Iterator[bytes]:
    """
    Frame an iterable of bytes chunks with HTTP chunked transfer encoding.

    Each chunk is emitted as ``{hex_size}\\r\\n{data}\\r\\n``.
    A final ``0\\r\\n\\r\\n`` terminator follows the last chunk.
    Empty chunks are skipped since a zero size ends the body.
    """
    for chunk in chunks:
        if not chunk:
            continue
        yield f"{len(chunk):x}\r\n".encode("ascii") + chunk + b"\r\n"
    yield b"0\r\n\r\n"


def encode_chunked(data: bytes, chunk_size: int = 8192) -> bytes:
    """Chunk-encode ``data`` in pieces of at most ``chunk_size`` bytes."""
    pieces = (data[i : i + chunk_size] for i in range(0, len(data), chunk_size))
    return b"".join(iter_encode_chunked(pieces))


def decode_gzip(data: bytes) -> bytes:
    """
    Decompress a gzip stream (multiple members allowed).

    Raises:
        GzipDecodeError: On a bad header, corrupt data or truncated stream.
    """
    try:
        return gzip.decompress(data)
    except (OSError, EOFError, zlib.error) as exc:
        raise GzipDecodeError(f"Failed to decompress gzip body: {exc}") from exc


def decode_text(data: bytes) -> str:
    """
    Decode body bytes as UTF-8, replacing invalid sequences with U+FFFD.

    Note: any charset declared in Content-Type is ignored. An ISO-8859-1
    body therefore loses its non-ASCII characters.
    """
    return data.decode("utf-8", errors="replace")
