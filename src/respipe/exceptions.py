"""src/respipe/exceptions.py

Respipe Exceptions hierarchy.

Every error is terminal for the request in flight: nothing is retried and no
partial Response is produced.
"""

# pylint: disable=redefined-builtin


class RespipeError(Exception):
    """Base exception for all Respipe errors."""


class RequestError(RespipeError):
    """General exception for Request errors."""


class NetworkError(RequestError):
    """
    Base exception for network-related errors.
    Wraps socket errors and other connection issues.
    """


class ConnectionError(NetworkError):
    """TCP connection could not be established or used."""


class TlsError(ConnectionError):
    """TLS/SSL handshake or verification errors."""


class StreamReadError(NetworkError):
    """I/O failure while reading a line or the body from the stream."""


class TimeoutError(RequestError):
    """
    Base exception for timeouts.
    """

    def __init__(self, message: str = "Operation timed out"):
        super().__init__(message)


class ConnectTimeout(TimeoutError):
    """Timeout during connection establishment."""


class ReadTimeout(TimeoutError):
    """Timeout during data reception."""


class ProtocolError(RequestError):
    """
    Errors related to HTTP protocol (parsing, violations, size limits).
    """


class MalformedStatusLine(ProtocolError):
    """Status line does not split into version, status and reason."""


class MalformedHeaderLine(ProtocolError):
    """Header line has no colon separator."""


class TruncatedBodyError(ProtocolError):
    """Fewer body bytes arrived than the declared Content-Length."""


class DecodeError(ProtocolError):
    """Body bytes could not be decoded."""


class ChunkDecodeError(DecodeError):
    """Chunked transfer framing is malformed or truncated."""


class GzipDecodeError(DecodeError):
    """Gzip content-encoded body is invalid or truncated."""
