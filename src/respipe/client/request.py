"""src/respipe/client/request.py

HTTP GET request builder and sender.
"""

import logging
from typing import Dict, Optional, Union

from respipe.client.response import Response
from respipe.exceptions import RequestError
from respipe.http.assembler import ResponseAssembler
from respipe.http.url import URL
from respipe.transport.connection import Connection
from respipe.utils.timing import Timeout
from respipe.utils.validators import validate_url
from respipe.version import __version__

__all__ = ["Request", "load"]

logger = logging.getLogger(__name__)

USER_AGENT = f"respipe/{__version__}"


class Request:
    """
    HTTP GET request builder and sender.
    """

    @staticmethod
    def build_request(
        path: str,
        host: str,
        headers: Optional[Dict[str, str]] = None,
        accept_gzip: bool = False,
    ) -> bytes:
        """
        Builds the raw HTTP request bytes.

        ``Connection: close`` is always sent so that the server closing the
        stream marks the end of the body.
        """
        request_line = f"GET {path} HTTP/1.1\r\n"
        default_headers = {
            "Host": host,
            "Connection": "close",
            "User-Agent": USER_AGENT,
        }
        if accept_gzip:
            default_headers["Accept-Encoding"] = "gzip"

        final_headers = {**default_headers, **(headers or {})}
        final_headers["Connection"] = "close"

        headers_str = ""
        for k, v in final_headers.items():
            # Validate against HTTP header injection attacks
            if "\r" in k or "\n" in k or "\r" in v or "\n" in v:
                raise ValueError(f"Invalid character in header {k}: {v!r}")
            if "\x00" in k or "\x00" in v:
                raise ValueError(f"Null byte in header {k}: {v!r}")
            headers_str += f"{k}: {v}\r\n"

        return (request_line + headers_str + "\r\n").encode("utf-8")

    @classmethod
    # pylint: disable=too-many-arguments
    def send(
        cls,
        url: Union[str, URL],
        *,
        headers: Optional[Dict[str, str]] = None,
        timeout: Union[float, Timeout, None] = None,
        accept_gzip: bool = False,
        strict_length: bool = False,
        limits: Optional[Dict[str, int]] = None,
        cafile: Optional[str] = None,
    ) -> Response:
        """
        Fetch ``url`` and return the decoded Response.

        The connection is released once the body has been read, whether
        decoding succeeds or not.

        Args:
            url: ``http://`` or ``https://`` URL, as a string or :class:`URL`.
            headers: Extra request headers.
            timeout: Seconds or :class:`Timeout`; ``None`` blocks indefinitely.
            accept_gzip: Send ``Accept-Encoding: gzip``.
            strict_length: Fail on a body shorter than its Content-Length.
            limits: Parser limits (max_line_size, max_field_count,
                max_body_size).
            cafile: CA bundle to verify https servers against.

        Raises:
            RequestError: Unsupported scheme, bad port or missing host.
            ConnectionError: TCP/TLS failure (not retried).
            ProtocolError: Any parse or decode failure.
            StreamReadError: Read failure on the open stream.
        """
        if not isinstance(url, URL):
            if not validate_url(url):
                raise RequestError(f"Unsupported URL scheme: {url!r}")
            try:
                url = URL(url)
            except ValueError as exc:
                raise RequestError(f"Invalid URL {url!r}: {exc}") from exc

        if not url.host or url.port is None:
            raise RequestError("Invalid URL: could not determine host")

        request_bytes = cls.build_request(
            url.target, url.netloc, headers, accept_gzip=accept_gzip
        )
        logger.debug("GET %s from %s:%s", url.target, url.host, url.port)

        with Connection(
            url.host, url.port, use_ssl=(url.scheme == "https"),
            timeout=timeout,
            cafile=cafile,
        ) as conn:
            conn.send(request_bytes)
            with conn.makefile() as stream:
                assembler = ResponseAssembler(
                    stream, limits=limits, strict_length=strict_length
                )
                return assembler.assemble()


def load(
    url: Union[str, URL],
    *,
    headers: Optional[Dict[str, str]] = None,
    timeout: Union[float, Timeout, None] = None,
    accept_gzip: bool = False,
    strict_length: bool = False,
    limits: Optional[Dict[str, int]] = None,
    cafile: Optional[str] = None,
) -> Response:
    """Load a URL. Shortcut for :meth:`Request.send`."""
    return Request.send(
        url,
        headers=headers,
        timeout=timeout,
        accept_gzip=accept_gzip,
        strict_length=strict_length,
        limits=limits,
        cafile=cafile,
    )
