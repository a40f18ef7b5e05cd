"""src/respipe/client/response.py

HTTP Response value.

A Response is produced once by the assembler and never changes afterwards.
It carries the header table and the decoded body text; the status line is
not part of it.
"""

from respipe.http.headers import Headers

__all__ = ["Response"]


class Response:
    """
    Represents a fully decoded HTTP response.

    Attributes:
        headers: Header table keyed by lower-cased name.
        body: Body text after de-chunking, gunzipping and lossy UTF-8
            decoding.
    """

    __slots__ = ("_headers", "_body")

    def __init__(self, headers: Headers, body: str) -> None:
        self._headers = headers
        self._body = body

    @property
    def headers(self) -> Headers:
        """Header table (read-only mapping)."""
        return self._headers

    @property
    def body(self) -> str:
        """Decoded body text."""
        return self._body

    def __repr__(self) -> str:
        return f"<Response headers={len(self._headers)} body={len(self._body)} chars>"
