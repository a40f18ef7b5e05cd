"""src/respipe/http/url.py

URL parser for Respipe.
"""

import urllib.parse

__all__ = ["URL"]

DEFAULT_PORTS = {"http": 80, "https": 443}


class URL:
    """
    Utility class for URL parsing and information.

    ``port`` falls back to the scheme's default and ``path`` to ``/``;
    ``target`` is the request-target sent on the request line (path plus
    query).
    """

    __slots__ = ("parsed", "scheme", "host", "port", "path", "target")

    def __init__(self, url: str):
        self.parsed = urllib.parse.urlparse(url)
        self.scheme = self.parsed.scheme
        self.host = self.parsed.hostname
        self.port = self.parsed.port or DEFAULT_PORTS.get(self.scheme)
        self.path = self.parsed.path or "/"
        self.target = self.path
        if self.parsed.query:
            self.target += f"?{self.parsed.query}"

    @property
    def netloc(self) -> str:
        """Host header value: host (bracketed if IPv6), plus a non-default port."""
        host = self.host or ""
        if ":" in host:
            host = f"[{host}]"
        if self.port is None or self.port == DEFAULT_PORTS.get(self.scheme):
            return host
        return f"{host}:{self.port}"
