"""Integration tests for the load pipeline.

These tests use a local HTTP test server to validate real socket reads,
chunked framing and gzip bodies without external dependencies.
"""

import gzip
import threading
from http.server import BaseHTTPRequestHandler, HTTPServer
from typing import Any

import pytest

import respipe
from respipe.exceptions import (
    ConnectionError,
    MalformedHeaderLine,
    TruncatedBodyError,
)
from respipe.http.body import encode_chunked

TEXT = "Hello, World! " * 100


class IntegrationHTTPRequestHandler(BaseHTTPRequestHandler):
    """Simple HTTP server for integration testing."""

    def log_message(self, format: str, *args: Any) -> None:
        """Suppress server logs during testing."""

    def _send_body(self, body: bytes, **headers: str) -> None:
        self.send_response(200)
        for name, value in headers.items():
            self.send_header(name.replace("_", "-"), value)
        self.end_headers()
        self.wfile.write(body)

    def do_GET(self) -> None:
        """Handle GET requests."""
        if self.path == "/chunked":
            self._send_body(
                encode_chunked(TEXT.encode(), chunk_size=100),
                Transfer_Encoding="chunked",
            )

        elif self.path == "/gzip":
            self._send_body(gzip.compress(TEXT.encode()), Content_Encoding="gzip")

        elif self.path == "/chunked-gzip":
            self._send_body(
                encode_chunked(gzip.compress(TEXT.encode()), chunk_size=64),
                Transfer_Encoding="chunked",
                Content_Encoding="gzip",
            )

        elif self.path == "/truncated":
            self._send_body(b"Hel", Content_Length="5")

        elif self.path == "/latin1":
            self._send_body(
                "café".encode("iso-8859-1"),
                Content_Type="text/html; charset=ISO-8859-1",
            )

        elif self.path == "/malformed":
            self.wfile.write(b"HTTP/1.1 200 OK\r\nBroken header\r\n\r\nHello")

        elif self.path == "/echo-headers":
            lines = [
                f"{name}={self.headers.get(name, '')}"
                for name in ("Host", "Connection", "Accept-Encoding")
            ]
            self._send_body("\n".join(lines).encode())

        else:
            self._send_body(b"Hello", Content_Type="text/plain", Content_Length="5")


class TestHTTPIntegration:
    """Integration tests for respipe.load()."""

    @classmethod
    def setup_class(cls):
        """Start the test HTTP server."""
        cls.server = HTTPServer(("localhost", 0), IntegrationHTTPRequestHandler)
        cls.port = cls.server.server_port
        cls.base_url = f"http://localhost:{cls.port}"

        # Start server in background thread
        cls.server_thread = threading.Thread(target=cls.server.serve_forever)
        cls.server_thread.daemon = True
        cls.server_thread.start()

    @classmethod
    def teardown_class(cls):
        """Stop the test HTTP server."""
        cls.server.shutdown()
        cls.server.server_close()

    def test_plain_body(self):
        """Test a plain body with Content-Length."""
        response = respipe.load(f"{self.base_url}/", timeout=5)

        assert response.body == "Hello"
        assert response.headers["content-type"] == "text/plain"

    def test_chunked_body(self):
        """Test a chunked body over a real socket."""
        response = respipe.load(f"{self.base_url}/chunked", timeout=5)

        assert response.body == TEXT
        assert response.headers["transfer-encoding"] == "chunked"

    def test_gzip_body(self):
        """Test a gzip body over a real socket."""
        assert respipe.load(f"{self.base_url}/gzip", timeout=5).body == TEXT

    def test_chunked_gzip_body(self):
        """Test a compressed then chunked body over a real socket."""
        assert respipe.load(f"{self.base_url}/chunked-gzip", timeout=5).body == TEXT

    def test_truncated_body_tolerated(self):
        """Test that the server closing early yields the received bytes."""
        assert respipe.load(f"{self.base_url}/truncated", timeout=5).body == "Hel"

    def test_truncated_body_strict(self):
        """Test strict_length surfaces the truncation."""
        with pytest.raises(TruncatedBodyError):
            respipe.load(f"{self.base_url}/truncated", timeout=5, strict_length=True)

    def test_declared_charset_ignored(self):
        """Test the body is decoded as UTF-8 regardless of charset."""
        assert respipe.load(f"{self.base_url}/latin1", timeout=5).body == "caf�"

    def test_malformed_header(self):
        """Test a malformed header aborts the load."""
        with pytest.raises(MalformedHeaderLine):
            respipe.load(f"{self.base_url}/malformed", timeout=5)

    def test_request_headers(self):
        """Test the headers sent by the request builder."""
        response = respipe.load(
            f"{self.base_url}/echo-headers", timeout=5, accept_gzip=True
        )

        assert response.body.splitlines() == [
            f"Host=localhost:{self.port}",
            "Connection=close",
            "Accept-Encoding=gzip",
        ]


def test_connection_refused():
    """Test that an unreachable server raises ConnectionError."""
    server = HTTPServer(("localhost", 0), IntegrationHTTPRequestHandler)
    port = server.server_port
    server.server_close()

    with pytest.raises(ConnectionError):
        respipe.load(f"http://localhost:{port}/", timeout=5)
