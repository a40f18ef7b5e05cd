"""src/respipe/transport/connection.py

TCP and TLS connection management module.

This module provides low-level connection handling with support for
TLS encryption and proper error handling for network operations.
"""

import logging
import socket
import ssl
from typing import IO, Any, Optional, Union

# pylint: disable=redefined-builtin
from respipe.exceptions import ConnectionError, ConnectTimeout, TlsError
from respipe.transport.tls import create_ssl_context
from respipe.utils.timing import Timeout

logger = logging.getLogger(__name__)


class Connection:
    """
    Manages TCP and TLS connection creation and lifecycle.

    Attributes:
        host: The target hostname or IP address.
        port: The target port number.
        use_ssl: Whether to use TLS encryption.
        timeout: Connection timeout configuration.
        cafile: Optional CA bundle trusted on top of the system store.
        sock: The underlying socket object.
    """

    __slots__ = ("host", "port", "use_ssl", "timeout", "cafile", "sock")

    def __init__(
        self,
        host: str,
        port: int,
        use_ssl: bool = False,
        timeout: Union[float, Timeout, None] = None,
        cafile: Optional[str] = None,
    ) -> None:
        """
        Initialize connection parameters.
        """
        self.host = host
        self.port = port
        self.use_ssl = use_ssl
        self.cafile = cafile

        if timeout is None:
            self.timeout = None

        elif isinstance(timeout, Timeout):
            self.timeout = timeout

        else:
            self.timeout = Timeout.from_float(timeout)

        self.sock: Optional[socket.socket] = None

    def open(self) -> socket.socket:
        """
        Open TCP connection with optional TLS encryption.
        """
        connect_to = self.timeout.connect_timeout if self.timeout else None

        try:
            raw_sock = socket.create_connection(
                (self.host, self.port), timeout=connect_to
            )
            if self.use_ssl:
                context = create_ssl_context(self.cafile)
                try:
                    self.sock = context.wrap_socket(raw_sock, server_hostname=self.host)

                except socket.timeout as e:
                    raw_sock.close()
                    raise ConnectTimeout(f"Timeout during TLS handshake: {e}") from e

                except OSError:
                    raw_sock.close()
                    raise

            else:
                self.sock = raw_sock

            # After connection is established, switch timeout to 'read_timeout'
            self.sock.settimeout(self.timeout.read_timeout if self.timeout else None)

            logger.debug(
                "Connected to %s:%s (tls=%s)", self.host, self.port, self.use_ssl
            )
            return self.sock

        except socket.timeout as e:
            raise ConnectTimeout(
                f"Timeout connecting to {self.host}:{self.port}"
            ) from e

        except ssl.SSLError as e:
            raise TlsError(f"TLS Verification Error: {e}") from e

        except OSError as e:
            raise ConnectionError(
                f"Connection error to {self.host}:{self.port} - {e}"
            ) from e

    def send(self, data: bytes) -> None:
        """Write all of ``data`` to the open socket."""
        if not self.sock:
            raise ConnectionError("Connection is not open")

        try:
            self.sock.sendall(data)
        except OSError as e:
            raise ConnectionError(
                f"Failed to send to {self.host}:{self.port} - {e}"
            ) from e

    def makefile(self) -> IO[bytes]:
        """Binary stream over the socket for line and body reads."""
        if not self.sock:
            raise ConnectionError("Connection is not open")
        return self.sock.makefile("rb")

    def close(self) -> None:
        """
        Close the connection if it is open.
        """
        if self.sock:
            try:
                self.sock.close()
            except OSError:
                logger.debug("Error closing socket to %s:%s", self.host, self.port)
            self.sock = None

    def __enter__(self) -> "Connection":
        self.open()
        return self

    def __exit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[BaseException],
        exc_tb: Optional[Any],
    ) -> None:
        self.close()
