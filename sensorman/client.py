"""TCP client that logs in to the message server and exchanges text lines."""

from __future__ import annotations

import socket
from typing import Optional

BLOCK_SIZE = 1024
DEFAULT_HOST = "192.168.0.5"
DEFAULT_PORT = 5000
DEFAULT_LOG_ID = "19"
LOG_PASSWORD = "password"


class SocketClientError(Exception):
    """Raised when the connection cannot be made or used."""


class SocketClient:
    """A connection to the message server."""

    def __init__(
        self,
        host: str = DEFAULT_HOST,
        port: int = DEFAULT_PORT,
        log_id: str = DEFAULT_LOG_ID,
        log_pw: str = LOG_PASSWORD,
    ) -> None:
        self.host = host
        self.port = port
        self.log_id = log_id
        self.log_pw = log_pw
        self._sock: Optional[socket.socket] = None

    @property
    def connected(self) -> bool:
        """Whether a connection is open."""
        return self._sock is not None

    def login_message(self) -> bytes:
        """The bytes sent right after connecting."""
        return f"[{self.log_id}:{self.log_pw}]".encode()

    def connect(self, host: Optional[str] = None) -> None:
        """Connect to ``host`` (or the default host) and log in."""
        self.close()
        target = host or self.host
        try:
            self._sock = socket.create_connection((target, self.port))
        except OSError as exc:
            raise SocketClientError(f"error : {exc}") from exc
        self._write(self.login_message())

    def close(self) -> None:
        """Close the connection if one is open."""
        if self._sock is not None:
            self._sock.close()
            self._sock = None

    def _require(self) -> socket.socket:
        if self._sock is None:
            raise SocketClientError("error : not connected")
        return self._sock

    def _write(self, data: bytes) -> None:
        sock = self._require()
        try:
            sock.sendall(data)
        except OSError as exc:
            self.close()
            raise SocketClientError(f"error : {exc}") from exc

    def send(self, data: str) -> None:
        """Send one line of text; the newline is added here."""
        self._write((data + "\n").encode())

    def receive(self) -> Optional[str]:
        """Read at most one block of text; None once the server has closed."""
        sock = self._require()
        try:
            data = sock.recv(BLOCK_SIZE)
        except OSError as exc:
            self.close()
            raise SocketClientError(f"error : {exc}") from exc
        if not data:
            self.close()
            return None
        return data.decode(errors="replace")

    def __enter__(self) -> "SocketClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()