"""TCP socket wrapper that reports failures as ReactorError."""

import socket

from .address import InetAddress
from .errors import ReactorError, fail_if


class Socket:
    """An IPv4 stream socket.

    ``sock`` is the underlying :class:`socket.socket`; a new one is created
    when none is given.
    """

    def __init__(self, sock=None):
        if sock is None:
            try:
                sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
            except OSError as exc:
                raise ReactorError("socket create error") from exc
        fail_if(sock.fileno() == -1, "socket create error")
        self.sock = sock

    def bind(self, addr):
        """Bind to ``addr`` and return the address actually bound."""
        try:
            self.sock.bind(addr.as_tuple())
        except OSError as exc:
            raise ReactorError("socket bind error") from exc
        return InetAddress.from_tuple(self.sock.getsockname())

    def listen(self):
        """Start listening with the system's maximum backlog."""
        try:
            self.sock.listen(socket.SOMAXCONN)
        except OSError as exc:
            raise ReactorError("socket listen error") from exc

    def set_nonblocking(self):
        """Switch the socket to non-blocking mode."""
        self.sock.setblocking(False)

    def accept(self):
        """Accept a pending connection; return ``(Socket, InetAddress)``."""
        try:
            conn, peer = self.sock.accept()
        except OSError as exc:
            raise ReactorError("socket accept error") from exc
        return Socket(conn), InetAddress.from_tuple(peer)

    def fileno(self):
        """Return the descriptor, or -1 once closed."""
        return self.sock.fileno()

    def close(self):
        """Close the socket; closing twice is harmless."""
        self.sock.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()