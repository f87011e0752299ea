"""Listening socket that hands accepted clients to a callback."""

from .address import InetAddress
from .channel import Channel
from .errors import fail_if
from .netsocket import Socket

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 1234


class Acceptor:
    """Listens on ``host:port`` and accepts clients when the loop reports them.

    Each accepted client is switched to non-blocking mode and passed, as a
    :class:`Socket`, to ``new_connection_callback``.
    """

    def __init__(self, loop, host=DEFAULT_HOST, port=DEFAULT_PORT):
        self.loop = loop
        self.new_connection_callback = None
        self.sock = Socket()
        try:
            self.address = self.sock.bind(InetAddress(host, port))
            self.sock.listen()
            self.sock.set_nonblocking()
        except Exception:
            self.sock.close()
            raise
        self.channel = Channel(loop, self.sock.fileno())
        self.channel.callback = self.accept_connection
        self.channel.enable_reading()

    def accept_connection(self):
        """Accept one pending client and pass it to the callback."""
        client, peer = self.sock.accept()
        print(
            f"new client fd {client.fileno()}! IP: {peer.host} Port: {peer.port}",
            flush=True,
        )
        client.set_nonblocking()
        if self.new_connection_callback is None:
            client.close()
        fail_if(self.new_connection_callback is None, "acceptor has no connection callback")
        self.new_connection_callback(client)

    def close(self):
        """Stop watching the listening socket and close it."""
        self.channel.close()
        self.sock.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()