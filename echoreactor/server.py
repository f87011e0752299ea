"""Echo server built from an acceptor and per-client connections."""

import argparse
import sys

from .acceptor import DEFAULT_HOST, DEFAULT_PORT, Acceptor
from .connection import Connection
from .errors import ReactorError
from .eventloop import EventLoop


class Server:
    """Accepts clients on ``host:port`` and keeps one Connection per client."""

    def __init__(self, loop, host=DEFAULT_HOST, port=DEFAULT_PORT):
        self.loop = loop
        self.connections = {}
        self.acceptor = Acceptor(loop, host, port)
        self.acceptor.new_connection_callback = self.new_connection

    @property
    def address(self):
        """The address the server listens on."""
        return self.acceptor.address

    def new_connection(self, sock):
        """Start serving an accepted client socket."""
        conn = Connection(self.loop, sock)
        conn.delete_connection_callback = self.delete_connection
        self.connections[sock.fileno()] = conn

    def delete_connection(self, sock):
        """Forget and close the connection that owns ``sock``."""
        conn = self.connections.pop(sock.fileno())
        conn.close()

    def close(self):
        """Close every connection and the listening socket."""
        for conn in self.connections.values():
            conn.close()
        self.connections.clear()
        self.acceptor.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


def main(argv=None):
    """Run the echo server until interrupted."""
    parser = argparse.ArgumentParser(description="Run the echo server.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    with EventLoop() as loop:
        try:
            server = Server(loop, args.host, args.port)
        except ReactorError as exc:
            print(f"{exc}: {exc.__cause__}", file=sys.stderr)
            return 1
        with server:
            try:
                loop.loop()
            except KeyboardInterrupt:
                pass
            except ReactorError as exc:
                print(f"{exc}: {exc.__cause__}", file=sys.stderr)
                return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())