"""One client connection that echoes whatever it receives."""

from .channel import Channel
from .errors import MAX_BUFFER, ReactorError

READ_BUFFER = MAX_BUFFER


def _as_text(data):
    return data.split(b"\0", 1)[0].decode("utf-8", errors="replace")


class Connection:
    """Echoes client data back in fixed ``READ_BUFFER``-byte frames.

    When the client disconnects, ``delete_connection_callback`` is called
    with the connection's socket.
    """

    def __init__(self, loop, sock):
        self.loop = loop
        self.sock = sock
        self.delete_connection_callback = None
        self.channel = Channel(loop, sock.fileno())
        self.channel.callback = self.echo
        self.channel.enable_reading()

    def echo(self):
        """Read everything available and echo each chunk back."""
        fd = self.sock.fileno()
        while True:
            try:
                data = self.sock.sock.recv(READ_BUFFER)
            except InterruptedError:
                print("continue reading", flush=True)
                continue
            except BlockingIOError as exc:
                print(f"finish reading once, errno: {exc.errno}", flush=True)
                break
            except OSError as exc:
                raise ReactorError("socket read error") from exc
            if not data:
                print(f"EOF, client fd {fd} disconnected", flush=True)
                if self.delete_connection_callback is None:
                    self.close()
                else:
                    self.delete_connection_callback(self.sock)
                break
            print(f"message from client fd {fd}: {_as_text(data)}", flush=True)
            try:
                self.sock.sock.sendall(data.ljust(READ_BUFFER, b"\0"))
            except OSError:
                pass

    def close(self):
        """Stop watching the client and close its socket."""
        self.channel.close()
        self.sock.close()