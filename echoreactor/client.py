"""Interactive client for the echo server."""

import argparse
import socket
import sys

from .acceptor import DEFAULT_HOST, DEFAULT_PORT
from .errors import MAX_BUFFER, ReactorError

BUFFER_SIZE = MAX_BUFFER


def _recv_frame(sock):
    data = b""
    while len(data) < BUFFER_SIZE:
        part = sock.recv(BUFFER_SIZE - len(data))
        if not part:
            break
        data += part
    return data


def _words(stream):
    for line in stream:
        yield from line.split()


def run_client(host=DEFAULT_HOST, port=DEFAULT_PORT, words=(), out=None):
    """Send each word to the server and print its reply.

    Every word travels as one ``BUFFER_SIZE``-byte frame. Returns the
    replies received, in order.
    """
    out = sys.stdout if out is None else out
    try:
        sock = socket.create_connection((host, port))
    except OSError as exc:
        raise ReactorError("socket connect error") from exc
    replies = []
    with sock:
        for word in words:
            payload = word.encode("utf-8")
            if len(payload) >= BUFFER_SIZE:
                raise ValueError(f"word longer than {BUFFER_SIZE - 1} bytes")
            try:
                sock.sendall(payload.ljust(BUFFER_SIZE, b"\0"))
            except OSError:
                print("socket already disconnected, can't write any more!", file=out)
                break
            try:
                data = _recv_frame(sock)
            except OSError as exc:
                raise ReactorError("socket read error") from exc
            if not data:
                print("server socket disconnected!", file=out)
                break
            text = data.split(b"\0", 1)[0].decode("utf-8", errors="replace")
            print(f"message from server: {text}", file=out)
            replies.append(text)
    return replies


def main(argv=None):
    """Read words from standard input and exchange them with the server."""
    parser = argparse.ArgumentParser(description="Talk to the echo server.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    try:
        run_client(args.host, args.port, _words(sys.stdin), sys.stdout)
    except ReactorError as exc:
        print(f"{exc}: {exc.__cause__}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())