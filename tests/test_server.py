import socket
import threading

import pytest

from echoreactor.errors import MAX_BUFFER
from echoreactor.eventloop import EventLoop
from echoreactor.server import Server, main


def _recv_exact(sock, size):
    chunks = b""
    while len(chunks) < size:
        part = sock.recv(size - len(chunks))
        if not part:
            break
        chunks += part
    return chunks


@pytest.fixture
def loop():
    with EventLoop() as ev:
        yield ev


@pytest.fixture
def running_server():
    ev = EventLoop()
    server = Server(ev, "127.0.0.1", 0)
    done = threading.Event()

    def run():
        while not done.is_set():
            ev.run_once(0.05)

    thread = threading.Thread(target=run, daemon=True)
    thread.start()
    yield server
    done.set()
    thread.join(5)
    server.close()
    ev.close()


def test_echo_round_trip(running_server):
    with socket.create_connection(running_server.address.as_tuple(), timeout=5) as client:
        client.sendall(b"ping".ljust(MAX_BUFFER, b"\0"))
        frame = _recv_exact(client, MAX_BUFFER)
    assert frame == b"ping".ljust(MAX_BUFFER, b"\0")


def test_connections_are_tracked_and_dropped(loop):
    with Server(loop, "127.0.0.1", 0) as server:
        client = socket.create_connection(server.address.as_tuple(), timeout=5)
        loop.run_once(2.0)
        assert len(server.connections) == 1
        conn = next(iter(server.connections.values()))
        client.close()
        loop.run_once(2.0)
        assert server.connections == {}
        assert conn.sock.fileno() == -1


def test_delete_connection_closes_socket(loop):
    with Server(loop, "127.0.0.1", 0) as server:
        client = socket.create_connection(server.address.as_tuple(), timeout=5)
        try:
            loop.run_once(2.0)
            (fd, conn), = server.connections.items()
            assert conn.sock.fileno() == fd
            server.delete_connection(conn.sock)
            assert fd not in server.connections
            assert conn.sock.fileno() == -1
            assert client.recv(16) == b""
        finally:
            client.close()


def test_close_shuts_everything(loop):
    server = Server(loop, "127.0.0.1", 0)
    client = socket.create_connection(server.address.as_tuple(), timeout=5)
    try:
        loop.run_once(2.0)
        conns = list(server.connections.values())
        server.close()
        assert server.connections == {}
        assert all(conn.sock.fileno() == -1 for conn in conns)
        assert server.acceptor.sock.fileno() == -1
    finally:
        client.close()


def test_main_reports_bind_failure(capsys):
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as busy:
        busy.bind(("127.0.0.1", 0))
        busy.listen()
        port = busy.getsockname()[1]
        assert main(["--host", "127.0.0.1", "--port", str(port)]) == 1
    assert "socket bind error" in capsys.readouterr().err