import socket

import pytest

from echoreactor.acceptor import Acceptor
from echoreactor.errors import ReactorError
from echoreactor.eventloop import EventLoop
from echoreactor.netsocket import Socket


@pytest.fixture
def loop():
    with EventLoop() as ev:
        yield ev


def test_bind_to_ephemeral_port_reports_real_address(loop):
    acceptor = Acceptor(loop, "127.0.0.1", 0)
    try:
        assert acceptor.address.host == "127.0.0.1"
        assert acceptor.address.port > 0
        assert acceptor.sock.sock.getsockname()[1] == acceptor.address.port
    finally:
        acceptor.close()


def test_accept_hands_nonblocking_socket_to_callback(loop, capsys):
    acceptor = Acceptor(loop, "127.0.0.1", 0)
    accepted = []
    acceptor.new_connection_callback = accepted.append
    client = socket.create_connection(acceptor.address.as_tuple(), timeout=5)
    try:
        handled = loop.run_once(2.0)
        assert handled == 1
        assert len(accepted) == 1
        sock = accepted[0]
        assert isinstance(sock, Socket)
        assert sock.sock.getpeername() == client.getsockname()
        assert sock.sock.getblocking() is False
        out = capsys.readouterr().out
        assert f"new client fd {sock.fileno()}! IP: 127.0.0.1" in out
        assert f"Port: {client.getsockname()[1]}" in out
    finally:
        for sock in accepted:
            sock.close()
        client.close()
        acceptor.close()


def test_binding_busy_port_raises(loop):
    first = Acceptor(loop, "127.0.0.1", 0)
    try:
        with pytest.raises(ReactorError, match="socket bind error"):
            Acceptor(loop, "127.0.0.1", first.address.port)
    finally:
        first.close()


def test_close_unregisters_and_closes(loop):
    acceptor = Acceptor(loop, "127.0.0.1", 0)
    assert acceptor.channel.in_poller is True
    acceptor.close()
    assert acceptor.channel.in_poller is False
    assert acceptor.sock.fileno() == -1