# echoreactor

echoreactor is a small TCP echo server that runs on one thread, built in the
reactor style. An event loop watches the listening socket and every client
socket for readiness, and hands each ready socket to its callback. A matching
command-line client sends words to the server and prints each reply.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running the server

```
echoreactor-server [--host HOST] [--port PORT]
```

By default the server listens on `127.0.0.1`, port `1234`. While it runs:

- It prints the descriptor, IP address and port of each new client.
- It prints each message it reads from a client.
- It writes each message back to that client as a block of 1024 bytes, with
  zero bytes as padding.
- When a client disconnects, it prints a notice, closes the client's socket
  and forgets the client.

Press Ctrl+C to stop the server. If the server cannot bind or listen, it
prints the error to standard error and exits with status 1.

## Running the client

```
echoreactor-client [--host HOST] [--port PORT]
```

The client connects to the server at the given address, which defaults to
`127.0.0.1:1234`. It reads whitespace-separated words from standard input.
For each word it:

1. sends the word to the server, padded with zero bytes to a 1024-byte block;
2. reads a 1024-byte reply;
3. prints `message from server: <reply>`.

The client stops in any of these cases:

- standard input runs out;
- the server disconnects;
- the socket can no longer be written.

A word must encode to fewer than 1024 bytes in UTF-8. A longer word raises
`ValueError`. If the connection cannot be made, the client prints the error
and exits with status 1.

## Using it from Python

```python
from echoreactor.eventloop import EventLoop
from echoreactor.server import Server

with EventLoop() as loop, Server(loop, "127.0.0.1", 0) as server:
    print("listening on", server.address)
    loop.loop()
```

If you pass port `0`, the system picks a free port. `Server.address` returns
the address that was actually bound.

The client side can be driven directly. Any iterable of words and any text
stream will do:

```python
import io
from echoreactor.client import run_client

out = io.StringIO()
replies = run_client("127.0.0.1", 1234, ["hello", "world"], out)
```

`run_client` returns the replies in the order they arrived.

The main building blocks:

| Name | Module | Role |
| --- | --- | --- |
| `EventLoop` | `echoreactor.eventloop` | `loop()` dispatches events until `stop()` is called. `run_once(timeout)` handles a single round and returns how many channels ran. |
| `Poller` | `echoreactor.poller` | Registers, modifies or drops channels and reports the ones that are ready. |
| `Channel` | `echoreactor.channel` | Ties a file descriptor to the callback that runs when it is readable. |
| `Socket` | `echoreactor.netsocket` | Wraps a TCP socket. `bind` returns the bound `InetAddress`. `accept` returns the client `Socket` and its address. |
| `InetAddress` | `echoreactor.address` | An IPv4 host and port. The host and port are checked when the address is created. |
| `Acceptor` | `echoreactor.acceptor` | Accepts new clients and passes them to `new_connection_callback`. |
| `Connection` | `echoreactor.connection` | Echoes data back to one client and calls `delete_connection_callback` when the client disconnects. |
| `Server` | `echoreactor.server` | Links the acceptor to one `Connection` for each client. |
| `run_client` | `echoreactor.client` | Drives the client side. |

A failed socket or polling operation raises `ReactorError`, which is defined
in `echoreactor.errors`. The underlying `OSError`, when there is one, is
attached as its cause.

## What it does not do

The server only echoes. It has no authentication and no TLS. It does not
frame messages beyond the fixed 1024-byte blocks. All clients are served from
a single thread.