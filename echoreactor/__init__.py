"""Single-threaded reactor-style TCP echo server and word client."""

__version__ = "0.1.0"