"""IPv4 socket address value."""

import ipaddress
from dataclasses import dataclass


@dataclass(frozen=True)
class InetAddress:
    """An IPv4 host and TCP port pair."""

    host: str = "0.0.0.0"
    port: int = 0

    def __post_init__(self):
        try:
            ipaddress.IPv4Address(self.host)
        except ValueError as exc:
            raise ValueError(f"invalid IPv4 address: {self.host!r}") from exc
        if not 0 <= self.port <= 0xFFFF:
            raise ValueError(f"port out of range: {self.port}")

    def as_tuple(self):
        """Return the address in the form the socket module expects."""
        return (self.host, self.port)

    @classmethod
    def from_tuple(cls, addr):
        """Build an address from a ``(host, port)`` tuple such as getsockname returns."""
        host, port = addr[0], addr[1]
        return cls(host, port)

    def __str__(self):
        return f"{self.host}:{self.port}"