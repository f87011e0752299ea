"""Readiness poller that maps descriptors to channels."""

import selectors

from .errors import ReactorError


class Poller:
    """Tracks registered channels and reports which are ready."""

    def __init__(self):
        self._selector = selectors.DefaultSelector()
        self._closed = False

    def update_channel(self, channel):
        """Register, modify or drop ``channel`` according to its interest mask."""
        if not channel.events:
            if channel.in_poller:
                if not self._closed:
                    try:
                        self._selector.unregister(channel.fd)
                    except (OSError, ValueError, KeyError) as exc:
                        raise ReactorError("epoll delete error") from exc
                channel.in_poller = False
            return
        if not channel.in_poller:
            try:
                self._selector.register(channel.fd, channel.events, channel)
            except (OSError, ValueError, KeyError) as exc:
                raise ReactorError("epoll add error") from exc
            channel.in_poller = True
        else:
            try:
                self._selector.modify(channel.fd, channel.events, channel)
            except (OSError, ValueError, KeyError) as exc:
                raise ReactorError("epoll modify error") from exc

    def poll(self, timeout=None):
        """Wait up to ``timeout`` seconds and return the ready channels.

        ``None`` or a negative timeout waits indefinitely.
        """
        if timeout is not None and timeout < 0:
            timeout = None
        try:
            ready = self._selector.select(timeout)
        except (OSError, ValueError) as exc:
            raise ReactorError("epoll wait error") from exc
        active = []
        for key, mask in ready:
            channel = key.data
            channel.revents = mask
            active.append(channel)
        return active

    def close(self):
        """Release the underlying selector."""
        if not self._closed:
            self._selector.close()
            self._closed = True