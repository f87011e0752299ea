"""A watched descriptor bound to the callback that services it."""

import selectors

from .errors import fail_if

EVENT_READ = selectors.EVENT_READ


class Channel:
    """Ties a file descriptor to the event loop and to a callback.

    ``events`` is the interest mask, ``revents`` the mask reported by the
    last poll and ``in_poller`` whether the descriptor is registered.
    """

    def __init__(self, loop, fd):
        self.loop = loop
        self.fd = fd
        self.events = 0
        self.revents = 0
        self.in_poller = False
        self.callback = None

    def enable_reading(self):
        """Watch the descriptor for incoming data."""
        self.events = EVENT_READ
        self.loop.update_channel(self)

    def handle_event(self):
        """Run the callback for a ready descriptor."""
        fail_if(self.callback is None, "channel has no callback")
        self.callback()

    def close(self):
        """Stop watching the descriptor."""
        self.events = 0
        if self.in_poller:
            self.loop.update_channel(self)