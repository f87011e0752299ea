"""Event loop that dispatches ready channels to their callbacks."""

from .poller import Poller


class EventLoop:
    """Polls for ready channels and runs their callbacks until stopped."""

    def __init__(self):
        self.poller = Poller()
        self.quit = False

    def loop(self):
        """Dispatch events until :meth:`stop` is called."""
        while not self.quit:
            self.run_once()

    def run_once(self, timeout=None):
        """Poll once and handle every ready channel; return how many ran."""
        channels = self.poller.poll(timeout)
        for channel in channels:
            channel.handle_event()
        return len(channels)

    def update_channel(self, channel):
        """Pass a channel's interest change to the poller."""
        self.poller.update_channel(channel)

    def stop(self):
        """Make :meth:`loop` return after the current round."""
        self.quit = True

    def close(self):
        """Release the poller."""
        self.poller.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()