"""Error type and guard helper shared by the reactor modules."""

MAX_LISTEN = 5
MAX_BUFFER = 1024


class ReactorError(RuntimeError):
    """Raised when a socket or polling operation fails."""


def fail_if(condition, message):
    """Raise :class:`ReactorError` carrying ``message`` when ``condition`` holds."""
    if condition:
        raise ReactorError(message)