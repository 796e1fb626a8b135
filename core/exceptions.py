class TickFeedError(Exception):
    """Base class for tick feed errors."""
    pass


class FetchError(TickFeedError):
    """Raised when a datafeed file could not be retrieved."""

    def __init__(self, url, reason, not_found=False):
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason
        self.not_found = not_found


class DecompressionError(TickFeedError):
    """Raised when a bi5 payload is not valid LZMA data."""
    pass


class OutOfRangeError(TickFeedError, IndexError):
    """Raised when a tick is decoded past the end of its buffer."""
    pass
