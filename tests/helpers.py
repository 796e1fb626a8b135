import lzma
import struct
from datetime import date

from core.fetch import FileFetcher
from core.exceptions import FetchError

ROOT = "http://test.local/datafeed"


def pack_tick(time_ms, ask, bid, ask_vol, bid_vol):
    return struct.pack('!iIIff', time_ms, ask, bid, ask_vol, bid_vol)


def bi5(payload):
    """Compress a tick payload the way the datafeed ships it."""
    return lzma.compress(payload, format=lzma.FORMAT_ALONE)


def url_date(url):
    """Day encoded in a datafeed URL (months are 0-indexed)."""
    year, month, day = url.split('/')[-4:-1]
    return date(int(year), int(month) + 1, int(day))


class FakeFetcher(FileFetcher):
    """In-memory fetcher: maps URL -> bytes, anything else is a 404."""

    def __init__(self, files=None, exists=None):
        self.files = dict(files or {})
        self.predicate = exists
        self.fetched = []
        self.probed = []

    def fetch(self, url):
        self.fetched.append(url)
        if url not in self.files:
            raise FetchError(url, "HTTP 404", not_found=True)
        data = self.files[url]
        if isinstance(data, Exception):
            raise data
        return data

    def exists(self, url):
        self.probed.append(url)
        if self.predicate is not None:
            return self.predicate(url)
        return url in self.files
