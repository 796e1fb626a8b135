"""
Tick client - the public entry points.
Bundles an hour cursor and an availability locator over one shared fetcher.
"""

from datetime import date

from config.settings import DATAFEED_ROOT, SEARCH_START_DATE
from core.cursor import HourCursor
from core.decompress import LzmaDecompressor
from core.fetch import HttpFileFetcher
from core.locator import AvailabilityLocator


class TickClient:
    def __init__(self, fetcher=None, decompressor=None, root=DATAFEED_ROOT, **cursor_options):
        self.fetcher = fetcher or HttpFileFetcher()
        self.cursor = HourCursor(
            self.fetcher, decompressor or LzmaDecompressor(), root, **cursor_options
        )
        self.locator = AvailabilityLocator(self.fetcher, root)

    def get_next_quote(self, hour, symbol):
        """Next tick of `hour` for `symbol`, as a QuoteResult."""
        return self.cursor.next_tick(hour, symbol)

    def find_first(self, symbol, today=None, start=SEARCH_START_DATE):
        """Earliest day with data for `symbol`, searching from `start` to `today`."""
        return self.locator.find_first_available(symbol, start, today or date.today())

    def reset_current_hour(self):
        self.cursor.reset_to_start()
