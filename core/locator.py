"""
Availability locator.
Finds the first day a symbol has tick data by binary search over existence
probes. The datafeed is append-only: once an hour file exists for a day, files
exist for every later day, which keeps the predicate monotonic.
"""

from datetime import datetime, timedelta

from config.settings import DATAFEED_ROOT, SEARCH_START_DATE
from core.exceptions import FetchError
from core.fetch import HttpFileFetcher
from core.paths import day_url
from utils.logger import get_logger

Logger = get_logger()


def _as_date(value):
    return value.date() if isinstance(value, datetime) else value


class AvailabilityLocator:
    def __init__(self, fetcher=None, root=DATAFEED_ROOT):
        self.fetcher = fetcher or HttpFileFetcher()
        self.root = root

    def exists_at(self, symbol, day):
        """True if the 00h file of `day` is reachable. Transport errors count as missing."""
        url = day_url(symbol, day, self.root)
        try:
            return self.fetcher.exists(url)
        except FetchError as e:
            Logger.debug(f"Probe {url} failed, treating as missing: {e}")
            return False

    def find_first_available(self, symbol, lower=None, upper=None):
        """
        Binary search for the earliest day with data.

        Args:
            symbol: e.g. 'EURUSD'
            lower: day assumed to have no data (default SEARCH_START_DATE)
            upper: day assumed to have data, usually today

        Returns:
            date: earliest day known to have data, at day granularity.
        """
        lower = _as_date(lower or SEARCH_START_DATE)
        if upper is None:
            raise ValueError("upper bound is required")
        upper = _as_date(upper)
        if lower > upper:
            raise ValueError(f"lower bound {lower} is after upper bound {upper}")

        probes = 0
        while upper - lower > timedelta(days=1):
            mid = lower + timedelta(days=(upper - lower).days // 2)
            probes += 1
            if self.exists_at(symbol, mid):
                upper = mid
            else:
                lower = mid
            Logger.debug(f"{symbol}: probe {probes} at {mid}, range now {lower}..{upper}")

        Logger.info(f"{symbol}: first available day {upper} ({probes} probes)")
        return upper
