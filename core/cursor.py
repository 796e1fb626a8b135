"""
Hour cursor - sequential tick reader over the datafeed.
Holds one decompressed hour at a time and hands out its ticks one by one,
fetching the next hour file on demand with bounded retries.
"""

import random
import time
from dataclasses import dataclass
from typing import Optional

from config.settings import (
    DATAFEED_ROOT, QUOTE_ATTEMPTS, RETRY_BASE_DELAY, RETRY_MAX_DELAY, TICK_SIZE,
)
from core.decompress import LzmaDecompressor
from core.exceptions import DecompressionError, FetchError
from core.fetch import HttpFileFetcher
from core.paths import floor_hour, hour_url
from core.processor import TickRecord, complete_length, decode_tick
from utils.logger import get_logger

Logger = get_logger()


class QuoteStatus:
    OK     = 'ok'      # a tick was read
    EMPTY  = 'empty'   # hour file has no ticks, move on to the next hour
    FAILED = 'failed'  # hour file could not be fetched or decoded


@dataclass
class QuoteResult:
    status: str
    tick: Optional[TickRecord] = None
    error: str = ""
    url: str = ""

    @property
    def ok(self):
        return self.status == QuoteStatus.OK


class HourCursor:
    """
    Not thread-safe: one cursor per logical stream.
    """

    def __init__(self, fetcher=None, decompressor=None, root=DATAFEED_ROOT,
                 attempts=QUOTE_ATTEMPTS, retry_delay=RETRY_BASE_DELAY):
        self.fetcher = fetcher or HttpFileFetcher()
        self.decompressor = decompressor or LzmaDecompressor()
        self.root = root
        self.attempts = attempts
        self.retry_delay = retry_delay

        self.current_hour = None
        self.buffer = b""
        self.position = 0

    def _load(self, url):
        """Fetch + decompress with retries. Returns (buffer, error message)."""
        last_error = None
        for attempt in range(self.attempts):
            try:
                raw = self.fetcher.fetch(url)
                return self.decompressor.decompress(raw), ""
            except (FetchError, DecompressionError) as e:
                last_error = e
                Logger.debug(f"Attempt {attempt + 1}/{self.attempts} for {url} failed: {e}")
                if attempt + 1 < self.attempts and self.retry_delay > 0:
                    delay = min(
                        self.retry_delay * (2 ** attempt) + random.uniform(0, self.retry_delay),
                        RETRY_MAX_DELAY
                    )
                    time.sleep(delay)

        reason = getattr(last_error, 'reason', None) or str(last_error)
        Logger.warning(f"Skipped {url} after {self.attempts} attempts ({reason})")
        return b"", f"{url} not found ({reason})"

    def next_tick(self, target_hour, symbol):
        """
        Read the next tick of `target_hour`.
        A new hour file is loaded when the buffer is exhausted or a different
        hour is requested.
        """
        target_hour = floor_hour(target_hour)

        if self.position >= len(self.buffer) or target_hour != self.current_hour:
            self.position = 0
            self.current_hour = None
            url = hour_url(symbol, target_hour, self.root)

            self.buffer, error = self._load(url)
            if error:
                return QuoteResult(QuoteStatus.FAILED, error=error, url=url)

            usable = complete_length(self.buffer)
            if usable != len(self.buffer):
                Logger.warning(
                    f"{url}: {len(self.buffer)} bytes is not a multiple of {TICK_SIZE}, "
                    f"dropping trailing {len(self.buffer) - usable} bytes"
                )
                self.buffer = self.buffer[:usable]

            self.current_hour = target_hour
            if not self.buffer:
                return QuoteResult(QuoteStatus.EMPTY, url=url)

        tick, self.position = decode_tick(self.buffer, self.position, self.current_hour)
        tick.is_first_of_hour = self.position == TICK_SIZE
        tick.is_last_of_hour = self.position >= len(self.buffer)
        return QuoteResult(QuoteStatus.OK, tick=tick)

    def reset_to_start(self):
        """Drop the loaded hour so the next call fetches it again."""
        self.position = 0
        self.buffer = b""
        self.current_hour = None

    def iter_hour(self, hour, symbol):
        """
        Yield every tick of one hour in order.
        Raises FetchError if the hour file cannot be loaded.
        """
        self.reset_to_start()
        while True:
            result = self.next_tick(hour, symbol)
            if result.status == QuoteStatus.FAILED:
                raise FetchError(result.url, result.error)
            if result.status == QuoteStatus.EMPTY:
                return
            yield result.tick
            if result.tick.is_last_of_hour:
                return
