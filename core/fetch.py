"""
HTTP fetcher for Dukascopy bi5 files.
A single request per call: retrying is the caller's job (the hour cursor
retries the whole fetch + decompress step).
  - Browser-like headers (User-Agent, Referer) to avoid 503 blocks
  - 404 reported distinctly from transport failures
  - HEAD-only existence probes for the availability search
"""

import asyncio
from abc import ABC, abstractmethod

import aiohttp

from config.settings import HTTP_HEADERS, HTTP_TIMEOUT
from core.exceptions import FetchError
from utils.logger import get_logger

Logger = get_logger()


class FileFetcher(ABC):
    @abstractmethod
    def fetch(self, url: str) -> bytes:
        """Return the raw content of `url` or raise FetchError."""

    @abstractmethod
    def exists(self, url: str) -> bool:
        """Return True if `url` is reachable. May raise FetchError."""


async def download_file(session, url):
    """Download one file. Returns its raw bytes."""
    try:
        async with session.get(url) as resp:
            if resp.status == 200:
                return await resp.read()
            elif resp.status == 404:
                raise FetchError(url, "HTTP 404", not_found=True)
            else:
                raise FetchError(url, f"HTTP {resp.status}")
    except asyncio.TimeoutError as e:
        raise FetchError(url, "timeout") from e
    except (aiohttp.ClientError, OSError) as e:
        raise FetchError(url, str(e) or type(e).__name__) from e


async def probe_file(session, url):
    """Check whether `url` exists without downloading it."""
    try:
        async with session.head(url, allow_redirects=True) as resp:
            Logger.debug(f"HEAD {url} -> {resp.status}")
            return resp.status == 200
    except asyncio.TimeoutError as e:
        raise FetchError(url, "timeout") from e
    except (aiohttp.ClientError, OSError) as e:
        raise FetchError(url, str(e) or type(e).__name__) from e


class HttpFileFetcher(FileFetcher):
    """
    Blocking fetcher over aiohttp.
    Each call runs on its own event loop and session, so it must not be
    called from inside a running loop; use the *_async variants there.
    """

    def __init__(self, timeout=HTTP_TIMEOUT, headers=None):
        self.timeout = timeout
        self.headers = dict(HTTP_HEADERS if headers is None else headers)

    def _session(self):
        timeout = aiohttp.ClientTimeout(total=self.timeout, connect=10)
        return aiohttp.ClientSession(headers=self.headers, timeout=timeout)

    async def fetch_async(self, url):
        async with self._session() as session:
            return await download_file(session, url)

    async def exists_async(self, url):
        async with self._session() as session:
            return await probe_file(session, url)

    def fetch(self, url):
        return asyncio.run(self.fetch_async(url))

    def exists(self, url):
        return asyncio.run(self.exists_async(url))
