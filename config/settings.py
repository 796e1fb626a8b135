"""
Dukascopy Tick Feed - Configuration Settings
Datafeed location, HTTP behaviour, retry policy and availability search bounds.
Reads overrides from environment variables.
"""

import os
from datetime import date

# =============================================================================
# URL Templates
# =============================================================================
DATAFEED_ROOT = os.getenv("DATAFEED_ROOT", "https://www.dukascopy.com/datafeed")

# month is zero-based on the datafeed (January = 00)
URL_TEMPLATE = (
    "{root}/{currency}/{year}/{month:02d}/{day:02d}/{hour:02d}h_ticks.bi5"
)

# =============================================================================
# HTTP Headers
# =============================================================================
HTTP_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept": "*/*",
    "Accept-Language": "en-US,en;q=0.9",
    "Connection": "keep-alive",
    "Referer": "https://www.dukascopy.com/swiss/english/marketwatch/historical/",
}

# =============================================================================
# Fetch Settings (Env Vars override)
# =============================================================================
HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", 60))
RETRY_BASE_DELAY = float(os.getenv("RETRY_BASE_DELAY", 0.5))
RETRY_MAX_DELAY = float(os.getenv("RETRY_MAX_DELAY", 8.0))

# Attempts per hour file before the cursor gives up on it
QUOTE_ATTEMPTS = 5

# =============================================================================
# Availability Search
# =============================================================================
SEARCH_START_DATE = date.fromisoformat(os.getenv("SEARCH_START_DATE", "2000-01-01"))

# =============================================================================
# Binary Layout
# =============================================================================
TICK_SIZE = 20            # bytes per decoded tick record
LZMA_PROPS_SIZE = 5       # bi5 header: decoder properties
LZMA_SIZE_FIELD = 8       # bi5 header: little-endian uncompressed size
UNKNOWN_SIZE = 0xFFFFFFFFFFFFFFFF

# =============================================================================
# Logging
# =============================================================================
# Empty string disables the rotating file handler
LOG_FILE = os.getenv("TICKFEED_LOG_FILE", "tickfeed.log")
