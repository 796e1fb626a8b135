"""
Datafeed path construction.
GBPUSD/2007/00/30/16h_ticks.bi5 is 30 January 2007, 16:00 - months start at 00.
"""

from datetime import datetime

from config.settings import DATAFEED_ROOT, URL_TEMPLATE


def floor_hour(value):
    """Truncate a date or datetime to the start of its hour."""
    if not isinstance(value, datetime):
        return datetime(value.year, value.month, value.day)
    return value.replace(minute=0, second=0, microsecond=0)


def hour_url(symbol, hour, root=DATAFEED_ROOT):
    """Build the URL of the tick file covering `hour` for `symbol`."""
    hour = floor_hour(hour)
    return URL_TEMPLATE.format(
        root=root.rstrip('/'),
        currency=symbol,
        year=hour.year,
        month=hour.month - 1,  # 0-indexed months
        day=hour.day,
        hour=hour.hour,
    )


def day_url(symbol, day, root=DATAFEED_ROOT):
    """URL of the first hour file (00h) of `day`."""
    if isinstance(day, datetime):
        day = day.date()
    return hour_url(symbol, datetime(day.year, day.month, day.day), root)
