from .client import TickClient
from .cursor import HourCursor, QuoteResult, QuoteStatus
from .locator import AvailabilityLocator
from .processor import TickRecord, decode_tick

__all__ = [
    'TickClient', 'HourCursor', 'QuoteResult', 'QuoteStatus',
    'AvailabilityLocator', 'TickRecord', 'decode_tick',
]
