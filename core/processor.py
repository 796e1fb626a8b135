"""
Dukascopy tick record decoder.
Turns decompressed hour buffers into TickRecord objects.

Each tick is 20 bytes, big-endian:
  - i: time (ms offset from start of the hour)
  - I: ask price (raw integer, point value not applied)
  - I: bid price (raw integer)
  - I: ask volume, IEEE-754 float32 bit pattern
  - I: bid volume, IEEE-754 float32 bit pattern
"""

import struct
from dataclasses import dataclass
from datetime import datetime, timedelta

from config.settings import TICK_SIZE
from core.exceptions import OutOfRangeError
from utils.logger import get_logger

Logger = get_logger()

TICK_STRUCT = struct.Struct('!iIIII')
UINT32 = struct.Struct('!I')
FLOAT32 = struct.Struct('!f')


@dataclass
class TickRecord:
    timestamp: datetime
    ask: int
    bid: int
    ask_volume: float
    bid_volume: float
    is_first_of_hour: bool = False
    is_last_of_hour: bool = False


def bits_to_float(bits):
    """Reinterpret an unsigned 32-bit pattern as an IEEE-754 float."""
    return FLOAT32.unpack(UINT32.pack(bits))[0]


def complete_length(buffer):
    """Length of the longest prefix of `buffer` holding whole ticks."""
    return len(buffer) - len(buffer) % TICK_SIZE


def decode_tick(buffer, offset, hour):
    """
    Decode the tick at `offset`.
    Returns (TickRecord, next_offset). The caller must guarantee a full
    record is available; reading past the end raises OutOfRangeError.
    """
    if offset < 0 or offset + TICK_SIZE > len(buffer):
        raise OutOfRangeError(
            f"tick at offset {offset} exceeds buffer of {len(buffer)} bytes"
        )

    time_ms, ask, bid, ask_bits, bid_bits = TICK_STRUCT.unpack_from(buffer, offset)
    if time_ms < 0:
        Logger.warning(f"tick at offset {offset} has negative time offset {time_ms} ms")
    tick = TickRecord(
        timestamp=hour + timedelta(milliseconds=time_ms),
        ask=ask,
        bid=bid,
        ask_volume=bits_to_float(ask_bits),
        bid_volume=bits_to_float(bid_bits),
    )
    return tick, offset + TICK_SIZE

