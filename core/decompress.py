"""
bi5 decompression.
A bi5 file is an LZMA "alone" container: 5 bytes of decoder properties,
8 bytes little-endian uncompressed size, then the compressed payload.
"""

from abc import ABC, abstractmethod
from lzma import LZMADecompressor, LZMAError, FORMAT_AUTO

from config.settings import LZMA_PROPS_SIZE, LZMA_SIZE_FIELD, UNKNOWN_SIZE
from core.exceptions import DecompressionError

XZ_MAGIC = b"\xfd7zXZ\x00"


class StreamDecompressor(ABC):
    @abstractmethod
    def decompress(self, data: bytes) -> bytes:
        """Return the decompressed content or raise DecompressionError."""


def read_header(data):
    """
    Split a bi5 header into (properties, declared_size).
    declared_size is None when the header is incomplete or the size unknown.
    """
    properties = bytes(data[:LZMA_PROPS_SIZE])
    size_field = data[LZMA_PROPS_SIZE:LZMA_PROPS_SIZE + LZMA_SIZE_FIELD]
    if len(size_field) < LZMA_SIZE_FIELD:
        return properties, None

    size = 0
    for i, byte in enumerate(size_field):
        size |= byte << (8 * i)
    if size == UNKNOWN_SIZE:
        return properties, None
    return properties, size


def decompress_lzma(data):
    """
    Decompress LZMA data handling multiple streams.
    bi5 files may contain multiple LZMA streams concatenated together.
    Fewer than 5 bytes means an hour file without content: returns b"".
    """
    if not data or len(data) < LZMA_PROPS_SIZE:
        return b""

    declared_size = None
    if not data.startswith(XZ_MAGIC):
        _, declared_size = read_header(data)

    results = []
    while True:
        decomp = LZMADecompressor(FORMAT_AUTO, None, None)
        try:
            res = decomp.decompress(data)
        except LZMAError as e:
            if results:
                break  # Leftover data is not valid LZMA; ignore
            raise DecompressionError(str(e)) from e
        if not decomp.eof:
            raise DecompressionError("Compressed data ended before end-of-stream marker")
        results.append(res)
        data = decomp.unused_data
        if not data:
            break

    # declared size covers the first stream only
    if declared_size is not None and declared_size != len(results[0]):
        raise DecompressionError(
            f"bi5 header declares {declared_size} bytes, decoded {len(results[0])}"
        )
    return b"".join(results)


class LzmaDecompressor(StreamDecompressor):
    def decompress(self, data):
        return decompress_lzma(data)
