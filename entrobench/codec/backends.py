"""Concrete compression backends.

Each class is a thin forwarding layer over a codec library:

    zlib  -> zlib (deflate with zlib framing)
    gzip  -> gzip (deflate with gzip framing, mtime fixed at 0)
    lz4   -> lz4.block (LZ4 block format, uncompressed size prefixed)
    zstd  -> zstandard

Codec errors propagate unchanged.
"""

import gzip
import zlib

import lz4.block

from .base import Compressor


class ZlibCompressor(Compressor):
    name = "zlib"

    def __init__(self, level: int = 6):
        self.level = level

    def _encode(self, data: bytes) -> bytes:
        return zlib.compress(data, self.level)

    def _decode(self, data: bytes) -> bytes:
        return zlib.decompress(data)


class GzipCompressor(Compressor):
    name = "gzip"

    def __init__(self, level: int = 9):
        self.level = level

    def _encode(self, data: bytes) -> bytes:
        # Fixed mtime keeps output byte-identical across runs.
        return gzip.compress(data, compresslevel=self.level, mtime=0)

    def _decode(self, data: bytes) -> bytes:
        return gzip.decompress(data)


class Lz4Compressor(Compressor):
    name = "lz4"

    def __init__(self, mode: str = "default", acceleration: int = 1):
        self.mode = mode
        self.acceleration = acceleration

    def _encode(self, data: bytes) -> bytes:
        # 4-byte little-endian length prefix; compressed sizes are raw block + 4.
        return lz4.block.compress(
            data, mode=self.mode, acceleration=self.acceleration, store_size=True,
        )

    def _decode(self, data: bytes) -> bytes:
        return lz4.block.decompress(data)


class ZstdCompressor(Compressor):
    name = "zstd"

    def __init__(self, level: int = 19):
        self.level = level

    def _encode(self, data: bytes) -> bytes:
        import zstandard as zstd
        return zstd.ZstdCompressor(level=self.level).compress(data)

    def _decode(self, data: bytes) -> bytes:
        import zstandard as zstd
        return zstd.ZstdDecompressor().decompress(data)


AVAILABLE_COMPRESSORS = {
    cls.name: cls
    for cls in (ZlibCompressor, GzipCompressor, Lz4Compressor, ZstdCompressor)
}
