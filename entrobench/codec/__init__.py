"""Compression backends and the registry that groups them."""

from .base import Compressor, CompressionResult, compression_ratio
from .backends import (
    AVAILABLE_COMPRESSORS,
    GzipCompressor,
    Lz4Compressor,
    ZlibCompressor,
    ZstdCompressor,
)
from .registry import CompressorRegistry, build_registry, default_registry, DEFAULT_COMPRESSORS

__all__ = [
    "Compressor",
    "CompressionResult",
    "compression_ratio",
    "AVAILABLE_COMPRESSORS",
    "ZlibCompressor",
    "GzipCompressor",
    "Lz4Compressor",
    "ZstdCompressor",
    "CompressorRegistry",
    "build_registry",
    "default_registry",
    "DEFAULT_COMPRESSORS",
]
