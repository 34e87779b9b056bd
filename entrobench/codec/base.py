"""Uniform compressor capability.

Every backend exposes the same four operations, each returning a
CompressionResult with sizes and wall-clock timing:

    compress(data)        compress_file(path)
    decompress(data)      decompress_file(path)

Backends only implement the raw byte transforms ``_encode`` / ``_decode``;
timing, file handling and result bookkeeping live here.

Results of both directions use the same orientation: ``original_size`` is
the uncompressed length and ``compressed_size`` the compressed length, so
``ratio`` means the same thing for a compress and the matching decompress.
"""

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..errors import ArithmeticHazard

logger = logging.getLogger(__name__)


def compression_ratio(original_size: int, compressed_size: int) -> float:
    """original_size / compressed_size.

    Raises:
        ArithmeticHazard: if ``compressed_size`` is zero.
    """
    if compressed_size == 0:
        raise ArithmeticHazard(
            f"Compression ratio undefined for zero compressed size "
            f"(original size {original_size})"
        )
    return original_size / compressed_size


@dataclass
class CompressionResult:
    """Outcome of one compress or decompress operation."""
    original_size: int
    compressed_size: int
    elapsed_ms: float
    data: bytes                        # output bytes of the operation
    source_path: Optional[str] = None  # input file for the *_file variants

    @property
    def ratio(self) -> float:
        return compression_ratio(self.original_size, self.compressed_size)


class Compressor(ABC):
    """Base class for compression backends."""

    name: str = ""

    @abstractmethod
    def _encode(self, data: bytes) -> bytes:
        """Raw compression transform."""

    @abstractmethod
    def _decode(self, data: bytes) -> bytes:
        """Raw decompression transform."""

    def compress(self, data: bytes) -> CompressionResult:
        data = bytes(data)
        t0 = time.perf_counter()
        compressed = self._encode(data)
        elapsed = (time.perf_counter() - t0) * 1000.0
        return CompressionResult(
            original_size=len(data),
            compressed_size=len(compressed),
            elapsed_ms=elapsed,
            data=compressed,
        )

    def decompress(self, data: bytes) -> CompressionResult:
        data = bytes(data)
        t0 = time.perf_counter()
        restored = self._decode(data)
        elapsed = (time.perf_counter() - t0) * 1000.0
        return CompressionResult(
            original_size=len(restored),
            compressed_size=len(data),
            elapsed_ms=elapsed,
            data=restored,
        )

    def compress_file(self, path, output_path=None) -> CompressionResult:
        """Compress the file at ``path``.

        Args:
            path: Input file.
            output_path: If given, the compressed bytes are also written here.
                Pass ``True`` to use the artifact name ``<path>.<name>``.

        Timing covers the read and the transform, not the optional write.
        """
        path = Path(path)
        t0 = time.perf_counter()
        with open(path, "rb") as f:
            data = f.read()
        compressed = self._encode(data)
        elapsed = (time.perf_counter() - t0) * 1000.0
        if output_path is not None:
            self._write(self.artifact_path(path) if output_path is True else Path(output_path),
                        compressed)
        return CompressionResult(
            original_size=len(data),
            compressed_size=len(compressed),
            elapsed_ms=elapsed,
            data=compressed,
            source_path=str(path),
        )

    def decompress_file(self, path, output_path=None) -> CompressionResult:
        """Decompress the file at ``path`` (optionally writing the result)."""
        path = Path(path)
        t0 = time.perf_counter()
        with open(path, "rb") as f:
            data = f.read()
        restored = self._decode(data)
        elapsed = (time.perf_counter() - t0) * 1000.0
        if output_path is not None:
            self._write(Path(output_path), restored)
        return CompressionResult(
            original_size=len(restored),
            compressed_size=len(data),
            elapsed_ms=elapsed,
            data=restored,
            source_path=str(path),
        )

    def artifact_path(self, path) -> Path:
        """Compressed artifact name for a payload file: ``<path>.<name>``."""
        path = Path(path)
        return path.with_name(f"{path.name}.{self.name}")

    @staticmethod
    def _write(path: Path, data: bytes):
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "wb") as f:
            f.write(data)
        logger.debug("Wrote %d bytes to %s", len(data), path)

    def __repr__(self):
        return f"{type(self).__name__}(name={self.name!r})"
