"""Error taxonomy for entrobench.

Codec failures are not wrapped: whatever the underlying library raises
(zlib.error, gzip.BadGzipFile, lz4/zstandard errors, OSError for file
variants) reaches the caller unchanged.
"""


class EntrobenchError(Exception):
    """Base class for errors raised by entrobench itself."""


class ConfigValidationError(EntrobenchError, ValueError):
    """Invalid generator, shaper, registry or sweep configuration."""


class IntegrityError(EntrobenchError, AssertionError):
    """Decompressed bytes differ from the original payload.

    Fatal for a sweep: it signals a bug in a codec or in the generator,
    never a transient condition.
    """

    def __init__(self, compressor: str, cell=None, expected_size: int = 0,
                 actual_size: int = 0):
        self.compressor = compressor
        self.cell = cell
        self.expected_size = expected_size
        self.actual_size = actual_size
        where = f" for cell {cell}" if cell is not None else ""
        super().__init__(
            f"Decompressed data does not match the original{where} "
            f"(compressor={compressor!r}, expected {expected_size} bytes, "
            f"got {actual_size} bytes)"
        )


class ArithmeticHazard(EntrobenchError, ZeroDivisionError):
    """Compression ratio requested for a zero-sized compressed output."""
