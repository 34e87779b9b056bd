"""entrobench: how entropy, payload size and data type affect compression.

Generate payloads with a steerable empirical entropy, push them through
interchangeable compressors, check every round trip and collect the results:

    from entrobench import BenchmarkOrchestrator, default_registry
    sweep = BenchmarkOrchestrator(
        default_registry(), sizes=[1024], entropies=[0.0, 0.5, 1.0], kinds=["INT32"],
    )
    records = sweep.run()

Command line: ``python -m entrobench sweep --help``.
"""

__version__ = "0.1.0"

from .errors import ArithmeticHazard, ConfigValidationError, EntrobenchError, IntegrityError
from .data.types import GeneratorConfig, SymbolKind
from .evaluation.entropy import (
    distribution_entropy,
    normalized_entropy_order0,
    normalized_entropy_order1,
    payload_entropy,
)
from .data.shaping import ProbabilityShaper, ShapedDistribution, shape_distribution
from .data.synthetic import SyntheticDataGenerator
from .codec import (
    Compressor,
    CompressionResult,
    CompressorRegistry,
    GzipCompressor,
    Lz4Compressor,
    ZlibCompressor,
    ZstdCompressor,
    build_registry,
    default_registry,
)
from .evaluation.benchmarks import BenchmarkOrchestrator, BenchmarkRecord, run_sweep
from .config import SweepConfig

__all__ = [
    "ArithmeticHazard",
    "ConfigValidationError",
    "EntrobenchError",
    "IntegrityError",
    "GeneratorConfig",
    "SymbolKind",
    "distribution_entropy",
    "normalized_entropy_order0",
    "normalized_entropy_order1",
    "payload_entropy",
    "ProbabilityShaper",
    "ShapedDistribution",
    "shape_distribution",
    "SyntheticDataGenerator",
    "Compressor",
    "CompressionResult",
    "CompressorRegistry",
    "GzipCompressor",
    "Lz4Compressor",
    "ZlibCompressor",
    "ZstdCompressor",
    "build_registry",
    "default_registry",
    "BenchmarkOrchestrator",
    "BenchmarkRecord",
    "run_sweep",
    "SweepConfig",
]
