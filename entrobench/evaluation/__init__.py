from .entropy import (
    normalized_entropy_order0,
    normalized_entropy_order1,
    distribution_entropy,
    decode_payload,
    payload_entropy,
)

__all__ = [
    "normalized_entropy_order0",
    "normalized_entropy_order1",
    "distribution_entropy",
    "decode_payload",
    "payload_entropy",
    "BenchmarkOrchestrator",
    "BenchmarkRecord",
    "run_sweep",
]


def __getattr__(name):
    """Lazy imports: the sweep pulls in the generator and codec packages."""
    if name in {"BenchmarkOrchestrator", "BenchmarkRecord", "run_sweep",
                "size_range", "entropy_range"}:
        from . import benchmarks
        return getattr(benchmarks, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
