from .types import SymbolKind, GeneratorConfig

__all__ = [
    "SymbolKind",
    "GeneratorConfig",
    "ProbabilityShaper",
    "ShapedDistribution",
    "shape_distribution",
    "SyntheticDataGenerator",
]


def __getattr__(name):
    """Lazy imports for the shaping and generation modules."""
    if name in {"ProbabilityShaper", "ShapedDistribution", "shape_distribution"}:
        from . import shaping
        return getattr(shaping, name)
    if name == "SyntheticDataGenerator":
        from . import synthetic
        return getattr(synthetic, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
