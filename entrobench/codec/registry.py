"""Name-keyed compressor registry.

A registry is built once at startup and handed to the benchmark
orchestrator; nothing registers compressors while a sweep is running.
"""

from typing import Iterable, Iterator, List, Optional

from .backends import AVAILABLE_COMPRESSORS
from .base import Compressor
from ..errors import ConfigValidationError

DEFAULT_COMPRESSORS = ("zlib", "gzip", "lz4")


class CompressorRegistry:
    """Compressors keyed by name, iterated in registration order.

    Registering a name that is already present replaces the compressor
    but keeps its original position.
    """

    def __init__(self, compressors: Iterable[Compressor] = ()):
        self._compressors = {}
        for compressor in compressors:
            self.register(compressor)

    def register(self, compressor: Compressor) -> "CompressorRegistry":
        if not isinstance(compressor, Compressor):
            raise ConfigValidationError(
                f"Expected a Compressor, got {type(compressor).__name__}"
            )
        if not compressor.name:
            raise ConfigValidationError(f"{compressor!r} has no name")
        self._compressors[compressor.name] = compressor
        return self

    def unregister(self, name: str) -> Optional[Compressor]:
        return self._compressors.pop(name, None)

    def get(self, name: str) -> Optional[Compressor]:
        return self._compressors.get(name)

    def get_all(self) -> List[Compressor]:
        return list(self._compressors.values())

    def names(self) -> List[str]:
        return list(self._compressors)

    def __contains__(self, name) -> bool:
        return name in self._compressors

    def __iter__(self) -> Iterator[Compressor]:
        return iter(self.get_all())

    def __len__(self) -> int:
        return len(self._compressors)

    def __repr__(self):
        return f"CompressorRegistry({self.names()!r})"


def build_registry(names: Iterable[str]) -> CompressorRegistry:
    """Registry holding default-configured compressors for ``names``."""
    registry = CompressorRegistry()
    for name in names:
        key = str(name).strip().lower()
        if key not in AVAILABLE_COMPRESSORS:
            known = ", ".join(AVAILABLE_COMPRESSORS)
            raise ConfigValidationError(f"Unknown compressor: {name!r}. Use one of {known}.")
        registry.register(AVAILABLE_COMPRESSORS[key]())
    return registry


def default_registry() -> CompressorRegistry:
    """zlib, gzip and lz4, in that order."""
    return build_registry(DEFAULT_COMPRESSORS)
