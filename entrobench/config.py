"""Central configuration for a benchmark sweep."""

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import List, Optional, Tuple

from .codec.backends import AVAILABLE_COMPRESSORS
from .data.types import SymbolKind
from .errors import ConfigValidationError
from .evaluation.benchmarks import entropy_range, size_range


@dataclass
class SweepConfig:
    """All sweep parameters in one place."""

    # --- Entropy axis (inclusive) ---
    entropy_min: float = 0.0
    entropy_max: float = 1.0
    entropy_step: float = 0.1

    # --- Size axis in bytes (inclusive) ---
    size_min: int = 128
    size_max: int = 5120
    size_step: int = 256

    # --- Type axis ---
    kinds: Tuple[str, ...] = ("INT32", "FLOAT64", "FLOAT32", "BYTE")

    # --- Backends, in registration order ---
    compressors: Tuple[str, ...] = ("zlib", "gzip", "lz4")

    # --- Execution ---
    seed: Optional[int] = None
    workers: int = 1
    output_dir: Optional[str] = None  # persist payloads + artifacts here

    def __post_init__(self):
        self.kinds = tuple(SymbolKind.parse(k).name for k in self.kinds)
        self.compressors = tuple(str(c).strip().lower() for c in self.compressors)
        if not self.kinds:
            raise ConfigValidationError("At least one symbol kind is required")
        if not self.compressors:
            raise ConfigValidationError("At least one compressor is required")
        for name in self.compressors:
            if name not in AVAILABLE_COMPRESSORS:
                known = ", ".join(AVAILABLE_COMPRESSORS)
                raise ConfigValidationError(f"Unknown compressor: {name!r}. Use one of {known}.")
        if not 0.0 <= self.entropy_min <= self.entropy_max <= 1.0:
            raise ConfigValidationError(
                f"Entropy range must satisfy 0 <= min <= max <= 1, "
                f"got {self.entropy_min}..{self.entropy_max}"
            )
        if self.entropy_step <= 0:
            raise ConfigValidationError(f"entropy_step must be positive, got {self.entropy_step}")
        if not 0 < self.size_min <= self.size_max:
            raise ConfigValidationError(
                f"Size range must satisfy 0 < min <= max, got {self.size_min}..{self.size_max}"
            )
        if self.size_step <= 0:
            raise ConfigValidationError(f"size_step must be positive, got {self.size_step}")
        if self.workers < 1:
            raise ConfigValidationError(f"workers must be at least 1, got {self.workers}")

    @property
    def sizes(self) -> List[int]:
        return size_range(self.size_min, self.size_max, self.size_step)

    @property
    def entropies(self) -> List[float]:
        return entropy_range(self.entropy_min, self.entropy_max, self.entropy_step)

    @property
    def symbol_kinds(self) -> List[SymbolKind]:
        return [SymbolKind.parse(k) for k in self.kinds]

    @property
    def n_cells(self) -> int:
        return len(self.sizes) * len(self.entropies) * len(self.kinds)

    def to_dict(self) -> dict:
        d = asdict(self)
        d["kinds"] = list(self.kinds)
        d["compressors"] = list(self.compressors)
        return d

    @classmethod
    def from_dict(cls, data: dict) -> "SweepConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigValidationError(f"Unknown config keys: {sorted(unknown)}")
        data = dict(data)
        for key in ("kinds", "compressors"):
            if key in data:
                data[key] = tuple(data[key])
        return cls(**data)

    @classmethod
    def from_json(cls, path) -> "SweepConfig":
        with open(path) as f:
            return cls.from_dict(json.load(f))

    def to_json(self, path) -> Path:
        path = Path(path)
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)
        return path

    def replace(self, **overrides) -> "SweepConfig":
        """Copy with non-None overrides applied (used for CLI flags)."""
        data = self.to_dict()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return type(self).from_dict(data)
