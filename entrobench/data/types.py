"""Symbol kinds and generator configuration."""

import enum
from dataclasses import dataclass

import numpy as np

from ..errors import ConfigValidationError


class SymbolKind(enum.Enum):
    """Closed set of element types a payload can be made of.

    Each member carries (width in bytes, numpy dtype, artifact label). The
    label is the name used in persisted payload file names.
    """

    INT32 = (4, np.dtype(np.int32), "INT")
    FLOAT32 = (4, np.dtype(np.float32), "FLOAT")
    FLOAT64 = (8, np.dtype(np.float64), "DOUBLE")
    BYTE = (1, np.dtype(np.int8), "BYTE")

    def __init__(self, width: int, dtype: np.dtype, label: str):
        self.width = width
        self.dtype = dtype
        self.label = label

    @property
    def is_integral(self) -> bool:
        return self in (SymbolKind.INT32, SymbolKind.BYTE)

    @property
    def default_bounds(self):
        """Sampling range used by the benchmark sweep.

        Integer kinds span their full range. Float kinds span from the
        smallest positive subnormal to the largest finite value.
        """
        if self.is_integral:
            info = np.iinfo(self.dtype)
            return int(info.min), int(info.max)
        info = np.finfo(self.dtype)
        return float(info.smallest_subnormal), float(info.max)

    @property
    def value_range(self):
        """Inclusive range of values representable by the kind."""
        if self.is_integral:
            info = np.iinfo(self.dtype)
            return int(info.min), int(info.max)
        info = np.finfo(self.dtype)
        return float(info.min), float(info.max)

    @classmethod
    def parse(cls, value) -> "SymbolKind":
        """Resolve a kind from a member, member name or artifact label."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().upper()
        for kind in cls:
            if key in (kind.name, kind.label):
                return kind
        names = ", ".join(k.name for k in cls)
        raise ConfigValidationError(f"Unknown symbol kind: {value!r}. Use one of {names}.")

    def __str__(self):
        return self.label


@dataclass(frozen=True)
class GeneratorConfig:
    """What to generate for one sweep cell."""

    payload_size: int        # requested size in bytes
    kind: SymbolKind
    target_entropy: float    # in [0, 1]

    def __post_init__(self):
        if isinstance(self.payload_size, bool) or not isinstance(self.payload_size, (int, np.integer)):
            raise ConfigValidationError(
                f"payload_size must be an integer, got {type(self.payload_size).__name__}"
            )
        if self.payload_size <= 0:
            raise ConfigValidationError(f"payload_size must be positive, got {self.payload_size}")
        if not isinstance(self.kind, SymbolKind):
            object.__setattr__(self, "kind", SymbolKind.parse(self.kind))
        if not 0.0 <= self.target_entropy <= 1.0:
            raise ConfigValidationError(
                f"Entropy must be between 0.0 and 1.0, got {self.target_entropy}"
            )

    @property
    def element_count(self) -> int:
        """Number of elements generated. Remainder bytes are dropped."""
        return self.payload_size // self.kind.width

    @property
    def generated_size(self) -> int:
        """Exact byte length of the generated payload (<= payload_size)."""
        return self.element_count * self.kind.width
