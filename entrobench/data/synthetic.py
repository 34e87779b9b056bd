"""Synthetic payloads with steerable empirical entropy.

A payload of ``element_count`` values is built slot by slot from a shaped
probability vector (see ``shaping``): slot i contributes one uniform random
value repeated floor(P[i] * element_count) times. Positions left over by the
flooring get fresh independent draws. The array is then shuffled so that the
measured entropy reflects the value distribution rather than the order in
which slots were laid down, and serialized in native byte order.
"""

import logging
import math
from pathlib import Path
from typing import Optional

import numpy as np

from .shaping import ProbabilityShaper
from .types import GeneratorConfig, SymbolKind
from ..errors import ConfigValidationError

logger = logging.getLogger(__name__)


def _check_bound(name: str, value, kind: SymbolKind):
    """Validate one sampling bound against the symbol kind."""
    lo, hi = kind.value_range
    if kind.is_integral:
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
            raise ConfigValidationError(
                f"Kind mismatch: {kind.name} expects integer bounds, "
                f"got {type(value).__name__} for {name}"
            )
    else:
        if not isinstance(value, (float, np.floating)):
            raise ConfigValidationError(
                f"Kind mismatch: {kind.name} expects float bounds, "
                f"got {type(value).__name__} for {name}"
            )
        if not math.isfinite(value):
            raise ConfigValidationError(f"{name} must be finite, got {value}")
    if not lo <= value <= hi:
        raise ConfigValidationError(
            f"{name}={value} is outside the {kind.name} range [{lo}, {hi}]"
        )


class SyntheticDataGenerator:
    """Generate one payload per call for a fixed configuration.

    Args:
        min_value: Smallest value a draw may take (inclusive).
        max_value: Largest value a draw may take.
        config: Size, symbol kind and target entropy.
        seed: Seed for the generator's own RandomState. Two generators with
            the same seed and config produce identical payloads.
        shaper: ProbabilityShaper to use (default settings if omitted).
    """

    def __init__(
        self,
        min_value,
        max_value,
        config: GeneratorConfig,
        seed: Optional[int] = None,
        shaper: Optional[ProbabilityShaper] = None,
    ):
        if not isinstance(config, GeneratorConfig):
            raise ConfigValidationError(
                f"config must be a GeneratorConfig, got {type(config).__name__}"
            )
        _check_bound("min_value", min_value, config.kind)
        _check_bound("max_value", max_value, config.kind)
        if min_value > max_value:
            raise ConfigValidationError(
                f"Min value must be less than or equal to max value ({min_value} > {max_value})"
            )
        self.min_value = min_value
        self.max_value = max_value
        self.config = config
        self.shaper = shaper or ProbabilityShaper()
        self.rng = np.random.RandomState(seed)

    @classmethod
    def for_kind(cls, config: GeneratorConfig, seed: Optional[int] = None,
                 shaper: Optional[ProbabilityShaper] = None) -> "SyntheticDataGenerator":
        """Generator sampling over the kind's default bounds."""
        lo, hi = config.kind.default_bounds
        return cls(lo, hi, config, seed=seed, shaper=shaper)

    def _draw(self, size: int) -> np.ndarray:
        """Independent uniform draws in [min_value, max_value] for the kind."""
        kind = self.config.kind
        if kind is SymbolKind.INT32 or kind is SymbolKind.BYTE:
            values = self.rng.randint(
                int(self.min_value), int(self.max_value) + 1, size=size, dtype=np.int64,
            )
        elif kind is SymbolKind.FLOAT32 or kind is SymbolKind.FLOAT64:
            lo, hi = float(self.min_value), float(self.max_value)
            if math.isfinite(hi - lo):
                values = self.rng.uniform(lo, hi, size=size)
            else:
                # Width overflows float64; sample at half scale.
                values = 2.0 * self.rng.uniform(lo / 2.0, hi / 2.0, size=size)
        else:
            raise ConfigValidationError(f"Unsupported symbol kind: {kind!r}")
        return values.astype(kind.dtype)

    def generate_values(self) -> np.ndarray:
        """Shuffled element array before serialization.

        Returns:
            (element_count,) array of the kind's dtype.
        """
        n = self.config.element_count
        if n == 0:
            return np.empty(0, dtype=self.config.kind.dtype)

        probs = self.shaper.shape(self.config.target_entropy, n).probabilities
        counts = np.floor(probs * n).astype(np.int64)

        # One draw per slot, repeated by its count; overflow is cut at n.
        slot_values = self._draw(n)
        values = np.repeat(slot_values, counts)[:n]

        remainder = n - values.size
        if remainder > 0:
            values = np.concatenate([values, self._draw(remainder)])

        self.rng.shuffle(values)
        return values

    def generate(self, path=None) -> bytes:
        """Generate a payload, optionally writing it to ``path``.

        The payload is exactly ``config.element_count * kind.width`` bytes,
        which is less than ``config.payload_size`` when the size is not a
        multiple of the element width.
        """
        data = self.generate_values().tobytes()
        if path is not None:
            path = Path(path)
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "wb") as f:
                f.write(data)
            logger.debug("Wrote %d byte payload to %s", len(data), path)
        return data
