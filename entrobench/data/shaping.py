"""Turn a target entropy into a probability vector over positional slots.

The vector has one entry per element of the payload (a *slot*), not one
per distinct value. Mass is moved into slot 0 by a bounded hill climb:

    P = uniform(1/N)
    while |H(P) - target| > tolerance and iterations < max_iterations:
        if H(P) > target:  P[0] += step   (capped at 0.99)
        else:              P[0] -= step   (floored at 1/N)
        P[1:] = (1 - P[0]) / (N - 1)

H is the normalized entropy of P itself. The climb is an approximation:
targets near 0 stop at the 0.99 cap and targets near 1 stop at the uniform
floor without meeting the tolerance. Changing the slot-0 policy changes
every generated payload, so it must stay as is for comparability with
earlier result sets.
"""

import logging
from dataclasses import dataclass

import numpy as np

from ..errors import ConfigValidationError
from ..evaluation.entropy import distribution_entropy

logger = logging.getLogger(__name__)


@dataclass
class ShapedDistribution:
    """Outcome of one shaping run."""
    probabilities: np.ndarray   # (n_slots,) float64, sums to 1
    entropy: float              # normalized entropy of probabilities
    iterations: int
    converged: bool


class ProbabilityShaper:
    """Bounded hill climb concentrating probability mass into slot 0."""

    def __init__(
        self,
        step: float = 0.01,
        tolerance: float = 0.001,
        max_iterations: int = 2000,
        ceiling: float = 0.99,
    ):
        if step <= 0:
            raise ConfigValidationError(f"step must be positive, got {step}")
        if tolerance < 0:
            raise ConfigValidationError(f"tolerance must be non-negative, got {tolerance}")
        if max_iterations < 0:
            raise ConfigValidationError(f"max_iterations must be non-negative, got {max_iterations}")
        if not 0.0 < ceiling <= 1.0:
            raise ConfigValidationError(f"ceiling must be in (0, 1], got {ceiling}")
        self.step = step
        self.tolerance = tolerance
        self.max_iterations = max_iterations
        self.ceiling = ceiling

    def shape(self, target: float, n_slots: int) -> ShapedDistribution:
        """Shape a distribution of ``n_slots`` entries toward ``target``.

        Args:
            target: Desired normalized entropy in [0, 1].
            n_slots: Number of positional slots (>= 1).

        Returns:
            ShapedDistribution with the final vector and climb diagnostics.
        """
        if not 0.0 <= target <= 1.0:
            raise ConfigValidationError(f"Entropy must be between 0.0 and 1.0, got {target}")
        if n_slots < 1:
            raise ConfigValidationError(f"n_slots must be at least 1, got {n_slots}")

        # A single slot holds all the mass; there is nothing to move.
        if n_slots == 1:
            return ShapedDistribution(np.ones(1), 0.0, 0, target <= self.tolerance)

        floor = 1.0 / n_slots
        head = floor
        current = 1.0
        iterations = 0

        while abs(current - target) > self.tolerance and iterations < self.max_iterations:
            if current > target:
                head = min(head + self.step, self.ceiling)
            else:
                head = max(head - self.step, floor)
            probs = self._spread(head, n_slots)
            current = distribution_entropy(probs)
            iterations += 1

        converged = abs(current - target) <= self.tolerance
        if not converged:
            logger.debug(
                "Shaping stopped at entropy %.4f for target %.4f (n_slots=%d, %d iterations)",
                current, target, n_slots, iterations,
            )
        return ShapedDistribution(self._spread(head, n_slots), current, iterations, converged)

    @staticmethod
    def _spread(head: float, n_slots: int) -> np.ndarray:
        probs = np.full(n_slots, (1.0 - head) / (n_slots - 1))
        probs[0] = head
        return probs


def shape_distribution(target: float, n_slots: int) -> np.ndarray:
    """Probability vector for ``target`` with the default shaper settings."""
    return ProbabilityShaper().shape(target, n_slots).probabilities
