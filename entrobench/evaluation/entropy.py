"""Normalized Shannon entropy estimators.

Two empirical measures over a symbol sequence, both scaled into [0, 1] by
the maximum entropy of the *observed* alphabet:

  - order 0: H(X) / log2(|alphabet|), symbols treated independently
  - order 1: H(X_n | X_{n-1}) / log2(|alphabet|), symbol given its predecessor

plus the normalized entropy of a probability vector, used when shaping
distributions. Degenerate inputs (empty, single symbol) are defined to have
entropy 0.0 rather than dividing by zero.
"""

import math
from collections import Counter, defaultdict

import numpy as np

from ..data.types import SymbolKind
from ..errors import ConfigValidationError


def _as_symbols(sequence):
    """Return a hashable-element list for any sequence, ndarray or bytes."""
    if isinstance(sequence, np.ndarray):
        return sequence.ravel().tolist()
    return list(sequence)


def _entropy_bits(counts, total: int) -> float:
    entropy = 0.0
    for count in counts:
        p = count / total
        if p > 0:
            entropy -= p * math.log2(p)
    return entropy


def normalized_entropy_order0(sequence) -> float:
    """Zero-order entropy of ``sequence`` normalized by log2(distinct values).

    Returns exactly 0.0 when the sequence has at most one distinct value.
    """
    counts = Counter(_as_symbols(sequence))
    n_distinct = len(counts)
    if n_distinct <= 1:
        return 0.0
    entropy = _entropy_bits(counts.values(), sum(counts.values()))
    return entropy / math.log2(n_distinct)


def normalized_entropy_order1(sequence) -> float:
    """First-order (context) entropy normalized by log2(alphabet size).

    Each symbol except the last is a context; the entropy of its immediate
    successors is weighted by how often the context occurs.
    """
    symbols = _as_symbols(sequence)
    if len(symbols) <= 1:
        return 0.0
    alphabet_size = len(set(symbols))
    if alphabet_size <= 1:
        return 0.0

    successors = defaultdict(Counter)
    for context, nxt in zip(symbols, symbols[1:]):
        successors[context][nxt] += 1

    total = len(symbols) - 1
    entropy = 0.0
    for following in successors.values():
        n_context = sum(following.values())
        entropy += (n_context / total) * _entropy_bits(following.values(), n_context)

    return entropy / math.log2(alphabet_size)


def distribution_entropy(probabilities) -> float:
    """Normalized entropy of a probability vector taken as a distribution.

    -sum(p ln p) / ln(N) over the N entries (zero entries contribute
    nothing). A vector with N <= 1 has entropy 0.0.
    """
    probs = np.asarray(probabilities, dtype=np.float64).ravel()
    if np.any(probs < 0):
        raise ConfigValidationError("All probabilities must be non-negative")
    n = probs.size
    if n <= 1:
        return 0.0
    nz = probs[probs > 0]
    return float(-np.sum(nz * np.log(nz)) / math.log(n))


def decode_payload(data: bytes, kind: SymbolKind) -> np.ndarray:
    """View payload bytes as elements of ``kind`` (native byte order).

    A trailing partial element, if any, is ignored.
    """
    kind = SymbolKind.parse(kind)
    usable = len(data) - len(data) % kind.width
    return np.frombuffer(bytes(data[:usable]), dtype=kind.dtype)


def payload_entropy(data: bytes, kind: SymbolKind, order: int = 0) -> float:
    """Measured normalized entropy of a serialized payload.

    Args:
        data: Payload bytes as produced by the generator.
        kind: Element type the bytes encode.
        order: 0 for order-0 entropy, 1 for first-order (context) entropy.
    """
    values = decode_payload(data, kind)
    if order == 0:
        return normalized_entropy_order0(values)
    if order == 1:
        return normalized_entropy_order1(values)
    raise ConfigValidationError(f"Unsupported entropy order: {order!r}. Use 0 or 1.")
