"""Persisted payload and compressed-artifact naming.

File names are shared with earlier result sets and must not change:

    <LABEL>_<size>_<entropy>            generated payload, e.g. DOUBLE_1024_0.99
    <LABEL>_<size>_<entropy>.<codec>    compressed payload, e.g. DOUBLE_1024_0.99.lz4

LABEL is the symbol kind's artifact label (INT, FLOAT, DOUBLE, BYTE) and
entropy is the requested target written as a float literal (0.0, 0.5, 1.0).
"""

import logging
from pathlib import Path
from typing import Union

from ..data.types import SymbolKind
from ..evaluation.entropy import payload_entropy

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def payload_name(kind, size: int, entropy: float) -> str:
    kind = SymbolKind.parse(kind)
    return f"{kind.label}_{int(size)}_{float(entropy)!r}"


def compressed_name(payload: str, compressor_name: str) -> str:
    return f"{payload}.{compressor_name}"


def write_payload(directory: PathLike, kind, size: int, entropy: float, data: bytes) -> Path:
    """Write a payload under its canonical name inside ``directory``."""
    path = Path(directory) / payload_name(kind, size, entropy)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wb") as f:
        f.write(data)
    logger.debug("Persisted payload %s (%d bytes)", path, len(data))
    return path


def write_compressed(payload_path: PathLike, compressor_name: str, data: bytes) -> Path:
    """Write compressed bytes next to their payload as ``<payload>.<codec>``."""
    payload_path = Path(payload_path)
    path = payload_path.with_name(compressed_name(payload_path.name, compressor_name))
    with open(path, "wb") as f:
        f.write(data)
    return path


def read_payload(path: PathLike) -> bytes:
    with open(path, "rb") as f:
        return f.read()


def parse_payload_name(name: str):
    """Split a payload file name into (kind, size, entropy).

    Raises:
        ValueError: if the name does not follow ``<LABEL>_<size>_<entropy>``.
    """
    stem = Path(name).name
    parts = stem.split("_")
    if len(parts) != 3:
        raise ValueError(f"Not a payload file name: {name!r}")
    label, size, entropy = parts
    return SymbolKind.parse(label), int(size), float(entropy)


def recalculate_entropy(path: PathLike, kind=None, order: int = 0) -> float:
    """Measured normalized entropy of a persisted payload.

    ``kind`` defaults to the kind encoded in the file name.
    """
    if kind is None:
        kind = parse_payload_name(path)[0]
    return payload_entropy(read_payload(path), kind, order=order)
