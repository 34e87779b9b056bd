"""Turn finished sweep records into plot-ready series and tables.

This module only reads BenchmarkRecords; it never feeds anything back into
a sweep. Three views are built, each as series of (x, y, group) where group
is the compressor name:

    entropy_vs_ratio   per kind, at one payload size (middle size by default)
    size_vs_ratio      per kind, at one entropy (middle target by default)
    type_vs_ratio      across kinds, at one size and one entropy

Entropy filters compare the *measured* entropy against the chosen value
within ``tolerance``, since measured values rarely hit a target exactly.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import pandas as pd

from ..data.types import SymbolKind
from .benchmarks import BenchmarkRecord

DEFAULT_ENTROPY_TOLERANCE = 7e-2


@dataclass
class Series:
    """One chart's worth of points."""
    title: str
    x_label: str
    x: List = field(default_factory=list)
    y: List[float] = field(default_factory=list)
    group: List[str] = field(default_factory=list)

    def add(self, x, y, group):
        self.x.append(x)
        self.y.append(y)
        self.group.append(group)

    def __len__(self):
        return len(self.x)

    def to_dict(self) -> dict:
        return {self.x_label: list(self.x), "ratio": list(self.y), "compressor": list(self.group)}


def _middle(values):
    ordered = sorted(set(values))
    if not ordered:
        raise ValueError("No records to report on")
    return ordered[len(ordered) // 2]


def _ratio(record: BenchmarkRecord) -> float:
    return record.ratio if record.ratio is not None else 0.0


def _group(record: BenchmarkRecord) -> str:
    return record.compressor or "unknown"


def entropy_vs_ratio(records: Sequence[BenchmarkRecord],
                     size: Optional[int] = None) -> Dict[SymbolKind, Series]:
    """Compression ratio against measured entropy, one series per kind."""
    if size is None:
        size = _middle(r.original_size for r in records)
    out: Dict[SymbolKind, Series] = {}
    for record in records:
        if record.original_size != size:
            continue
        series = out.setdefault(
            record.kind, Series(f"{record.kind} type, size = {size}", "entropy"),
        )
        series.add(record.measured_entropy, _ratio(record), _group(record))
    return out


def size_vs_ratio(records: Sequence[BenchmarkRecord], entropy: Optional[float] = None,
                  tolerance: float = DEFAULT_ENTROPY_TOLERANCE) -> Dict[SymbolKind, Series]:
    """Compression ratio against payload size near one entropy, per kind."""
    if entropy is None:
        entropy = _middle(r.target_entropy for r in records)
    out: Dict[SymbolKind, Series] = {}
    for record in records:
        if abs(record.measured_entropy - entropy) >= tolerance:
            continue
        series = out.setdefault(
            record.kind, Series(f"{record.kind} type, entropy = {entropy}", "size"),
        )
        series.add(record.original_size, _ratio(record), _group(record))
    return out


def type_vs_ratio(records: Sequence[BenchmarkRecord], size: Optional[int] = None,
                  entropy: Optional[float] = None,
                  tolerance: float = DEFAULT_ENTROPY_TOLERANCE) -> Series:
    """Compression ratio per symbol kind at one size and entropy."""
    if size is None:
        size = _middle(r.original_size for r in records)
    if entropy is None:
        entropy = _middle(r.target_entropy for r in records)
    series = Series(f"Size = {size}, Entropy = {entropy}", "type")
    for record in records:
        if record.original_size == size and abs(record.measured_entropy - entropy) < tolerance:
            series.add(str(record.kind), _ratio(record), _group(record))
    return series


def records_to_frame(records: Sequence[BenchmarkRecord]) -> pd.DataFrame:
    """One row per record, kind as its enum name."""
    columns = list(BenchmarkRecord.__dataclass_fields__)
    return pd.DataFrame([r.to_dict() for r in records], columns=columns)


def summarize(records: Sequence[BenchmarkRecord]) -> pd.DataFrame:
    """Mean ratio and timings per (compressor, kind)."""
    df = records_to_frame(records)
    if df.empty:
        return pd.DataFrame(columns=["compressor", "kind", "cells", "mean_ratio",
                                     "max_ratio", "mean_compress_ms", "mean_decompress_ms"])
    grouped = df.groupby(["compressor", "kind"], sort=False)
    return grouped.agg(
        cells=("ratio", "size"),
        mean_ratio=("ratio", "mean"),
        max_ratio=("ratio", "max"),
        mean_compress_ms=("elapsed_ms", "mean"),
        mean_decompress_ms=("decompress_ms", "mean"),
    ).reset_index()


def save_records(records: Sequence[BenchmarkRecord], path) -> Path:
    """Write records as CSV or JSON, chosen by the file suffix."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    suffix = path.suffix.lower()
    if suffix == ".csv":
        records_to_frame(records).to_csv(path, index=False)
    elif suffix == ".json":
        with open(path, "w") as f:
            json.dump([r.to_dict() for r in records], f, indent=2)
    else:
        raise ValueError(f"Unsupported results format: {suffix!r}. Use .csv or .json.")
    return path


def load_records(path) -> List[BenchmarkRecord]:
    """Read records written by save_records()."""
    path = Path(path)
    if path.suffix.lower() == ".csv":
        df = pd.read_csv(path)
        rows = df.astype(object).where(pd.notna(df), None).to_dict(orient="records")
    else:
        with open(path) as f:
            rows = json.load(f)
    out = []
    for row in rows:
        row = dict(row)
        row["kind"] = SymbolKind.parse(row["kind"])
        for key in ("original_size", "compressed_size", "payload_size"):
            if row.get(key) is not None:
                row[key] = int(row[key])
        out.append(BenchmarkRecord(**row))
    return out
