"""How close does generated data get to the requested entropy?

For each symbol kind and target entropy, generates payloads, writes them
under their canonical names, re-reads them from disk and reports the
measured order-0 / order-1 entropy next to the target.

Usage:
    python scripts/shaping_accuracy.py [--size 1024] [--step 0.1] [--dir data/] [--seed 0]
"""

import argparse
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from entrobench.data.synthetic import SyntheticDataGenerator
from entrobench.data.types import GeneratorConfig, SymbolKind
from entrobench.evaluation.benchmarks import entropy_range
from entrobench.storage.artifacts import payload_name, recalculate_entropy


def measure(size: int, entropies, directory: Path, seed: int) -> list:
    rows = []
    for kind in SymbolKind:
        for i, target in enumerate(entropies):
            config = GeneratorConfig(size, kind, target)
            path = directory / payload_name(kind, size, target)
            SyntheticDataGenerator.for_kind(config, seed=seed + i).generate(path)
            rows.append({
                "kind": kind.name,
                "target": target,
                "order0": recalculate_entropy(path, kind),
                "order1": recalculate_entropy(path, kind, order=1),
            })
    return rows


def main():
    parser = argparse.ArgumentParser(description=__doc__.split("\n")[0])
    parser.add_argument("--size", type=int, default=1024)
    parser.add_argument("--step", type=float, default=0.1)
    parser.add_argument("--dir", type=str, default="data")
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--output", type=str, default=None, help="Optional JSON output")
    args = parser.parse_args()

    rows = measure(args.size, entropy_range(0.0, 1.0, args.step), Path(args.dir), args.seed)

    print(f"{'Kind':<8} {'Target':>7} {'H0':>8} {'H1':>8} {'Error':>8}")
    print("-" * 44)
    for r in rows:
        err = r["order0"] - r["target"]
        print(f"{r['kind']:<8} {r['target']:>7.2f} {r['order0']:>8.4f} {r['order1']:>8.4f} {err:>+8.4f}")

    if args.output:
        Path(args.output).parent.mkdir(parents=True, exist_ok=True)
        with open(args.output, "w") as f:
            json.dump(rows, f, indent=2)
        print(f"\nSaved to {args.output}")


if __name__ == "__main__":
    main()
