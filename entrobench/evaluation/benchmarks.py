"""Cartesian benchmark sweep over payload size, target entropy and symbol kind.

For every (size, entropy, kind) cell one payload is generated and passed
through every registered compressor. Each compress/decompress pair must
reproduce the payload byte for byte; a mismatch raises IntegrityError and
ends the sweep, since it means a codec or the generator is broken.

Records carry both the requested target entropy and the entropy measured on
the bytes that were actually generated.
"""

import itertools
import logging
import math
from concurrent.futures import ThreadPoolExecutor
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from ..codec.registry import CompressorRegistry, build_registry
from ..data.synthetic import SyntheticDataGenerator
from ..data.types import GeneratorConfig, SymbolKind
from ..errors import ConfigValidationError, IntegrityError
from ..storage.artifacts import write_compressed, write_payload
from .entropy import payload_entropy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BenchmarkRecord:
    """One (sweep cell, compressor) measurement."""
    kind: SymbolKind
    original_size: int                  # requested payload size (grid coordinate)
    measured_entropy: float             # order-0, on the generated bytes
    target_entropy: float
    compressor: Optional[str] = None
    compressed_size: Optional[int] = None
    ratio: Optional[float] = None       # payload bytes / compressed bytes
    elapsed_ms: Optional[float] = None  # compression time
    decompress_ms: Optional[float] = None
    payload_size: Optional[int] = None  # bytes actually generated
    measured_entropy_order1: Optional[float] = None
    payload_file: Optional[str] = None
    compressed_file: Optional[str] = None

    def to_dict(self) -> dict:
        row = asdict(self)
        row["kind"] = self.kind.name
        return row


def size_range(start: int, stop: int, step: int) -> List[int]:
    """Inclusive arithmetic sequence of payload sizes."""
    if step <= 0:
        raise ConfigValidationError(f"size step must be positive, got {step}")
    if start <= 0:
        raise ConfigValidationError(f"sizes must be positive, got {start}")
    return list(range(int(start), int(stop) + 1, int(step)))


def entropy_range(start: float, stop: float, step: float) -> List[float]:
    """Inclusive arithmetic sequence of target entropies.

    Values are computed from the index (not by repeated addition) and
    rounded to 10 decimals, so 0.0..1.0 step 0.1 yields exactly 11 clean
    values including 1.0.
    """
    if step <= 0:
        raise ConfigValidationError(f"entropy step must be positive, got {step}")
    if start < 0.0 or stop > 1.0:
        raise ConfigValidationError(
            f"Entropy must be between 0.0 and 1.0, got range {start}..{stop}"
        )
    if stop < start:
        return []
    count = int(math.floor((stop - start) / step + 1e-9)) + 1
    return [min(round(start + i * step, 10), stop) for i in range(count)]


Cell = Tuple[int, float, SymbolKind]


class BenchmarkOrchestrator:
    """Drive generation, compression and validation over the sweep grid.

    Args:
        registry: Fully populated compressor registry; read-only during run().
        sizes: Payload sizes in bytes.
        entropies: Target entropies in [0, 1].
        kinds: Symbol kinds (members or names).
        seed: Base seed. Cell i uses seed + i, so a cell's payload does not
            depend on which other cells run or on the worker count.
        workers: Number of threads evaluating cells concurrently.
        output_dir: If set, payloads and compressed artifacts are persisted
            there under their canonical names.
    """

    def __init__(
        self,
        registry: CompressorRegistry,
        sizes: Iterable[int],
        entropies: Iterable[float],
        kinds: Iterable,
        seed: Optional[int] = None,
        workers: int = 1,
        output_dir=None,
    ):
        self.registry = registry
        self.sizes = [int(s) for s in sizes]
        self.entropies = [float(e) for e in entropies]
        self.kinds = [SymbolKind.parse(k) for k in kinds]
        for size in self.sizes:
            if size <= 0:
                raise ConfigValidationError(f"sizes must be positive, got {size}")
        for entropy in self.entropies:
            if not 0.0 <= entropy <= 1.0:
                raise ConfigValidationError(f"Entropy must be between 0.0 and 1.0, got {entropy}")
        if workers < 1:
            raise ConfigValidationError(f"workers must be at least 1, got {workers}")
        self.seed = seed
        self.workers = workers
        self.output_dir = Path(output_dir) if output_dir is not None else None
        self._records: Optional[Tuple[BenchmarkRecord, ...]] = None

    @classmethod
    def from_config(cls, config, registry: Optional[CompressorRegistry] = None):
        """Build an orchestrator from a SweepConfig."""
        if registry is None:
            registry = build_registry(config.compressors)
        return cls(
            registry,
            sizes=config.sizes,
            entropies=config.entropies,
            kinds=config.symbol_kinds,
            seed=config.seed,
            workers=config.workers,
            output_dir=config.output_dir,
        )

    def cells(self) -> List[Cell]:
        """Sweep cells in size -> entropy -> kind order."""
        return list(itertools.product(self.sizes, self.entropies, self.kinds))

    @property
    def records(self) -> Tuple[BenchmarkRecord, ...]:
        if self._records is None:
            raise RuntimeError("Sweep has not completed; call run() first")
        return self._records

    def run(self, progress: Optional[Callable[[int, int, Cell], None]] = None
            ) -> Tuple[BenchmarkRecord, ...]:
        """Evaluate every cell and return the records in cell order.

        Args:
            progress: Called as progress(done, total, cell) after each cell.

        Raises:
            IntegrityError: a round trip did not reproduce its payload.
        """
        compressors = self.registry.get_all()
        if not compressors:
            raise ConfigValidationError("No compressors registered")

        cells = self.cells()
        total = len(cells)
        logger.info(
            "Sweeping %d cells x %d compressors (%s)",
            total, len(compressors), ", ".join(c.name for c in compressors),
        )

        per_cell: List[List[BenchmarkRecord]] = []
        if self.workers == 1:
            for index, cell in enumerate(cells):
                per_cell.append(self._run_cell(index, cell, compressors))
                if progress is not None:
                    progress(index + 1, total, cell)
        else:
            with ThreadPoolExecutor(max_workers=self.workers) as executor:
                futures = [
                    executor.submit(self._run_cell, index, cell, compressors)
                    for index, cell in enumerate(cells)
                ]
                try:
                    for index, (cell, future) in enumerate(zip(cells, futures)):
                        per_cell.append(future.result())
                        if progress is not None:
                            progress(index + 1, total, cell)
                except BaseException:
                    for future in futures:
                        future.cancel()
                    raise

        self._records = tuple(itertools.chain.from_iterable(per_cell))
        logger.info("Sweep finished with %d records", len(self._records))
        return self._records

    def _cell_seed(self, index: int) -> Optional[int]:
        if self.seed is None:
            return None
        return (self.seed + index) % (2 ** 32)

    def _run_cell(self, index: int, cell: Cell, compressors: Sequence) -> List[BenchmarkRecord]:
        size, entropy, kind = cell
        config = GeneratorConfig(size, kind, entropy)
        generator = SyntheticDataGenerator.for_kind(config, seed=self._cell_seed(index))
        payload = generator.generate()

        payload_file = None
        if self.output_dir is not None:
            payload_file = write_payload(self.output_dir, kind, size, entropy, payload)

        measured = payload_entropy(payload, kind)
        measured_order1 = payload_entropy(payload, kind, order=1)

        records = []
        for compressor in compressors:
            packed = compressor.compress(payload)
            unpacked = compressor.decompress(packed.data)
            if unpacked.data != payload:
                logger.error(
                    "Round trip failed: compressor=%s size=%d entropy=%s kind=%s",
                    compressor.name, size, entropy, kind.name,
                )
                raise IntegrityError(
                    compressor.name,
                    cell=(size, entropy, kind.name),
                    expected_size=len(payload),
                    actual_size=len(unpacked.data),
                )

            compressed_file = None
            if payload_file is not None:
                compressed_file = str(write_compressed(payload_file, compressor.name, packed.data))

            records.append(BenchmarkRecord(
                kind=kind,
                original_size=size,
                measured_entropy=measured,
                target_entropy=entropy,
                compressor=compressor.name,
                compressed_size=packed.compressed_size,
                ratio=packed.ratio,
                elapsed_ms=packed.elapsed_ms,
                decompress_ms=unpacked.elapsed_ms,
                payload_size=len(payload),
                measured_entropy_order1=measured_order1,
                payload_file=str(payload_file) if payload_file is not None else None,
                compressed_file=compressed_file,
            ))

        logger.debug(
            "Cell size=%d entropy=%s kind=%s measured=%.4f",
            size, entropy, kind.name, measured,
        )
        return records


def run_sweep(
    registry: CompressorRegistry,
    sizes: Iterable[int],
    entropies: Iterable[float],
    kinds: Iterable,
    seed: Optional[int] = None,
    workers: int = 1,
    output_dir=None,
) -> Tuple[BenchmarkRecord, ...]:
    """One-call sweep: build an orchestrator and run it."""
    orchestrator = BenchmarkOrchestrator(
        registry, sizes, entropies, kinds, seed=seed, workers=workers, output_dir=output_dir,
    )
    return orchestrator.run()
