"""Tests for the sweep orchestrator and its range helpers."""

import pytest

from entrobench.codec import (
    Compressor,
    CompressorRegistry,
    GzipCompressor,
    Lz4Compressor,
    ZlibCompressor,
)
from entrobench.config import SweepConfig
from entrobench.data.types import SymbolKind
from entrobench.errors import ConfigValidationError, IntegrityError
from entrobench.evaluation.benchmarks import (
    BenchmarkOrchestrator,
    BenchmarkRecord,
    entropy_range,
    run_sweep,
    size_range,
)


class TruncatingCompressor(Compressor):
    """Loses a byte on the way back."""
    name = "truncating"

    def _encode(self, data: bytes) -> bytes:
        return data + b"\x00"

    def _decode(self, data: bytes) -> bytes:
        return data[:-2]


@pytest.fixture
def zlib_gzip():
    return CompressorRegistry([ZlibCompressor(), GzipCompressor()])


class TestSingleCell:
    def test_byte_cell_two_compressors(self, zlib_gzip):
        """One Byte cell at entropy 0 yields one record per compressor."""
        records = run_sweep(zlib_gzip, [128], [0.0], [SymbolKind.BYTE], seed=0)
        assert len(records) == 2
        assert [r.compressor for r in records] == ["zlib", "gzip"]
        for r in records:
            assert r.kind is SymbolKind.BYTE
            assert r.original_size == 128
            assert r.payload_size == 128
            assert r.target_entropy == 0.0
            assert r.measured_entropy < 0.15
            assert r.ratio > 1.0
            assert r.ratio == pytest.approx(128 / r.compressed_size)
            assert r.elapsed_ms >= 0
            assert r.decompress_ms >= 0

    def test_two_entropies_one_compressor(self):
        registry = CompressorRegistry([ZlibCompressor()])
        records = run_sweep(registry, [128], [0.0, 1.0], [SymbolKind.BYTE], seed=0)
        assert len(records) == 2
        assert [r.target_entropy for r in records] == [0.0, 1.0]
        assert all(r.compressed_size > 0 for r in records)
        assert records[0].measured_entropy < records[1].measured_entropy

    def test_records_share_measured_entropy(self, zlib_gzip):
        records = run_sweep(zlib_gzip, [512], [0.5], ["INT32"], seed=1)
        assert records[0].measured_entropy == records[1].measured_entropy
        assert records[0].measured_entropy_order1 == records[1].measured_entropy_order1

    def test_truncated_payload_size(self):
        """Requested size is kept as the grid coordinate; ratio uses actual bytes."""
        registry = CompressorRegistry([ZlibCompressor()])
        (record,) = run_sweep(registry, [130], [1.0], [SymbolKind.FLOAT64], seed=3)
        assert record.original_size == 130
        assert record.payload_size == 128
        assert record.ratio == pytest.approx(128 / record.compressed_size)


class TestSweepOrder:
    def test_cell_order_size_entropy_kind(self):
        registry = CompressorRegistry([Lz4Compressor()])
        kinds = [SymbolKind.INT32, SymbolKind.FLOAT32, SymbolKind.BYTE]
        records = run_sweep(registry, [128, 256], [0.0, 1.0], kinds, seed=5)

        assert len(records) == 12
        coords = [(r.original_size, r.target_entropy, r.kind) for r in records]
        expected = [(s, e, k) for s in (128, 256) for e in (0.0, 1.0) for k in kinds]
        assert coords == expected

    def test_compressors_follow_registration_order(self):
        registry = CompressorRegistry([Lz4Compressor(), ZlibCompressor(), GzipCompressor()])
        records = run_sweep(registry, [64], [0.2], ["BYTE"], seed=0)
        assert [r.compressor for r in records] == ["lz4", "zlib", "gzip"]

    def test_cells(self, zlib_gzip):
        orch = BenchmarkOrchestrator(zlib_gzip, [1, 2], [0.5], ["BYTE", "INT32"])
        assert orch.cells() == [
            (1, 0.5, SymbolKind.BYTE), (1, 0.5, SymbolKind.INT32),
            (2, 0.5, SymbolKind.BYTE), (2, 0.5, SymbolKind.INT32),
        ]


class TestFailures:
    def test_integrity_error(self):
        registry = CompressorRegistry([ZlibCompressor(), TruncatingCompressor()])
        with pytest.raises(IntegrityError) as exc_info:
            run_sweep(registry, [128], [0.5], ["BYTE"], seed=0)
        err = exc_info.value
        assert err.compressor == "truncating"
        assert err.expected_size == 128
        assert err.actual_size == 127
        assert err.cell == (128, 0.5, "BYTE")

    def test_integrity_error_in_parallel_sweep(self):
        registry = CompressorRegistry([TruncatingCompressor()])
        orch = BenchmarkOrchestrator(registry, [64, 128], [0.0, 1.0], ["BYTE"], seed=0, workers=3)
        with pytest.raises(IntegrityError):
            orch.run()

    def test_records_before_run(self, zlib_gzip):
        orch = BenchmarkOrchestrator(zlib_gzip, [128], [0.0], ["BYTE"])
        with pytest.raises(RuntimeError):
            orch.records

    def test_records_after_failed_run(self):
        registry = CompressorRegistry([TruncatingCompressor()])
        orch = BenchmarkOrchestrator(registry, [128], [0.0], ["BYTE"], seed=0)
        with pytest.raises(IntegrityError):
            orch.run()
        with pytest.raises(RuntimeError):
            orch.records

    def test_empty_registry(self):
        orch = BenchmarkOrchestrator(CompressorRegistry(), [128], [0.0], ["BYTE"])
        with pytest.raises(ConfigValidationError):
            orch.run()

    @pytest.mark.parametrize("kwargs", [
        {"sizes": [0]},
        {"entropies": [1.5]},
        {"kinds": ["COMPLEX"]},
        {"workers": 0},
    ])
    def test_invalid_grid(self, zlib_gzip, kwargs):
        args = {"sizes": [128], "entropies": [0.5], "kinds": ["BYTE"]}
        args.update(kwargs)
        with pytest.raises(ConfigValidationError):
            BenchmarkOrchestrator(zlib_gzip, **args)


class TestReproducibility:
    def _grid(self, registry, **kwargs):
        return BenchmarkOrchestrator(
            registry, [128, 512], [0.0, 0.5, 1.0], ["INT32", "BYTE"], **kwargs,
        )

    def test_same_seed_same_records(self, zlib_gzip):
        a = self._grid(zlib_gzip, seed=11).run()
        b = self._grid(zlib_gzip, seed=11).run()
        assert [r.compressed_size for r in a] == [r.compressed_size for r in b]
        assert [r.measured_entropy for r in a] == [r.measured_entropy for r in b]

    def test_parallel_matches_sequential(self, zlib_gzip):
        seq = self._grid(zlib_gzip, seed=7, workers=1).run()
        par = self._grid(zlib_gzip, seed=7, workers=4).run()
        assert len(seq) == len(par) == 24
        for a, b in zip(seq, par):
            assert (a.original_size, a.target_entropy, a.kind, a.compressor) == \
                   (b.original_size, b.target_entropy, b.kind, b.compressor)
            assert a.compressed_size == b.compressed_size
            assert a.measured_entropy == b.measured_entropy

    def test_records_property_after_run(self, zlib_gzip):
        orch = self._grid(zlib_gzip, seed=2)
        records = orch.run()
        assert orch.records is records
        assert isinstance(records, tuple)
        assert all(isinstance(r, BenchmarkRecord) for r in records)


class TestProgressAndOutput:
    def test_progress_callback(self, zlib_gzip):
        calls = []
        orch = BenchmarkOrchestrator(zlib_gzip, [64, 128], [0.0, 1.0], ["BYTE"], seed=0)
        orch.run(progress=lambda done, total, cell: calls.append((done, total, cell)))
        assert [c[0] for c in calls] == [1, 2, 3, 4]
        assert all(c[1] == 4 for c in calls)
        assert calls[0][2] == (64, 0.0, SymbolKind.BYTE)

    def test_progress_callback_parallel(self, zlib_gzip):
        calls = []
        orch = BenchmarkOrchestrator(zlib_gzip, [64, 128], [0.0, 1.0], ["BYTE"],
                                     seed=0, workers=2)
        orch.run(progress=lambda done, total, cell: calls.append(done))
        assert calls == [1, 2, 3, 4]

    def test_output_dir_artifacts(self, tmp_path):
        registry = CompressorRegistry([ZlibCompressor()])
        (record,) = run_sweep(registry, [128], [0.0], ["BYTE"], seed=0, output_dir=tmp_path)

        payload = tmp_path / "BYTE_128_0.0"
        artifact = tmp_path / "BYTE_128_0.0.zlib"
        assert payload.exists() and artifact.exists()
        assert payload.stat().st_size == 128
        assert artifact.stat().st_size == record.compressed_size
        assert record.payload_file == str(payload)
        assert record.compressed_file == str(artifact)

    def test_no_files_without_output_dir(self, zlib_gzip):
        (record, _) = run_sweep(zlib_gzip, [128], [0.0], ["BYTE"], seed=0)
        assert record.payload_file is None
        assert record.compressed_file is None


class TestRanges:
    def test_size_range_inclusive(self):
        assert size_range(128, 640, 256) == [128, 384, 640]
        assert size_range(128, 700, 256) == [128, 384, 640]

    def test_size_range_invalid(self):
        with pytest.raises(ConfigValidationError):
            size_range(128, 256, 0)
        with pytest.raises(ConfigValidationError):
            size_range(0, 256, 1)

    def test_entropy_range_default_grid(self):
        values = entropy_range(0.0, 1.0, 0.1)
        assert len(values) == 11
        assert values[0] == 0.0
        assert values[3] == 0.3
        assert values[-1] == 1.0

    def test_entropy_range_single(self):
        assert entropy_range(0.5, 0.5, 0.1) == [0.5]

    def test_entropy_range_empty(self):
        assert entropy_range(0.8, 0.2, 0.1) == []

    def test_entropy_range_invalid(self):
        with pytest.raises(ConfigValidationError):
            entropy_range(0.0, 1.5, 0.1)
        with pytest.raises(ConfigValidationError):
            entropy_range(0.0, 1.0, 0.0)


class TestFromConfig:
    def test_builds_grid_from_config(self):
        config = SweepConfig(
            entropy_min=0.0, entropy_max=1.0, entropy_step=0.5,
            size_min=128, size_max=256, size_step=128,
            kinds=("BYTE",), compressors=("lz4", "zlib"), seed=3,
        )
        orch = BenchmarkOrchestrator.from_config(config)
        assert orch.registry.names() == ["lz4", "zlib"]
        assert orch.sizes == [128, 256]
        assert orch.entropies == [0.0, 0.5, 1.0]
        assert orch.kinds == [SymbolKind.BYTE]
        assert len(orch.run()) == 2 * 3 * 1 * 2

    def test_explicit_registry_wins(self, zlib_gzip):
        config = SweepConfig(compressors=("lz4",))
        orch = BenchmarkOrchestrator.from_config(config, registry=zlib_gzip)
        assert orch.registry is zlib_gzip
