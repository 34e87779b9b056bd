"""Tests for payload artifact naming and persistence."""

import pytest

from entrobench.data.synthetic import SyntheticDataGenerator
from entrobench.data.types import GeneratorConfig, SymbolKind
from entrobench.storage import (
    compressed_name,
    parse_payload_name,
    payload_name,
    read_payload,
    recalculate_entropy,
    write_compressed,
    write_payload,
)


class TestNaming:
    @pytest.mark.parametrize("kind, size, entropy, expected", [
        (SymbolKind.FLOAT64, 1024, 0.99, "DOUBLE_1024_0.99"),
        (SymbolKind.BYTE, 128, 0, "BYTE_128_0.0"),
        (SymbolKind.INT32, 640, 1.0, "INT_640_1.0"),
        ("FLOAT32", 384, 0.5, "FLOAT_384_0.5"),
    ])
    def test_payload_name(self, kind, size, entropy, expected):
        assert payload_name(kind, size, entropy) == expected

    def test_compressed_name(self):
        assert compressed_name("DOUBLE_1024_0.99", "lz4") == "DOUBLE_1024_0.99.lz4"

    def test_parse(self):
        assert parse_payload_name("DOUBLE_1024_0.99") == (SymbolKind.FLOAT64, 1024, 0.99)
        assert parse_payload_name("/tmp/x/INT_128_0.3") == (SymbolKind.INT32, 128, 0.3)

    @pytest.mark.parametrize("name", ["payload.bin", "DOUBLE_1024_0.99.lz4", "A_B_C_D"])
    def test_parse_rejects(self, name):
        with pytest.raises(ValueError):
            parse_payload_name(name)


class TestPersistence:
    def test_write_and_read(self, tmp_path):
        path = write_payload(tmp_path / "data", "BYTE", 16, 0.25, b"\x01" * 16)
        assert path.name == "BYTE_16_0.25"
        assert read_payload(path) == b"\x01" * 16

        artifact = write_compressed(path, "zlib", b"packed")
        assert artifact == tmp_path / "data" / "BYTE_16_0.25.zlib"
        assert read_payload(artifact) == b"packed"

    def test_recalculate_entropy_from_name(self, tmp_path):
        config = GeneratorConfig(2048, SymbolKind.INT32, 1.0)
        data = SyntheticDataGenerator.for_kind(config, seed=0).generate()
        path = write_payload(tmp_path, SymbolKind.INT32, 2048, 1.0, data)
        assert recalculate_entropy(path) > 0.99

    def test_recalculate_entropy_explicit_kind(self, tmp_path):
        path = tmp_path / "constant.bin"
        path.write_bytes(b"\x07" * 64)
        assert recalculate_entropy(path, kind="BYTE") == 0.0
        assert recalculate_entropy(path, kind="BYTE", order=1) == 0.0
