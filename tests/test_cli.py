"""Tests for the command-line entry point."""

import json

import pytest

from entrobench.__main__ import main


class TestCommands:
    def test_no_command_prints_help(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "sweep" in capsys.readouterr().out

    def test_list(self, capsys):
        main(["list"])
        out = capsys.readouterr().out
        for name in ("zlib", "gzip", "lz4", "zstd"):
            assert name in out
        assert "(default)" in out

    def test_generate_default_name(self, tmp_path):
        main(["generate", "--size", "256", "--kind", "BYTE", "--entropy", "0.5",
              "--seed", "1", "--dir", str(tmp_path)])
        path = tmp_path / "BYTE_256_0.5"
        assert path.stat().st_size == 256

    def test_generate_then_entropy(self, tmp_path, capsys):
        out = tmp_path / "payload.bin"
        main(["generate", "--size", "1024", "--kind", "INT32", "--entropy", "1.0",
              "--seed", "2", "-o", str(out)])
        assert out.stat().st_size == 1024
        capsys.readouterr()
        main(["entropy", str(out), "--kind", "INT32"])
        assert "Order-0 entropy" in capsys.readouterr().out

    def test_entropy_missing_file(self, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            main(["entropy", str(tmp_path / "missing")])
        assert exc_info.value.code == 1

    @pytest.mark.parametrize("name", ["payload.bin", "INT_1024_0.5.zlib"])
    def test_entropy_kind_not_in_name(self, tmp_path, capsys, name):
        path = tmp_path / name
        path.write_bytes(b"\x00\x01\x02\x03" * 16)
        with pytest.raises(SystemExit) as exc_info:
            main(["entropy", str(path)])
        assert exc_info.value.code == 1
        assert "--kind" in capsys.readouterr().out

    def test_compress_decompress_round_trip(self, tmp_path):
        src = tmp_path / "DOUBLE_512_0.2"
        main(["generate", "--size", "512", "--kind", "FLOAT64", "--entropy", "0.2",
              "--seed", "0", "-o", str(src)])
        main(["compress", str(src), "-c", "lz4"])
        artifact = tmp_path / "DOUBLE_512_0.2.lz4"
        assert artifact.exists()

        original = src.read_bytes()
        src.unlink()
        main(["decompress", str(artifact), "-c", "lz4"])
        assert src.read_bytes() == original

    def test_decompress_unknown_suffix(self, tmp_path):
        src = tmp_path / "blob"
        src.write_bytes(b"hello" * 50)
        packed = tmp_path / "packed"
        main(["compress", str(src), "-c", "gzip", "-o", str(packed)])
        main(["decompress", str(packed), "-c", "gzip"])
        assert (tmp_path / "packed.out").read_bytes() == b"hello" * 50


class TestSweep:
    def test_small_sweep_writes_results(self, tmp_path):
        results = tmp_path / "records.json"
        main([
            "sweep", "--entropy-min", "0.0", "--entropy-max", "1.0", "--entropy-step", "0.5",
            "--size-min", "128", "--size-max", "256", "--size-step", "128",
            "--kinds", "BYTE,INT32", "--compressors", "zlib,lz4", "--seed", "0",
            "--results", str(results),
        ])
        with open(results) as f:
            rows = json.load(f)
        assert len(rows) == 2 * 3 * 2 * 2
        assert {r["compressor"] for r in rows} == {"zlib", "lz4"}
        assert rows[0]["kind"] == "BYTE"

    def test_sweep_from_config_file(self, tmp_path):
        config = tmp_path / "sweep.json"
        config.write_text(json.dumps({
            "entropy_min": 0.5, "entropy_max": 0.5,
            "size_min": 64, "size_max": 64, "size_step": 64,
            "kinds": ["FLOAT32"], "compressors": ["gzip"],
        }))
        out_dir = tmp_path / "artifacts"
        main(["sweep", "--config", str(config), "--output-dir", str(out_dir), "--seed", "3"])
        assert (out_dir / "FLOAT_64_0.5").exists()
        assert (out_dir / "FLOAT_64_0.5.gzip").exists()

    def test_invalid_compressor(self):
        with pytest.raises(ValueError):
            main(["sweep", "--compressors", "brotli"])
