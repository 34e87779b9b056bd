"""CLI entry point: python -m entrobench <command>"""

import argparse
import sys


def _csv_list(value: str):
    return [v.strip() for v in value.split(",") if v.strip()]


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="entrobench",
        description="Measure how entropy, size and type affect general-purpose compressors",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- sweep ---
    sweep_parser = subparsers.add_parser("sweep", help="Run the size x entropy x type sweep")
    sweep_parser.add_argument("--config", type=str, default=None, help="JSON sweep config")
    sweep_parser.add_argument("--entropy-min", type=float, default=None)
    sweep_parser.add_argument("--entropy-max", type=float, default=None)
    sweep_parser.add_argument("--entropy-step", type=float, default=None)
    sweep_parser.add_argument("--size-min", type=int, default=None)
    sweep_parser.add_argument("--size-max", type=int, default=None)
    sweep_parser.add_argument("--size-step", type=int, default=None)
    sweep_parser.add_argument("--kinds", type=_csv_list, default=None,
                              help="Comma-separated kinds (INT32,FLOAT32,FLOAT64,BYTE)")
    sweep_parser.add_argument("--compressors", type=_csv_list, default=None,
                              help="Comma-separated compressors (zlib,gzip,lz4,zstd)")
    sweep_parser.add_argument("--seed", type=int, default=None)
    sweep_parser.add_argument("--workers", type=int, default=None)
    sweep_parser.add_argument("--output-dir", type=str, default=None,
                              help="Persist payloads and compressed artifacts here")
    sweep_parser.add_argument("--results", type=str, default=None,
                              help="Write records to this .csv or .json file")
    sweep_parser.add_argument("--limit", type=int, default=40,
                              help="Max record rows to print (default: 40)")

    # --- generate ---
    gen_parser = subparsers.add_parser("generate", help="Generate one payload file")
    gen_parser.add_argument("--size", type=int, required=True, help="Payload size in bytes")
    gen_parser.add_argument("--kind", type=str, default="INT32")
    gen_parser.add_argument("--entropy", type=float, required=True)
    gen_parser.add_argument("--seed", type=int, default=None)
    gen_parser.add_argument("-o", "--output", type=str, default=None,
                            help="Output file (default: <LABEL>_<size>_<entropy> in --dir)")
    gen_parser.add_argument("--dir", type=str, default="data")

    # --- entropy ---
    ent_parser = subparsers.add_parser("entropy", help="Measure entropy of a payload file")
    ent_parser.add_argument("input", type=str)
    ent_parser.add_argument("--kind", type=str, default=None,
                            help="Element kind (default: from the file name)")

    # --- compress / decompress ---
    for command, help_text in (("compress", "Compress a file"),
                               ("decompress", "Decompress a file")):
        p = subparsers.add_parser(command, help=help_text)
        p.add_argument("input", type=str)
        p.add_argument("-c", "--compressor", type=str, default="zlib")
        p.add_argument("-o", "--output", type=str, default=None)

    # --- list ---
    subparsers.add_parser("list", help="List available compressors")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    from .cli_formatting import setup_logging
    setup_logging(args.verbose)

    if args.command == "sweep":
        _cmd_sweep(args)
    elif args.command == "generate":
        _cmd_generate(args)
    elif args.command == "entropy":
        _cmd_entropy(args)
    elif args.command == "compress":
        _cmd_compress(args)
    elif args.command == "decompress":
        _cmd_decompress(args)
    elif args.command == "list":
        _cmd_list(args)


def _cmd_sweep(args):
    from .cli_formatting import make_progress, print_header, print_records, print_summary
    from .config import SweepConfig
    from .evaluation.benchmarks import BenchmarkOrchestrator
    from .evaluation.report import save_records, summarize

    config = SweepConfig.from_json(args.config) if args.config else SweepConfig()
    config = config.replace(
        entropy_min=args.entropy_min,
        entropy_max=args.entropy_max,
        entropy_step=args.entropy_step,
        size_min=args.size_min,
        size_max=args.size_max,
        size_step=args.size_step,
        kinds=args.kinds,
        compressors=args.compressors,
        seed=args.seed,
        workers=args.workers,
        output_dir=args.output_dir,
    )

    orchestrator = BenchmarkOrchestrator.from_config(config)
    print_header(
        f"Sweep: {len(config.sizes)} sizes x {len(config.entropies)} entropies x "
        f"{len(config.kinds)} kinds, compressors: {', '.join(config.compressors)}"
    )

    with make_progress() as progress:
        task = progress.add_task("Sweeping", total=config.n_cells)
        records = orchestrator.run(
            progress=lambda done, total, cell: progress.update(task, completed=done),
        )

    print_records(records, limit=args.limit)
    print_summary(summarize(records))

    if args.results:
        path = save_records(records, args.results)
        print(f"\nRecords written to {path}")


def _cmd_generate(args):
    from pathlib import Path
    from .cli_formatting import print_entropy
    from .data.synthetic import SyntheticDataGenerator
    from .data.types import GeneratorConfig, SymbolKind
    from .evaluation.entropy import payload_entropy
    from .storage.artifacts import payload_name

    kind = SymbolKind.parse(args.kind)
    config = GeneratorConfig(args.size, kind, args.entropy)
    output = Path(args.output) if args.output else Path(args.dir) / payload_name(kind, args.size, args.entropy)

    data = SyntheticDataGenerator.for_kind(config, seed=args.seed).generate(output)
    print_entropy(
        str(output), kind, len(data),
        payload_entropy(data, kind), payload_entropy(data, kind, order=1),
    )


def _cmd_entropy(args):
    from pathlib import Path
    from .cli_formatting import print_entropy
    from .data.types import SymbolKind
    from .evaluation.entropy import payload_entropy
    from .storage.artifacts import parse_payload_name, read_payload

    path = Path(args.input)
    if not path.exists():
        print(f"Error: file not found: {args.input}")
        sys.exit(1)
    if args.kind:
        kind = SymbolKind.parse(args.kind)
    else:
        try:
            kind = parse_payload_name(path.name)[0]
        except ValueError:
            print(f"Error: cannot infer the kind from {path.name!r}; pass --kind")
            sys.exit(1)
    data = read_payload(path)
    print_entropy(
        str(path), kind, len(data),
        payload_entropy(data, kind), payload_entropy(data, kind, order=1),
    )


def _get_compressor(name: str):
    from .codec.registry import build_registry
    return build_registry([name]).get_all()[0]


def _cmd_compress(args):
    from .cli_formatting import print_compression_result

    compressor = _get_compressor(args.compressor)
    output = args.output if args.output else compressor.artifact_path(args.input)
    result = compressor.compress_file(args.input, output_path=output)
    print_compression_result(result, compressor.name, "compress", output)


def _cmd_decompress(args):
    from pathlib import Path
    from .cli_formatting import print_compression_result

    compressor = _get_compressor(args.compressor)
    output = args.output
    if output is None:
        path = Path(args.input)
        suffix = f".{compressor.name}"
        if path.name.endswith(suffix):
            output = path.with_name(path.name[:-len(suffix)])
        else:
            output = path.with_name(path.name + ".out")
    result = compressor.decompress_file(args.input, output_path=output)
    print_compression_result(result, compressor.name, "decompress", output)


def _cmd_list(args):
    from .codec.backends import AVAILABLE_COMPRESSORS
    from .codec.registry import DEFAULT_COMPRESSORS

    for name, cls in AVAILABLE_COMPRESSORS.items():
        marker = " (default)" if name in DEFAULT_COMPRESSORS else ""
        print(f"{name:<8} {cls.__name__}{marker}")


if __name__ == "__main__":
    main()
