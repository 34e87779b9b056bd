"""Rich CLI formatting helpers for entrobench commands."""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.progress import BarColumn, Progress, TextColumn, TimeRemainingColumn
from rich.table import Table
from rich.text import Text

console = Console()


def setup_logging(verbose: bool = False):
    """Route library logging through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True, show_path=verbose)],
        force=True,
    )


def print_header(title: str):
    """Print a styled section header."""
    console.print(Panel(Text(title, style="bold cyan"), border_style="dim"))


def print_records(records, limit: int = 40):
    """Print sweep records as a rich table (first ``limit`` rows)."""
    table = Table(title="Sweep Records", border_style="cyan", padding=(0, 1))
    table.add_column("Kind", style="bold")
    table.add_column("Size", justify="right")
    table.add_column("Target H", justify="right", style="dim")
    table.add_column("Measured H", justify="right")
    table.add_column("Compressor")
    table.add_column("Compressed", justify="right")
    table.add_column("Ratio", justify="right", style="green")
    table.add_column("Time", justify="right", style="dim")

    for r in records[:limit]:
        table.add_row(
            str(r.kind),
            f"{r.original_size:,}",
            f"{r.target_entropy:.2f}",
            f"{r.measured_entropy:.4f}",
            r.compressor or "unknown",
            f"{r.compressed_size:,}" if r.compressed_size is not None else "-",
            f"{r.ratio:.2f}x" if r.ratio is not None else "-",
            f"{r.elapsed_ms:.3f} ms" if r.elapsed_ms is not None else "-",
        )

    console.print(table)
    if len(records) > limit:
        console.print(f"\n  [dim]... ({len(records) - limit} more records)[/dim]")


def print_summary(summary):
    """Print the per-compressor summary DataFrame from report.summarize()."""
    table = Table(title="Summary by Compressor", border_style="cyan", padding=(0, 2))
    table.add_column("Compressor", style="bold")
    table.add_column("Kind")
    table.add_column("Cells", justify="right", style="dim")
    table.add_column("Mean Ratio", justify="right", style="green")
    table.add_column("Max Ratio", justify="right")
    table.add_column("Compress", justify="right", style="dim")
    table.add_column("Decompress", justify="right", style="dim")

    for row in summary.itertuples(index=False):
        table.add_row(
            row.compressor,
            str(row.kind),
            str(row.cells),
            f"{row.mean_ratio:.2f}x",
            f"{row.max_ratio:.2f}x",
            f"{row.mean_compress_ms:.3f} ms",
            f"{row.mean_decompress_ms:.3f} ms",
        )
    console.print()
    console.print(table)


def print_compression_result(result, compressor: str, direction: str, output: str = None):
    """Print one compress/decompress result."""
    table = Table(title=f"{compressor} {direction}", border_style="cyan",
                  show_header=False, padding=(0, 2))
    table.add_column("Metric", style="dim")
    table.add_column("Value", style="bold")
    table.add_row("Original size", f"{result.original_size:,} bytes")
    table.add_row("Compressed size", f"{result.compressed_size:,} bytes")
    if result.compressed_size:
        table.add_row("Ratio", f"[green]{result.ratio:.2f}x[/green]")
    table.add_row("Duration", f"{result.elapsed_ms:.3f} ms")
    if result.source_path:
        table.add_row("Input", result.source_path)
    if output:
        table.add_row("Output", str(output))
    console.print(table)


def print_entropy(path: str, kind, size: int, order0: float, order1: float):
    """Print measured entropy of a payload."""
    table = Table(title="Payload Entropy", border_style="cyan", show_header=False, padding=(0, 2))
    table.add_column("Metric", style="dim")
    table.add_column("Value", style="bold")
    table.add_row("File", str(path))
    table.add_row("Kind", str(kind))
    table.add_row("Size", f"{size:,} bytes")
    table.add_row("Order-0 entropy", f"[green]{order0:.4f}[/green]")
    table.add_row("Order-1 entropy", f"{order1:.4f}")
    console.print(table)


def make_progress():
    """Create a rich progress bar for sweeps."""
    return Progress(
        TextColumn("[bold blue]{task.description}"),
        BarColumn(bar_width=40),
        TextColumn("[progress.percentage]{task.percentage:>3.0f}%"),
        TimeRemainingColumn(),
        console=console,
    )
