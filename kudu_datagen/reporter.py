from __future__ import annotations

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from kudu_datagen.domain.stats import InsertStats


def build_summary_table(stats: InsertStats) -> Table:
    """
    Render the counters of one insert run as a rich table.
    """
    table = Table(
        title="Kudu Data Generator Run",
        box=box.ROUNDED,
        caption=f"Table: {stats.table}",
    )

    table.add_column("Start Key", justify="right", style="cyan")
    table.add_column("Last Key", justify="right", style="cyan")
    table.add_column("Rows Applied", justify="right", style="magenta")
    table.add_column("Rows Failed", justify="right", style="red")
    table.add_column("Duration (s)", justify="right", style="green")
    table.add_column("Throughput (rows/s)", justify="right", style="bold green")

    last_key = "N/A" if stats.last_key is None else str(stats.last_key)
    table.add_row(
        str(stats.start_key),
        last_key,
        f"{stats.rows_applied:,}",
        f"{stats.rows_failed:,}",
        f"{stats.duration_seconds:.1f}",
        f"{stats.throughput_rows_per_sec:,.2f}",
    )
    return table


def print_summary(stats: Optional[InsertStats], console: Optional[Console] = None) -> None:
    console = console or Console(stderr=True)

    if stats is None:
        console.print("[yellow]No rows were inserted.[/yellow]")
        return

    console.print(build_summary_table(stats))
