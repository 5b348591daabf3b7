# Step log for the shooting pipeline: one entry per stage with the frame shape.

from typing import List, Dict, Any, Optional
import pandas as pd
from rich.console import Console
from rich.table import Table

console = Console()

pipeline_log: List[Dict[str, Any]] = []


def log_step(step_name: str, df: pd.DataFrame, note: Optional[str] = None) -> None:
    """
    Record a pipeline stage and print its output shape.

    Parameters:
        step_name: Name of the stage that produced df
        df: Stage output
        note: Optional free-text remark shown in the summary table
    """
    if isinstance(df, pd.DataFrame):
        rows: Any = int(df.shape[0])
        cols: Any = int(df.shape[1])
    else:
        rows = cols = "N/A"

    pipeline_log.append({"step": step_name, "rows": rows, "cols": cols, "note": note or ""})

    rows_str = f"{rows:,}" if isinstance(rows, int) else rows
    console.print(f"[green]{step_name}[/green] [cyan]shape: {rows_str} x {cols}[/cyan]")


def show_pipeline_table() -> None:
    """Pretty-print the step log."""
    if not pipeline_log:
        console.print("[red]No pipeline steps logged yet.[/red]")
        return

    table = Table(title="Shooting Pipeline Summary", show_lines=True)
    table.add_column("Step", style="cyan", no_wrap=True)
    table.add_column("Rows", style="green", justify="right")
    table.add_column("Cols", style="yellow", justify="right")
    table.add_column("Note", style="dim")

    for entry in pipeline_log:
        rows = entry["rows"]
        rows_str = f"{rows:,}" if isinstance(rows, int) else str(rows)
        table.add_row(entry["step"], rows_str, str(entry["cols"]), entry["note"])

    console.print(table)


def clear_pipeline_log() -> None:
    """Empty the step log in place."""
    pipeline_log.clear()


__all__ = ["log_step", "show_pipeline_table", "clear_pipeline_log", "pipeline_log"]
