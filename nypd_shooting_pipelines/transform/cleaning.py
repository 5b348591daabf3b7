# Sentinel-token cleanup for the perpetrator and location-description fields
from typing import Iterable, Optional

import numpy as np
import pandas as pd
from rich.console import Console
from rich.table import Table

from config import SENTINEL_COLUMNS, SENTINEL_TOKENS
from nypd_shooting_pipelines.utils.logging import log_step

console = Console()


def replace_sentinels(
    df: pd.DataFrame,
    columns: Optional[Iterable[str]] = None,
    tokens: Iterable[str] = SENTINEL_TOKENS,
) -> pd.DataFrame:
    """
    Null out placeholder values in the given columns.

    Matching is exact on the cell value, so "1020" only matches the string
    "1020" and never an integer 1020 or "10200". Columns not listed, or
    listed but absent from df, are left as they are.
    """
    df = df.copy()
    columns = SENTINEL_COLUMNS if columns is None else list(columns)
    tokens = list(tokens)

    for col in columns:
        if col not in df.columns:
            console.print(f"[yellow]Skipping absent column:[/yellow] {col}")
            continue
        hits = df[col].isin(tokens)
        if hits.any():
            df[col] = df[col].mask(hits, np.nan)
            console.print(f"[cyan]{col}:[/cyan] {int(hits.sum()):,} sentinel values -> null")

    return df


def null_counts(df: pd.DataFrame) -> pd.DataFrame:
    """Per-column null count and share, highest first."""
    counts = df.isna().sum()
    out = pd.DataFrame({
        "column": counts.index,
        "nulls": counts.values.astype(int),
        "pct": (counts.values / len(df) * 100) if len(df) else 0.0,
    })
    return out.sort_values("nulls", ascending=False, kind="stable").reset_index(drop=True)


def show_null_counts(counts: pd.DataFrame, title: str = "Null Counts After Cleaning") -> None:
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Column", style="cyan")
    table.add_column("Nulls", justify="right", style="red")
    table.add_column("%", justify="right", style="yellow")

    for row in counts.itertuples(index=False):
        table.add_row(row.column, f"{row.nulls:,}", f"{row.pct:.1f}")

    console.print(table)


def clean_incidents(df: pd.DataFrame, show: bool = True) -> pd.DataFrame:
    """
    Cleaning pass run right after loading.

    Steps:
        1. Replace sentinel tokens in the perpetrator / location columns
        2. Print per-column null counts (diagnostic only)
    """
    console.print("\n[bold cyan]Replacing sentinel tokens...[/bold cyan]")
    df = replace_sentinels(df)
    if show:
        show_null_counts(null_counts(df))
    log_step("Clean: sentinel tokens -> null", df)
    return df
