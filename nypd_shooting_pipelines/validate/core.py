# Integrity checks for the cleaned, tidy and aggregated shooting data

from typing import Dict, Iterable, Optional

import numpy as np
import pandas as pd
from rich.console import Console

from config import SENTINEL_COLUMNS, SENTINEL_TOKENS, COLUMN_MAP

console = Console()

TIDY_COLUMNS = list(COLUMN_MAP.values()) + ["month", "year", "hour", "minute"]
HOUR_DOMAIN = np.arange(0, 24, 0.5)


def check_no_sentinels(df: pd.DataFrame, columns: Optional[Iterable[str]] = None) -> None:
    """Fail if any target column still holds a sentinel token."""
    columns = SENTINEL_COLUMNS if columns is None else list(columns)
    leftovers = {
        col: int(df[col].isin(list(SENTINEL_TOKENS)).sum())
        for col in columns
        if col in df.columns
    }
    leftovers = {col: n for col, n in leftovers.items() if n}

    if leftovers:
        console.print(f"[bold red]FAIL: sentinel tokens remain: {leftovers}[/bold red]")
        raise ValueError(f"Sentinel tokens remain after cleaning: {leftovers}")
    console.print("[green]PASS: no sentinel tokens in target columns.[/green]")


def validate_tidy_schema(df: pd.DataFrame) -> None:
    """Tidy frame has every derived column and hours on the half-hour grid."""
    missing = [c for c in TIDY_COLUMNS if c not in df.columns]
    if missing:
        console.print(f"[bold red]FAIL: tidy frame missing columns {missing}[/bold red]")
        raise ValueError(f"Tidy frame schema validation failed. Missing: {missing}")

    off_grid = ~df["hour"].isin(HOUR_DOMAIN)
    if off_grid.any():
        sample = df.loc[off_grid, "hour"].unique()[:5].tolist()
        console.print(f"[bold red]FAIL: {int(off_grid.sum()):,} hours off the half-hour grid[/bold red]")
        raise ValueError(f"Hour values outside 0..23.5 half-hour grid: {sample}")

    console.print("[green]PASS: tidy schema and hour domain.[/green]")


def validate_buckets(buckets: Dict[str, pd.DataFrame], total_rows: int) -> None:
    """
    Bucket invariants for every grouping:
    - murders <= shootings in each bucket
    - shootings sum to the number of tidy rows
    - one bucket per key
    """
    failures = []
    for key, table in buckets.items():
        over = table[table["murders"] > table["shootings"]]
        if not over.empty:
            failures.append(f"{key}: {len(over)} buckets with murders > shootings")

        total = int(table["shootings"].sum())
        if total != total_rows:
            failures.append(f"{key}: shootings sum {total:,} != {total_rows:,} rows")

        if table[key].duplicated().any():
            failures.append(f"{key}: duplicate bucket keys")

    if failures:
        for msg in failures:
            console.print(f"  [red]{msg}[/red]")
        raise ValueError(f"Bucket validation failed: {failures}")

    console.print(f"[green]PASS: bucket invariants hold for {list(buckets)}.[/green]")


__all__ = ["check_no_sentinels", "validate_tidy_schema", "validate_buckets", "TIDY_COLUMNS", "HOUR_DOMAIN"]
