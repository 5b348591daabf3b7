# Shootings / murders per borough, hour bucket and month

from typing import Dict, Sequence

import pandas as pd
from rich.console import Console

from config import GROUP_KEYS
from nypd_shooting_pipelines.utils.logging import log_step

console = Console()


def summarize_by(df: pd.DataFrame, key: str) -> pd.DataFrame:
    """
    One row per observed value of key with shootings (row count) and
    murders (rows flagged as murder). Unobserved keys get no row, including
    unused categories of a categorical key. Rows with a missing key are
    counted in their own NaN bucket.
    """
    out = (
        df.groupby(key, observed=True, sort=True, dropna=False)["murder"]
          .agg(shootings="size", murders="sum")
          .reset_index()
    )
    out["shootings"] = out["shootings"].astype(int)
    out["murders"] = out["murders"].astype(int)
    return out


def aggregate_incidents(df: pd.DataFrame, keys: Sequence[str] = GROUP_KEYS) -> Dict[str, pd.DataFrame]:
    """Run summarize_by for each grouping key; returns {key: buckets}."""
    console.print("\n[bold cyan]Aggregating incidents...[/bold cyan]")
    buckets = {}
    for key in keys:
        buckets[key] = summarize_by(df, key)
        log_step(f"Aggregate: by {key}", buckets[key])
    return buckets


def summarize_by_year(df: pd.DataFrame) -> pd.DataFrame:
    return summarize_by(df, "year")


def add_murder_rate(buckets: pd.DataFrame) -> pd.DataFrame:
    """Append murders / shootings as 'murder_rate'."""
    buckets = buckets.copy()
    buckets["murder_rate"] = buckets["murders"] / buckets["shootings"]
    return buckets
