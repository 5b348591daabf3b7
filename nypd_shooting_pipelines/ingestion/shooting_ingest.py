# Raw data ingestion from NYC Open Data (NYPD Shooting Incident Data, Historic)
import io
from pathlib import Path
from typing import Optional, Union

import pandas as pd
import requests
from rich.console import Console

from config import SHOOTINGS_URL, REQUEST_TIMEOUT_S
from nypd_shooting_pipelines.utils.logging import log_step

console = Console()


def fetch_shootings_csv(url: str = SHOOTINGS_URL, timeout: int = REQUEST_TIMEOUT_S) -> bytes:
    """Download the shooting CSV as raw bytes. HTTP errors propagate."""
    console.print(f"[cyan]Requesting:[/cyan] {url}")
    r = requests.get(url, timeout=timeout)
    r.raise_for_status()
    console.print(f"[cyan]Received:[/cyan] {len(r.content):,} bytes")
    return r.content


def load_shootings(
    url: str = SHOOTINGS_URL,
    cache_path: Optional[Union[str, Path]] = None,
) -> pd.DataFrame:
    """
    Load the raw incident table, one row per reported shooting.

    Parameters:
        url: CSV endpoint
        cache_path: If given, the downloaded bytes are also written there

    Returns:
        DataFrame with pandas-inferred column types
    """
    console.print("\n[bold cyan]Loading NYPD shooting incidents...[/bold cyan]")

    content = fetch_shootings_csv(url)
    if cache_path is not None:
        cache_path = Path(cache_path)
        cache_path.parent.mkdir(parents=True, exist_ok=True)
        cache_path.write_bytes(content)
        console.print(f"[yellow]Saved raw copy:[/yellow] {cache_path}")

    df = pd.read_csv(io.BytesIO(content), encoding="utf-8")
    if df.empty:
        raise pd.errors.EmptyDataError(f"No incident rows returned from {url}")

    log_step("Load: raw incidents", df)
    return df
