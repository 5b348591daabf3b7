# Write result tables as CSV

from pathlib import Path
from typing import Dict, List

import pandas as pd
from rich.console import Console

from config import PROCESSED_DIR
from nypd_shooting_pipelines.transform.aggregation import add_murder_rate

console = Console()


def save_results(results: dict, out_dir: Path = PROCESSED_DIR) -> List[Path]:
    """
    Save bucket tables (with murder_rate), the yearly summary, hour-bucket
    predictions and model summaries under out_dir.
    """
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    tables: Dict[str, pd.DataFrame] = {
        f"shootings_by_{key}": add_murder_rate(table)
        for key, table in results["buckets"].items()
    }
    if results.get("yearly") is not None:
        tables["shootings_by_year"] = add_murder_rate(results["yearly"])
    tables["hour_predictions"] = results["models"]["predictions"]
    tables["model_summaries"] = results["models"]["summaries"]

    paths = []
    for name, table in tables.items():
        path = out_dir / f"{name}.csv"
        table.to_csv(path, index=False)
        console.print(f"[cyan]Wrote:[/cyan] {path.name} ({len(table):,} rows)")
        paths.append(path)
    return paths
