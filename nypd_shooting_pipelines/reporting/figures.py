# Charts: counts per grouping and observed-vs-predicted for both models

from pathlib import Path
from typing import Dict, List, Optional

import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns
from rich.console import Console

from config import FIGURES_DIR

console = Console()

TITLES = {
    "boro": ("Shootings and Murders by Borough", "Borough"),
    "hour": ("Shootings and Murders by Time of Day", "Hour (half-hour buckets)"),
    "month": ("Shootings and Murders by Month", "Month"),
    "year": ("Shootings and Murders by Year", "Year"),
}


def _save(fig_path: Path) -> Path:
    plt.tight_layout()
    plt.savefig(fig_path, dpi=150, bbox_inches="tight")
    plt.close()
    console.print(f"[dim cyan]  Saved: {fig_path.name}[/dim cyan]")
    return fig_path


def plot_counts(buckets: pd.DataFrame, key: str, out_dir: Path = FIGURES_DIR) -> Path:
    """Side-by-side bars of shootings and murders for each bucket."""
    long = buckets.melt(id_vars=key, value_vars=["shootings", "murders"],
                        var_name="measure", value_name="count")
    title, xlabel = TITLES.get(key, (f"Shootings and Murders by {key}", key))

    width = 14 if key == "hour" else 10
    plt.figure(figsize=(width, 5))
    ax = sns.barplot(data=long, x=key, y="count", hue="measure")
    ax.set_title(title)
    ax.set_xlabel(xlabel)
    ax.set_ylabel("Incidents")
    if key == "hour":
        ax.tick_params(axis="x", labelrotation=90)

    return _save(out_dir / f"counts_by_{key}.png")


def plot_linear_fit(predictions: pd.DataFrame, out_dir: Path = FIGURES_DIR) -> Path:
    plt.figure(figsize=(8, 6))
    plt.scatter(predictions["shootings"], predictions["murders"], color="steelblue", label="Observed")
    plt.scatter(predictions["shootings"], predictions["pred_murders"], color="firebrick", label="Predicted")
    plt.title("Murders vs Shootings per Hour Bucket (linear fit)")
    plt.xlabel("Shootings")
    plt.ylabel("Murders")
    plt.legend()
    return _save(out_dir / "model_linear.png")


def plot_loess_fit(predictions: pd.DataFrame, out_dir: Path = FIGURES_DIR) -> Path:
    ordered = predictions.sort_values("hour")
    plt.figure(figsize=(10, 6))
    plt.scatter(ordered["hour"], ordered["shootings"], color="steelblue", label="Observed")
    plt.plot(ordered["hour"], ordered["pred_shootings"], color="firebrick", linewidth=2, label="Loess")
    plt.title("Shootings by Time of Day (loess fit)")
    plt.xlabel("Hour")
    plt.ylabel("Shootings")
    plt.legend()
    return _save(out_dir / "model_loess.png")


def render_figures(
    buckets: Dict[str, pd.DataFrame],
    predictions: pd.DataFrame,
    yearly: Optional[pd.DataFrame] = None,
    out_dir: Path = FIGURES_DIR,
) -> List[Path]:
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    sns.set(style="whitegrid")

    paths = [plot_counts(table, key, out_dir) for key, table in buckets.items()]
    if yearly is not None:
        paths.append(plot_counts(yearly, "year", out_dir))
    paths.append(plot_linear_fit(predictions, out_dir))
    paths.append(plot_loess_fit(predictions, out_dir))
    return paths
