# Fit both hour-bucket models and attach their predictions

import pandas as pd
from rich.console import Console
from rich.table import Table

from nypd_shooting_pipelines.models.regression import fit_linear, fit_loess
from nypd_shooting_pipelines.utils.logging import log_step

console = Console()


def show_model_table(summaries: pd.DataFrame) -> None:
    table = Table(title="Hour-Bucket Models", show_header=True, header_style="bold magenta")
    table.add_column("Model", style="cyan")
    table.add_column("Formula", style="white")
    table.add_column("Intercept", justify="right")
    table.add_column("Slope", justify="right")
    table.add_column("R²", justify="right", style="green")

    for row in summaries.to_dict("records"):
        table.add_row(
            row["model"],
            row["formula"],
            f"{row['intercept']:.4f}" if pd.notna(row.get("intercept")) else "-",
            f"{row['slope']:.4f}" if pd.notna(row.get("slope")) else "-",
            f"{row['r_squared']:.3f}",
        )

    console.print(table)


def run_models(hour_buckets: pd.DataFrame, show: bool = True) -> dict:
    """
    Returns:
        Dict with:
            - linear: LinearFit (murders ~ shootings)
            - loess: LoessFit (shootings ~ hour)
            - predictions: hour buckets plus pred_murders and pred_shootings
            - summaries: one row per model
    """
    console.print("\n[bold cyan]Fitting hour-bucket models...[/bold cyan]")

    linear = fit_linear(hour_buckets)
    loess = fit_loess(hour_buckets)

    predictions = hour_buckets.copy()
    predictions["pred_murders"] = linear.predict(predictions["shootings"])
    predictions["pred_shootings"] = loess.predict(predictions["hour"])
    log_step("Model: hour-bucket predictions", predictions)

    summaries = pd.concat([linear.summary(), loess.summary()], ignore_index=True)
    if show:
        show_model_table(summaries)

    return {
        "linear": linear,
        "loess": loess,
        "predictions": predictions,
        "summaries": summaries,
    }
