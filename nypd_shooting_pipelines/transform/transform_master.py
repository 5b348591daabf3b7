"""
transform_master.py

Runs clean -> select -> derive -> validate -> aggregate on the raw incident table.
"""

import pandas as pd
from rich.console import Console

from nypd_shooting_pipelines.transform.cleaning import clean_incidents
from nypd_shooting_pipelines.transform.selection import select_and_rename
from nypd_shooting_pipelines.transform.temporal import add_calendar_features
from nypd_shooting_pipelines.transform.aggregation import aggregate_incidents, summarize_by_year
from nypd_shooting_pipelines.validate.core import check_no_sentinels, validate_tidy_schema, validate_buckets

console = Console()


def run_transforms(raw: pd.DataFrame, date_errors: str = "raise", show_nulls: bool = True) -> dict:
    """
    Parameters:
        raw: Incident table as loaded from the source CSV
        date_errors: "raise" or "skip" for unparseable date/time rows
        show_nulls: Print the null-count diagnostic table

    Returns:
        Dict with:
            - cleaned: raw table with sentinel tokens nulled
            - tidy: date/time/boro/murder plus derived calendar columns
            - buckets: {"boro": ..., "hour": ..., "month": ...}
            - yearly: shootings/murders per year
    """
    console.print("\n[bold cyan]=== TRANSFORM PIPELINE START ===[/bold cyan]\n")

    cleaned = clean_incidents(raw, show=show_nulls)
    check_no_sentinels(cleaned)

    tidy = add_calendar_features(select_and_rename(cleaned), errors=date_errors)
    validate_tidy_schema(tidy)

    buckets = aggregate_incidents(tidy)
    validate_buckets(buckets, total_rows=len(tidy))

    console.print("\n[green]Transformation completed successfully.[/green]\n")
    return {
        "cleaned": cleaned,
        "tidy": tidy,
        "buckets": buckets,
        "yearly": summarize_by_year(tidy),
    }
