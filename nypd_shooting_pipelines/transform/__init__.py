from .cleaning import replace_sentinels, null_counts, show_null_counts, clean_incidents
from .selection import select_and_rename
from .temporal import add_calendar_features, hour_bucket
from .aggregation import summarize_by, aggregate_incidents, summarize_by_year, add_murder_rate
from .transform_master import run_transforms

__all__ = [
    "replace_sentinels",
    "null_counts",
    "show_null_counts",
    "clean_incidents",
    "select_and_rename",
    "add_calendar_features",
    "hour_bucket",
    "summarize_by",
    "aggregate_incidents",
    "summarize_by_year",
    "add_murder_rate",
    "run_transforms",
]
