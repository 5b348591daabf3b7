# Calendar features: month, year, half-hour bucketed hour

import numpy as np
import pandas as pd
from rich.console import Console

from config import DATE_FORMAT, MONTH_LABELS
from nypd_shooting_pipelines.utils.logging import log_step

console = Console()

TIME_PATTERN = r"^\s*(\d{1,2}):(\d{2})(?::\d{2})?\s*$"

_MURDER_TEXT = {"true": True, "false": False}


def hour_bucket(hour, minute):
    """Hour rounded down to the half hour: 14:10 -> 14.0, 14:45 -> 14.5."""
    return hour + np.where(np.asarray(minute) >= 30, 0.5, 0.0)


def _parse_time(times: pd.Series) -> pd.DataFrame:
    parts = times.astype(str).str.extract(TIME_PATTERN)
    hour = pd.to_numeric(parts[0], errors="coerce")
    minute = pd.to_numeric(parts[1], errors="coerce")
    bad = hour.isna() | minute.isna() | (hour > 23) | (minute > 59)
    return pd.DataFrame({"hour": hour, "minute": minute, "bad": bad}, index=times.index)


def _coerce_murder(flags: pd.Series) -> pd.Series:
    if pd.api.types.is_bool_dtype(flags) and not flags.isna().any():
        return flags.astype(bool)
    mapped = flags.astype("string").str.strip().str.lower().map(_MURDER_TEXT)
    unknown = mapped.isna()
    if unknown.any():
        sample = flags[unknown].astype(str).unique()[:5].tolist()
        raise ValueError(f"Unrecognised murder flag values: {sample}")
    return mapped.astype(bool)


def add_calendar_features(df: pd.DataFrame, errors: str = "raise") -> pd.DataFrame:
    """
    Derive month, year, hour and minute from the date/time strings.

    Parameters:
        df: Frame with 'date' (MM/DD/YYYY), 'time' (HH:MM or HH:MM:SS) and 'murder'
        errors: "raise" fails on the first batch of unparseable rows,
                "skip" drops them and reports how many were dropped

    Returns:
        Tidy frame with date (datetime64), month (ordered Jan..Dec), year (int),
        hour (float, half-hour steps), minute (int) and murder (bool)
    """
    if errors not in ("raise", "skip"):
        raise ValueError(f"errors must be 'raise' or 'skip', got {errors!r}")

    df = df.copy()
    dates = pd.to_datetime(df["date"], format=DATE_FORMAT, errors="coerce")
    times = _parse_time(df["time"])
    bad = dates.isna() | times["bad"]

    if bad.any():
        sample = df.loc[bad, ["date", "time"]].head(5).to_dict("records")
        if errors == "raise":
            raise ValueError(f"{int(bad.sum()):,} rows have unparseable date/time, e.g. {sample}")
        console.print(f"[yellow]Dropped rows with bad date/time:[/yellow] {int(bad.sum()):,}")
        df, dates, times = df[~bad].copy(), dates[~bad], times[~bad]

    df["date"] = dates
    df["month"] = pd.Categorical(
        dates.dt.month.map(lambda m: MONTH_LABELS[m - 1]),
        categories=MONTH_LABELS,
        ordered=True,
    )
    df["year"] = dates.dt.year.astype(int)
    df["minute"] = times["minute"].astype(int)
    df["hour"] = hour_bucket(times["hour"].astype(int), df["minute"]).astype(float)
    df["murder"] = _coerce_murder(df["murder"])

    log_step("Derive: month/year/hour", df, note="dropped bad rows" if errors == "skip" and bad.any() else None)
    return df
