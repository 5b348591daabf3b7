# Project the incident table to the four analysed fields

import pandas as pd

from config import COLUMN_MAP
from nypd_shooting_pipelines.utils.logging import log_step


def select_and_rename(df: pd.DataFrame) -> pd.DataFrame:
    """Keep OCCUR_DATE, OCCUR_TIME, BORO, STATISTICAL_MURDER_FLAG as date, time, boro, murder."""
    missing = [c for c in COLUMN_MAP if c not in df.columns]
    if missing:
        raise KeyError(f"Incident data is missing required columns: {missing}")

    out = df.loc[:, list(COLUMN_MAP)].rename(columns=COLUMN_MAP)
    log_step("Select: date/time/boro/murder", out)
    return out
