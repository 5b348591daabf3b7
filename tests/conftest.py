import pandas as pd
import pytest

from nypd_shooting_pipelines.utils.logging import clear_pipeline_log


def make_raw(rows):
    """Build a raw incident table from (date, time, boro, murder) tuples."""
    records = []
    for i, (date, time, boro, murder) in enumerate(rows):
        records.append({
            "INCIDENT_KEY": 100000 + i,
            "OCCUR_DATE": date,
            "OCCUR_TIME": time,
            "BORO": boro,
            "LOCATION_DESC": ["MULTI DWELL - PUBLIC HOUS", "NONE", "1020", "(null)"][i % 4],
            "STATISTICAL_MURDER_FLAG": murder,
            "PERP_AGE_GROUP": ["18-24", "UNKNOWN", "224", "25-44"][i % 4],
            "PERP_SEX": ["M", "U", "F", "(null)"][i % 4],
            "PERP_RACE": ["BLACK", "UNKNOWN", "WHITE HISPANIC", "940"][i % 4],
            "VIC_AGE_GROUP": ["UNKNOWN", "25-44", "18-24", "45-64"][i % 4],
        })
    return pd.DataFrame(records)


def hourly_rows():
    """
    Incidents spread over all 48 half-hour buckets, fewer around midday,
    with roughly one murder in four.
    """
    rows = []
    k = 0
    for i in range(48):
        hour, minute = divmod(i, 2)
        time = f"{hour:02d}:{45 if minute else 15}:00"
        n = 5 + (i % 7) + abs(24 - i) // 2
        for j in range(n):
            date = f"{(k % 12) + 1:02d}/15/{2019 + k % 3}"
            rows.append((date, time, ["BRONX", "BROOKLYN", "QUEENS"][k % 3], j < n // 4))
            k += 1
    return rows


@pytest.fixture(autouse=True)
def _fresh_pipeline_log():
    clear_pipeline_log()
    yield
    clear_pipeline_log()


@pytest.fixture
def raw_two_boroughs():
    rows = (
        [("01/05/2021", "14:45:00", "A", True)]
        + [("02/10/2021", "14:10:00", "A", False)] * 2
        + [("03/15/2022", "23:59:00", "B", True)] * 2
        + [("03/20/2022", "00:00:00", "B", False)] * 3
    )
    return make_raw(rows)


@pytest.fixture
def raw_hourly():
    return make_raw(hourly_rows())
