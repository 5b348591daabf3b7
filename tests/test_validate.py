import pandas as pd
import pytest

from nypd_shooting_pipelines.validate.core import check_no_sentinels, validate_tidy_schema, validate_buckets


def test_check_no_sentinels_flags_leftovers():
    with pytest.raises(ValueError, match="PERP_SEX"):
        check_no_sentinels(pd.DataFrame({"PERP_SEX": ["M", "U"]}))
    check_no_sentinels(pd.DataFrame({"PERP_SEX": ["M", None], "VIC_SEX": ["U", "U"]}))


def test_validate_buckets_bound():
    bad = {"boro": pd.DataFrame({"boro": ["A"], "shootings": [1], "murders": [2]})}
    with pytest.raises(ValueError, match="murders > shootings"):
        validate_buckets(bad, total_rows=1)


def test_validate_buckets_conservation():
    table = pd.DataFrame({"hour": [0.0, 0.5], "shootings": [2, 3], "murders": [0, 1]})
    validate_buckets({"hour": table}, total_rows=5)
    with pytest.raises(ValueError, match="sum"):
        validate_buckets({"hour": table}, total_rows=6)


def test_validate_tidy_schema_hour_grid():
    tidy = pd.DataFrame({
        "date": pd.to_datetime(["2020-01-01"]),
        "time": ["10:20:00"],
        "boro": ["BRONX"],
        "murder": [False],
        "month": ["Jan"],
        "year": [2020],
        "hour": [10.25],
        "minute": [20],
    })
    with pytest.raises(ValueError, match="grid"):
        validate_tidy_schema(tidy)
    tidy["hour"] = 10.0
    validate_tidy_schema(tidy)
    with pytest.raises(ValueError, match="minute"):
        validate_tidy_schema(tidy.drop(columns=["minute"]))
