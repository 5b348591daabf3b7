import numpy as np
import pandas as pd
import pytest

from nypd_shooting_pipelines.models.regression import fit_linear, fit_loess
from nypd_shooting_pipelines.models.modeling_master import run_models


def _hour_buckets(shootings, murders=None):
    hours = np.arange(len(shootings)) * 0.5
    df = pd.DataFrame({"hour": hours, "shootings": shootings})
    df["murders"] = murders if murders is not None else np.zeros(len(shootings), dtype=int)
    return df


def test_perfect_linear_relation():
    shootings = np.arange(2, 98, 2)
    buckets = _hour_buckets(shootings, shootings // 2)
    fit = fit_linear(buckets)
    assert fit.slope == pytest.approx(0.5)
    assert fit.intercept == pytest.approx(0.0, abs=1e-9)
    assert fit.r_squared == pytest.approx(1.0)
    assert fit.n_obs == 48
    assert fit.predict([10, 20]).tolist() == pytest.approx([5.0, 10.0])


def test_linear_summary_is_a_table():
    buckets = _hour_buckets([10, 20, 30], [2, 5, 7])
    summary = fit_linear(buckets).summary()
    assert summary.columns.tolist() == ["model", "formula", "intercept", "slope", "r_squared", "n_obs"]
    assert summary.loc[0, "formula"] == "murders ~ shootings"
    assert 0 < summary.loc[0, "r_squared"] <= 1


def test_linear_fit_needs_two_buckets():
    with pytest.raises(ValueError, match="at least 2"):
        fit_linear(_hour_buckets([10], [2]))
    assert fit_linear(_hour_buckets([10, 20], [2, 4])).slope == pytest.approx(0.2)


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
def test_loess_rejects_too_few_buckets(n):
    with pytest.raises(ValueError):
        fit_loess(_hour_buckets(list(range(10, 10 + n))))


def test_loess_smallest_window_predicts_numbers():
    buckets = _hour_buckets([12, 9, 7, 8, 11, 15])
    pred = fit_loess(buckets).predict(buckets["hour"])
    assert not np.isnan(pred).any()
    assert fit_loess(buckets).r_squared <= 1
    with pytest.raises(ValueError, match="points per local fit"):
        fit_loess(buckets, span=0.5)


def test_fit_requires_columns():
    with pytest.raises(KeyError, match="murders"):
        fit_linear(pd.DataFrame({"shootings": [1, 2, 3]}))


def test_loess_reproduces_a_line():
    hours = np.arange(48) * 0.5
    buckets = pd.DataFrame({"hour": hours, "shootings": 3 * hours + 10})
    fit = fit_loess(buckets)
    assert fit.predict(hours) == pytest.approx(3 * hours + 10)
    assert fit.r_squared == pytest.approx(1.0)


def test_loess_follows_daily_cycle():
    hours = np.arange(48) * 0.5
    # busy around midnight, quiet around noon
    shootings = 100 + 80 * np.cos(2 * np.pi * hours / 24)
    fit = fit_loess(pd.DataFrame({"hour": hours, "shootings": shootings}))
    pred = fit.predict(hours)
    trough = hours[np.argmin(pred)]
    assert 6 <= trough <= 18
    assert pred[0] > pred[24]
    assert pred[-1] > pred[24]


def test_loess_span_bounds():
    buckets = _hour_buckets([1, 2, 3])
    with pytest.raises(ValueError, match="span"):
        fit_loess(buckets, span=0)
    with pytest.raises(ValueError, match="span"):
        fit_loess(buckets, span=1.5)


def test_run_models_predictions():
    shootings = np.array([40, 30, 20, 15, 20, 35, 50, 60] * 6)
    buckets = _hour_buckets(shootings, shootings // 5)
    out = run_models(buckets, show=False)

    preds = out["predictions"]
    assert len(preds) == 48
    assert preds["pred_murders"].to_numpy() == pytest.approx(out["linear"].predict(shootings))
    assert preds["pred_shootings"].notna().all()
    assert out["summaries"]["model"].tolist() == ["linear", "loess"]
    # buckets are left as they were
    assert "pred_murders" not in buckets.columns
