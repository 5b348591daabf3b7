# Descriptive fits over the hour buckets: OLS murders~shootings, lowess shootings~hour

from dataclasses import dataclass, field

import numpy as np
import pandas as pd
import statsmodels.api as sm
from sklearn.linear_model import LinearRegression
from sklearn.metrics import r2_score

from config import LOESS_SPAN


# lowess yields NaN when a local window holds fewer points than this
MIN_LOESS_NEIGHBOURS = 4


def _require_points(df: pd.DataFrame, cols, min_points: int = 2) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise KeyError(f"Hour buckets missing columns: {missing}")
    if len(df) < min_points:
        raise ValueError(f"Need at least {min_points} hour buckets to fit, got {len(df)}")


@dataclass
class LinearFit:
    """Ordinary least squares of y on x."""

    x_col: str
    y_col: str
    intercept: float
    slope: float
    r_squared: float
    n_obs: int
    model: LinearRegression = field(repr=False)

    def predict(self, x) -> np.ndarray:
        x = np.asarray(x, dtype=float).reshape(-1, 1)
        return self.model.predict(x)

    def summary(self) -> pd.DataFrame:
        return pd.DataFrame([{
            "model": "linear",
            "formula": f"{self.y_col} ~ {self.x_col}",
            "intercept": self.intercept,
            "slope": self.slope,
            "r_squared": self.r_squared,
            "n_obs": self.n_obs,
        }])


@dataclass
class LoessFit:
    """
    Locally weighted regression of y on x. Each prediction refits around
    the query point using the nearest `span` share of the training data.
    """

    x_col: str
    y_col: str
    span: float
    x: np.ndarray = field(repr=False)
    y: np.ndarray = field(repr=False)

    def predict(self, x_new) -> np.ndarray:
        x_new = np.asarray(x_new, dtype=float)
        return sm.nonparametric.lowess(
            self.y, self.x, frac=self.span, it=0, xvals=x_new
        )

    @property
    def r_squared(self) -> float:
        return float(r2_score(self.y, self.predict(self.x)))

    def summary(self) -> pd.DataFrame:
        return pd.DataFrame([{
            "model": "loess",
            "formula": f"{self.y_col} ~ {self.x_col}",
            "span": self.span,
            "r_squared": self.r_squared,
            "n_obs": len(self.x),
        }])


def fit_linear(hour_buckets: pd.DataFrame, x_col: str = "shootings", y_col: str = "murders") -> LinearFit:
    """Fit murders ~ shootings across the hour buckets."""
    _require_points(hour_buckets, [x_col, y_col])

    X = hour_buckets[[x_col]].to_numpy(dtype=float)
    y = hour_buckets[y_col].to_numpy(dtype=float)

    model = LinearRegression().fit(X, y)
    return LinearFit(
        x_col=x_col,
        y_col=y_col,
        intercept=float(model.intercept_),
        slope=float(model.coef_[0]),
        r_squared=float(r2_score(y, model.predict(X))),
        n_obs=len(y),
        model=model,
    )


def fit_loess(
    hour_buckets: pd.DataFrame,
    x_col: str = "hour",
    y_col: str = "shootings",
    span: float = LOESS_SPAN,
) -> LoessFit:
    """Fit the shootings-by-hour smoother."""
    _require_points(hour_buckets, [x_col, y_col])
    if not 0 < span <= 1:
        raise ValueError(f"span must be in (0, 1], got {span}")
    neighbours = int(span * len(hour_buckets) + 1e-10)
    if neighbours < MIN_LOESS_NEIGHBOURS:
        raise ValueError(
            f"span {span} over {len(hour_buckets)} hour buckets leaves {neighbours} points per local fit, "
            f"need at least {MIN_LOESS_NEIGHBOURS}"
        )

    return LoessFit(
        x_col=x_col,
        y_col=y_col,
        span=span,
        x=hour_buckets[x_col].to_numpy(dtype=float),
        y=hour_buckets[y_col].to_numpy(dtype=float),
    )


__all__ = ["LinearFit", "LoessFit", "fit_linear", "fit_loess", "MIN_LOESS_NEIGHBOURS"]
