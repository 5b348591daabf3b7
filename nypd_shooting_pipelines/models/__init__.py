from .regression import LinearFit, LoessFit, fit_linear, fit_loess
from .modeling_master import run_models

__all__ = ["LinearFit", "LoessFit", "fit_linear", "fit_loess", "run_models"]
